from __future__ import annotations

import logging
from typing import Any

from youtube_orbit.core.errors import RemoteApiError


log = logging.getLogger(__name__)

# Google API error reasons returned by commentThreads.list when a video has no readable threads
_UNAVAILABLE_REASONS = {"commentsDisabled", "videoNotFound", "commentThreadNotFound"}
_UNAVAILABLE_PHRASES = ("not found", "disabled")


def is_comments_unavailable(error: BaseException) -> bool:
    """
    True when a comment-thread page failure means "this video has no comments to read"
    (comments disabled, or the video / thread collection is gone) rather than a real error.

    The message check mirrors what YouTube puts in its error text; the structured
    reason check covers bodies whose message wording differs.
    """
    if isinstance(error, RemoteApiError) and _UNAVAILABLE_REASONS.intersection(error.reasons()):
        return True
    message = str(error).lower()
    return any(phrase in message for phrase in _UNAVAILABLE_PHRASES)


def _reply_count(thread: dict[str, Any]) -> int:
    snippet = thread.get("snippet") or {}
    try:
        return int(snippet.get("totalReplyCount") or 0)
    except (TypeError, ValueError):
        return 0


def flatten_comment_threads(threads: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Expand one page of comment threads so each thread is immediately followed by
    the replies embedded in its payload. Threads without replies pass through as-is.

    The embedded replies array is used as-is; no extra request is made for
    threads with more replies than YouTube embeds.
    """
    flat: list[dict[str, Any]] = []
    for thread in threads:
        flat.append(thread)
        if not _reply_count(thread):
            continue

        replies = (thread.get("replies") or {}).get("comments")
        if replies is None:
            log.warning(
                "comments: thread %s reports %d replies but carries no reply payload; keeping thread only",
                thread.get("id"),
                _reply_count(thread),
            )
            continue
        flat.extend(replies)
    return flat
