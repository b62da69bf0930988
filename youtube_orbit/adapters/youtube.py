from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import ValidationError as PydanticValidationError

from youtube_orbit.schemas.activity import ActivityEnvelope, OrbitActivity, OrbitIdentity


log = logging.getLogger(__name__)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
CHANNEL_URL = "https://www.youtube.com/channel/{channel_id}"


def _video_link(video_id: str, comment_id: str | None = None) -> str:
    link = WATCH_URL.format(video_id=video_id)
    return f"{link}&lc={comment_id}" if comment_id else link


def video_to_activity(item: dict[str, Any]) -> ActivityEnvelope | None:
    """
    playlistItems resource -> "youtube:video" activity performed by the uploading channel.
    Returns None when the item carries no video id.
    """
    snippet = item.get("snippet") or {}
    details = item.get("contentDetails") or {}
    video_id = details.get("videoId") or (snippet.get("resourceId") or {}).get("videoId")
    if not video_id:
        return None

    channel_id = snippet.get("videoOwnerChannelId") or snippet.get("channelId")
    channel_title = snippet.get("videoOwnerChannelTitle") or snippet.get("channelTitle")
    title = snippet.get("title") or video_id

    return ActivityEnvelope(
        activity=OrbitActivity(
            activity_type="youtube:video",
            key=f"youtube-video-{video_id}",
            title=f"Uploaded {title}",
            description=snippet.get("description") or None,
            occurred_at=details.get("videoPublishedAt") or snippet.get("publishedAt"),
            link=_video_link(video_id),
            link_text="Watch on YouTube",
        ),
        identity=OrbitIdentity(
            uid=channel_id,
            username=channel_title,
            url=CHANNEL_URL.format(channel_id=channel_id) if channel_id else None,
        ),
    )


def comment_to_activity(item: dict[str, Any], *, video_id: str | None = None) -> ActivityEnvelope | None:
    """
    commentThreads item (top-level) or comments item (reply) -> "youtube:comment" activity.
    `video_id` is a fallback for replies whose snippet omits it.
    """
    snippet = item.get("snippet") or {}
    top_level = snippet.get("topLevelComment")
    if top_level:
        comment_id = top_level.get("id") or item.get("id")
        comment = top_level.get("snippet") or {}
    else:
        comment_id = item.get("id")
        comment = snippet

    vid = comment.get("videoId") or snippet.get("videoId") or video_id
    if not comment_id or not vid:
        return None

    is_reply = bool(comment.get("parentId"))
    author_channel_id = (comment.get("authorChannelId") or {}).get("value")

    return ActivityEnvelope(
        activity=OrbitActivity(
            activity_type="youtube:comment",
            key=f"youtube-comment-{comment_id}",
            title="Replied to a comment" if is_reply else "Commented on a video",
            description=comment.get("textOriginal") or comment.get("textDisplay") or None,
            occurred_at=comment.get("publishedAt"),
            link=_video_link(vid, comment_id),
            link_text="View comment on YouTube",
        ),
        identity=OrbitIdentity(
            uid=author_channel_id,
            username=comment.get("authorDisplayName"),
            url=comment.get("authorChannelUrl"),
        ),
    )


def prepare_videos(items: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for item in items:
        try:
            envelope = video_to_activity(item)
        except PydanticValidationError as exc:
            log.warning("shaping: skipping video item %s: %s", item.get("id"), exc)
            continue
        if envelope is None:
            log.warning("shaping: skipping video item %s without a video id", item.get("id"))
            continue
        out.append(envelope.to_payload())
    return out


def prepare_comments(items: Iterable[dict[str, Any]], *, video_id: str | None = None) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for item in items:
        try:
            envelope = comment_to_activity(item, video_id=video_id)
        except PydanticValidationError as exc:
            log.warning("shaping: skipping comment %s: %s", item.get("id"), exc)
            continue
        if envelope is None:
            log.warning("shaping: skipping comment %s without comment or video id", item.get("id"))
            continue
        out.append(envelope.to_payload())
    return out
