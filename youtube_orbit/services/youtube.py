from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import SecretStr

from youtube_orbit.core.config import YOUTUBE_BASE_URL
from youtube_orbit.core.errors import NotFoundError, RemoteApiError, ValidationError
from youtube_orbit.services.comments import flatten_comment_threads, is_comments_unavailable
from youtube_orbit.services.http_client import HttpClient, QueryValue
from youtube_orbit.services.pagination import Page, collect_all
from youtube_orbit.services.redaction import redact_params


log = logging.getLogger(__name__)

PAGE_SIZE = 50
VIDEO_PARTS = "snippet,contentDetails"
COMMENT_THREAD_PARTS = "snippet,replies"


class YouTubeClient:
    """
    Read-only client for the YouTube Data API v3, keyed by a public API key.

    Every call is a single GET; failures surface as RemoteApiError.
    Pagination is strictly sequential.
    """

    def __init__(self, *, api_key: SecretStr, http: HttpClient, base_url: str = YOUTUBE_BASE_URL):
        self._api_key = api_key
        self._http = http
        self._base_url = base_url.rstrip("/")

    async def request(self, path: str, params: Mapping[str, QueryValue] | None = None) -> dict[str, Any]:
        if not path:
            raise ValidationError("You must provide a path")

        query: dict[str, QueryValue] = {"key": self._api_key.get_secret_value(), **dict(params or {})}
        log.debug("youtube: GET %s %s", path, redact_params(query))

        result = await self._http.get_json(url=self._base_url + path, params=query)
        if result.ok:
            return result.detail
        if result.status_code is None:
            raise RemoteApiError(result.error_message or result.error_code or "request failed")
        raise RemoteApiError.from_response(result.status_code, result.detail)

    async def get_channel_upload_playlist_id(self, channel_id: str) -> str:
        if not channel_id:
            raise ValidationError("You must provide a channelId")

        body = await self.request("/channels", {"part": "contentDetails", "id": channel_id})
        items = body.get("items") or []
        if not items:
            raise NotFoundError(f"404: no channel with id {channel_id}")

        uploads = ((items[0].get("contentDetails") or {}).get("relatedPlaylists") or {}).get("uploads")
        if not uploads:
            raise NotFoundError(f"404: channel {channel_id} has no uploads playlist")
        log.info("youtube: channel %s uploads playlist is %s", channel_id, uploads)
        return uploads

    async def get_video_page(self, playlist_id: str, page_token: str | None = None) -> Page[dict[str, Any]]:
        if not playlist_id:
            raise ValidationError("You must provide a playlistId")

        query: dict[str, QueryValue] = {"part": VIDEO_PARTS, "maxResults": PAGE_SIZE, "playlistId": playlist_id}
        if page_token:
            query["pageToken"] = page_token

        page = Page.from_response(await self.request("/playlistItems", query))
        log.info("youtube: playlist %s page fetched (%d videos)", playlist_id, len(page.items))
        return page

    async def get_videos(self, playlist_id: str) -> list[dict[str, Any]]:
        if not playlist_id:
            raise ValidationError("You must provide a playlistId")

        async def fetch(cursor: str | None) -> Page[dict[str, Any]]:
            return await self.get_video_page(playlist_id, cursor)

        return await collect_all(fetch)

    async def get_comment_page(self, video_id: str, page_token: str | None = None) -> Page[dict[str, Any]]:
        if not video_id:
            raise ValidationError("You must provide a videoId")

        query: dict[str, QueryValue] = {"part": COMMENT_THREAD_PARTS, "maxResults": PAGE_SIZE, "videoId": video_id}
        if page_token:
            query["pageToken"] = page_token

        try:
            body = await self.request("/commentThreads", query)
        except RemoteApiError as exc:
            if not is_comments_unavailable(exc):
                raise
            log.warning("youtube: comments unavailable for video %s (%s); treating as empty", video_id, exc)
            return Page(items=[], next_page_token=None)

        page = Page.from_response(body)
        flat = flatten_comment_threads(page.items)
        log.info("youtube: video %s comment page fetched (%d threads, %d comments)", video_id, len(page.items), len(flat))
        return Page(items=flat, next_page_token=page.next_page_token)

    async def get_comments(self, video_id: str) -> list[dict[str, Any]]:
        if not video_id:
            raise ValidationError("You must provide a videoId")

        async def fetch(cursor: str | None) -> Page[dict[str, Any]]:
            return await self.get_comment_page(video_id, cursor)

        return await collect_all(fetch)
