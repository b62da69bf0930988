from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from youtube_orbit import __version__
from youtube_orbit.adapters.youtube import prepare_comments, prepare_videos
from youtube_orbit.connectors.orbit import OrbitActivitiesConnector
from youtube_orbit.core.config import Credentials, Settings, get_settings, resolve_credentials
from youtube_orbit.services.http_client import HttpClient
from youtube_orbit.services.ingest import IngestStats, add_activities
from youtube_orbit.services.pagination import Page
from youtube_orbit.services.youtube import YouTubeClient


log = logging.getLogger(__name__)

USER_AGENT = f"community-py-youtube-orbit/{__version__}"


class OrbitYouTube:
    """
    Reads a channel's uploads and comments from YouTube and records them as Orbit activities.

    Credentials are resolved once here (explicit arguments over ORBIT_WORKSPACE_ID,
    ORBIT_API_KEY, YOUTUBE_API_KEY); a missing one raises ValidationError before
    any request is made. Use as an async context manager, or call aclose().
    """

    def __init__(
        self,
        orbit_workspace_id: str | None = None,
        orbit_api_key: str | None = None,
        youtube_api_key: str | None = None,
        youtube_channel_id: str | None = None,
        *,
        settings: Settings | None = None,
        youtube_transport: httpx.AsyncBaseTransport | None = None,
        orbit_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.credentials: Credentials = resolve_credentials(
            self.settings,
            orbit_workspace_id=orbit_workspace_id,
            orbit_api_key=orbit_api_key,
            youtube_api_key=youtube_api_key,
        )
        self.channel_id = youtube_channel_id or self.settings.youtube_channel_id

        self._youtube_http = HttpClient(timeout_seconds=self.settings.http_timeout_seconds, transport=youtube_transport)
        self._orbit_http = HttpClient(
            timeout_seconds=self.settings.http_timeout_seconds,
            default_headers={"Content-Type": "application/json"},
            transport=orbit_transport,
        )

        self.youtube = YouTubeClient(
            api_key=self.credentials.youtube_api_key,
            http=self._youtube_http,
            base_url=self.settings.youtube_base_url,
        )
        self.orbit = OrbitActivitiesConnector(
            workspace_id=self.credentials.orbit_workspace_id,
            api_key=self.credentials.orbit_api_key,
            http=self._orbit_http,
            base_url=self.settings.orbit_base_url,
            user_agent=USER_AGENT,
        )

    async def __aenter__(self) -> "OrbitYouTube":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._youtube_http.aclose()
        await self._orbit_http.aclose()

    # YouTube
    async def get_channel_upload_playlist_id(self, channel_id: str) -> str:
        return await self.youtube.get_channel_upload_playlist_id(channel_id)

    async def get_video_page(self, playlist_id: str, page_token: str | None = None) -> Page[dict[str, Any]]:
        return await self.youtube.get_video_page(playlist_id, page_token)

    async def get_videos(self, playlist_id: str) -> list[dict[str, Any]]:
        return await self.youtube.get_videos(playlist_id)

    async def get_comment_page(self, video_id: str, page_token: str | None = None) -> Page[dict[str, Any]]:
        return await self.youtube.get_comment_page(video_id, page_token)

    async def get_comments(self, video_id: str) -> list[dict[str, Any]]:
        return await self.youtube.get_comments(video_id)

    # Shaping
    def prepare_videos(self, items: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
        return prepare_videos(items)

    def prepare_comments(self, items: Iterable[dict[str, Any]], *, video_id: str | None = None) -> list[dict[str, Any]]:
        return prepare_comments(items, video_id=video_id)

    # Orbit
    async def add_activities(self, activities: Iterable[dict[str, Any]]) -> IngestStats:
        return await add_activities(self.orbit, activities)
