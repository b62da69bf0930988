from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from youtube_orbit.client import OrbitYouTube
from youtube_orbit.core.config import Settings


ENV_VARS = ("ORBIT_WORKSPACE_ID", "ORBIT_API_KEY", "YOUTUBE_API_KEY", "YOUTUBE_CHANNEL_ID", "OTLP_ENDPOINT")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    # Ignore any developer .env file
    return Settings(_env_file=None)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_body(request: httpx.Request) -> dict[str, Any]:
    return json.loads(request.content.decode("utf-8"))


def google_error(status: int, reason: str, message: str) -> httpx.Response:
    return httpx.Response(
        status,
        json={"error": {"code": status, "message": message, "errors": [{"reason": reason, "message": message}]}},
    )


@pytest.fixture
def make_client(settings):
    def _make(youtube_handler=None, orbit_handler=None, **kwargs) -> OrbitYouTube:
        yt = RecordingTransport(youtube_handler or (lambda r: httpx.Response(500, json={})))
        orbit = RecordingTransport(orbit_handler or (lambda r: httpx.Response(201, json={"data": {"id": "a1"}})))
        c = OrbitYouTube(
            kwargs.pop("orbit_workspace_id", "my-workspace"),
            kwargs.pop("orbit_api_key", "orbit-key"),
            kwargs.pop("youtube_api_key", "yt-key"),
            kwargs.pop("youtube_channel_id", None),
            settings=settings,
            youtube_transport=yt,
            orbit_transport=orbit,
        )
        c.youtube_transport = yt
        c.orbit_transport = orbit
        return c

    return _make


@pytest.fixture
def thread():
    def _thread(comment_id: str, *, video_id: str = "vid1", replies: list[dict] | None = None, reply_count: int | None = None) -> dict:
        item: dict[str, Any] = {
            "kind": "youtube#commentThread",
            "id": comment_id,
            "snippet": {
                "videoId": video_id,
                "totalReplyCount": len(replies or []) if reply_count is None else reply_count,
                "topLevelComment": {
                    "id": comment_id,
                    "snippet": {
                        "videoId": video_id,
                        "textOriginal": f"comment {comment_id}",
                        "authorDisplayName": f"author-{comment_id}",
                        "authorChannelUrl": f"http://www.youtube.com/channel/UC-{comment_id}",
                        "authorChannelId": {"value": f"UC-{comment_id}"},
                        "publishedAt": "2021-03-01T10:00:00Z",
                    },
                },
            },
        }
        if replies is not None:
            item["replies"] = {"comments": replies}
        return item

    return _thread


@pytest.fixture
def reply():
    def _reply(comment_id: str, parent_id: str) -> dict:
        return {
            "kind": "youtube#comment",
            "id": comment_id,
            "snippet": {
                "parentId": parent_id,
                "textOriginal": f"reply {comment_id}",
                "authorDisplayName": f"author-{comment_id}",
                "authorChannelUrl": f"http://www.youtube.com/channel/UC-{comment_id}",
                "authorChannelId": {"value": f"UC-{comment_id}"},
                "publishedAt": "2021-03-02T10:00:00Z",
            },
        }

    return _reply


@pytest.fixture
def playlist_item():
    def _item(video_id: str, *, title: str = "My video") -> dict:
        return {
            "kind": "youtube#playlistItem",
            "id": f"pli-{video_id}",
            "snippet": {
                "publishedAt": "2021-02-01T09:00:00Z",
                "channelId": "UCchannel",
                "channelTitle": "My Channel",
                "title": title,
                "description": "about the video",
                "resourceId": {"kind": "youtube#video", "videoId": video_id},
            },
            "contentDetails": {"videoId": video_id, "videoPublishedAt": "2021-02-01T08:00:00Z"},
        }

    return _item
