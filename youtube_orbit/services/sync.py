from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from opentelemetry import trace

from youtube_orbit.core.errors import ValidationError
from youtube_orbit.services.ingest import IngestStats

if TYPE_CHECKING:
    from youtube_orbit.client import OrbitYouTube


log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class SyncReport:
    channel_id: str
    playlist_id: str
    videos: IngestStats = field(default_factory=IngestStats)
    comments: IngestStats = field(default_factory=IngestStats)

    def as_dict(self) -> dict[str, Any]:
        return {
            "channel_id": self.channel_id,
            "playlist_id": self.playlist_id,
            "videos": self.videos.as_dict(),
            "comments": self.comments.as_dict(),
        }


def _merge(into: IngestStats, other: IngestStats) -> None:
    into.added += other.added
    into.duplicates += other.duplicates
    into.errors.extend(other.errors)


def _video_id(item: dict[str, Any]) -> str | None:
    return (item.get("contentDetails") or {}).get("videoId") or ((item.get("snippet") or {}).get("resourceId") or {}).get("videoId")


async def sync_channel(client: "OrbitYouTube", channel_id: str | None = None) -> SyncReport:
    """
    Uploads first, then each video's comments, one request at a time.

    Remote failures abort the run (comments-disabled videos just contribute nothing);
    rejected activities are tallied in the report instead.
    """
    channel_id = channel_id or client.channel_id
    if not channel_id:
        raise ValidationError(
            "You must provide a YouTube channel ID or set a YOUTUBE_CHANNEL_ID environment variable"
        )

    with tracer.start_as_current_span("youtube_orbit.sync_channel") as span:
        span.set_attribute("youtube.channel_id", channel_id)

        playlist_id = await client.get_channel_upload_playlist_id(channel_id)
        report = SyncReport(channel_id=channel_id, playlist_id=playlist_id)

        with tracer.start_as_current_span("youtube_orbit.sync_videos"):
            videos = await client.get_videos(playlist_id)
            report.videos = await client.add_activities(client.prepare_videos(videos))
        log.info("sync: channel %s: %d videos, added=%d duplicates=%d errors=%d",
                 channel_id, len(videos), report.videos.added, report.videos.duplicates, len(report.videos.errors))

        with tracer.start_as_current_span("youtube_orbit.sync_comments"):
            for video in videos:
                video_id = _video_id(video)
                if not video_id:
                    continue
                comments = await client.get_comments(video_id)
                if not comments:
                    continue
                stats = await client.add_activities(client.prepare_comments(comments, video_id=video_id))
                _merge(report.comments, stats)
        log.info("sync: channel %s comments: added=%d duplicates=%d errors=%d",
                 channel_id, report.comments.added, report.comments.duplicates, len(report.comments.errors))

        span.set_attribute("orbit.activities_added", report.videos.added + report.comments.added)
        return report
