__version__ = "0.1.0"

from youtube_orbit.client import OrbitYouTube  # noqa: E402,F401
from youtube_orbit.core.errors import (  # noqa: E402,F401
    IngestionItemError,
    NotFoundError,
    OrbitYouTubeError,
    RemoteApiError,
    ValidationError,
)
from youtube_orbit.services.ingest import IngestStats  # noqa: E402,F401
from youtube_orbit.services.pagination import Page, collect_all  # noqa: E402,F401
from youtube_orbit.services.sync import SyncReport, sync_channel  # noqa: E402,F401
