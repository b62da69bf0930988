from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from youtube_orbit.core.errors import ValidationError


ENV_PATH = Path(__file__).resolve().parents[2] / ".env"

YOUTUBE_BASE_URL = "https://www.googleapis.com/youtube/v3"
ORBIT_BASE_URL = "https://app.orbit.love/api/v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    # App
    env: str = "dev"
    service_name: str = "youtube-orbit"

    # Orbit
    orbit_workspace_id: str | None = None
    orbit_api_key: SecretStr | None = None
    orbit_base_url: str = ORBIT_BASE_URL

    # YouTube
    youtube_api_key: SecretStr | None = None
    youtube_channel_id: str | None = None
    youtube_base_url: str = YOUTUBE_BASE_URL

    # HTTP
    http_timeout_seconds: float = 20.0

    # Telemetry (tracing disabled when unset)
    otlp_endpoint: str | None = None


@dataclass(frozen=True)
class Credentials:
    orbit_workspace_id: str
    orbit_api_key: SecretStr
    youtube_api_key: SecretStr


def _secret_or_none(value: SecretStr | str | None) -> SecretStr | None:
    if value is None:
        return None
    if isinstance(value, SecretStr):
        return value if value.get_secret_value() else None
    return SecretStr(value) if value else None


def resolve_credentials(
    settings: Settings,
    *,
    orbit_workspace_id: str | None = None,
    orbit_api_key: str | None = None,
    youtube_api_key: str | None = None,
) -> Credentials:
    """
    Explicit arguments win over environment / .env values.
    Raises ValidationError naming the first missing value.
    """
    workspace_id = orbit_workspace_id or settings.orbit_workspace_id
    if not workspace_id:
        raise ValidationError(
            "You must provide an Orbit Workspace ID or set an ORBIT_WORKSPACE_ID environment variable"
        )

    orbit_key = _secret_or_none(orbit_api_key) or _secret_or_none(settings.orbit_api_key)
    if orbit_key is None:
        raise ValidationError("You must provide an Orbit API Key or set an ORBIT_API_KEY environment variable")

    yt_key = _secret_or_none(youtube_api_key) or _secret_or_none(settings.youtube_api_key)
    if yt_key is None:
        raise ValidationError("You must provide a YouTube API Key or set a YOUTUBE_API_KEY environment variable")

    return Credentials(orbit_workspace_id=workspace_id, orbit_api_key=orbit_key, youtube_api_key=yt_key)


def get_settings() -> Settings:
    return Settings()
