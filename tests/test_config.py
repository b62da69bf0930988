import httpx
import pytest

from youtube_orbit.client import OrbitYouTube
from youtube_orbit.core.config import Settings, resolve_credentials
from youtube_orbit.core.errors import ValidationError


def _no_network(request):
    raise AssertionError(f"unexpected request to {request.url}")


def test_missing_workspace_id_fails_before_any_request(settings):
    transport = httpx.MockTransport(_no_network)

    with pytest.raises(ValidationError, match="ORBIT_WORKSPACE_ID") as exc_info:
        OrbitYouTube(None, "orbit-key", "yt-key", settings=settings, youtube_transport=transport, orbit_transport=transport)
    assert exc_info.value.kind == "validation"


def test_missing_orbit_key(settings):
    with pytest.raises(ValidationError, match="ORBIT_API_KEY"):
        resolve_credentials(settings, orbit_workspace_id="ws", youtube_api_key="yt")


def test_missing_youtube_key(settings):
    with pytest.raises(ValidationError, match="YOUTUBE_API_KEY"):
        resolve_credentials(settings, orbit_workspace_id="ws", orbit_api_key="ok")


def test_credentials_from_environment(monkeypatch):
    monkeypatch.setenv("ORBIT_WORKSPACE_ID", "env-ws")
    monkeypatch.setenv("ORBIT_API_KEY", "env-orbit")
    monkeypatch.setenv("YOUTUBE_API_KEY", "env-yt")
    monkeypatch.setenv("YOUTUBE_CHANNEL_ID", "UCenv")

    settings = Settings(_env_file=None)
    creds = resolve_credentials(settings)

    assert creds.orbit_workspace_id == "env-ws"
    assert creds.orbit_api_key.get_secret_value() == "env-orbit"
    assert creds.youtube_api_key.get_secret_value() == "env-yt"
    assert settings.youtube_channel_id == "UCenv"


def test_explicit_arguments_win(monkeypatch):
    monkeypatch.setenv("ORBIT_WORKSPACE_ID", "env-ws")
    monkeypatch.setenv("ORBIT_API_KEY", "env-orbit")
    monkeypatch.setenv("YOUTUBE_API_KEY", "env-yt")

    creds = resolve_credentials(
        Settings(_env_file=None), orbit_workspace_id="arg-ws", orbit_api_key="arg-orbit", youtube_api_key="arg-yt",
    )

    assert creds.orbit_workspace_id == "arg-ws"
    assert creds.orbit_api_key.get_secret_value() == "arg-orbit"
    assert creds.youtube_api_key.get_secret_value() == "arg-yt"


def test_empty_env_value_counts_as_missing(monkeypatch):
    monkeypatch.setenv("ORBIT_WORKSPACE_ID", "ws")
    monkeypatch.setenv("ORBIT_API_KEY", "")
    monkeypatch.setenv("YOUTUBE_API_KEY", "yt")

    with pytest.raises(ValidationError, match="ORBIT_API_KEY"):
        resolve_credentials(Settings(_env_file=None))


def test_credentials_are_immutable(settings):
    creds = resolve_credentials(settings, orbit_workspace_id="ws", orbit_api_key="ok", youtube_api_key="yt")

    with pytest.raises(AttributeError):
        creds.orbit_workspace_id = "other"


def test_api_keys_are_not_exposed_in_repr(settings):
    creds = resolve_credentials(settings, orbit_workspace_id="ws", orbit_api_key="orbit-secret", youtube_api_key="yt-secret")

    assert "orbit-secret" not in repr(creds)
    assert "yt-secret" not in repr(creds)
