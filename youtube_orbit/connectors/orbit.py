from __future__ import annotations

import logging
from typing import Any

from pydantic import SecretStr

from youtube_orbit.core.config import ORBIT_BASE_URL
from youtube_orbit.connectors.base import ActivityStore, CreateActivityResult
from youtube_orbit.services.http_client import HttpClient


log = logging.getLogger(__name__)


class OrbitActivitiesConnector(ActivityStore):
    """
    Orbit workspace activity API.

    Orbit keeps activity keys unique per workspace: re-sending a known key fails
    with a validation body like {"errors": {"key": ["has already been taken"]}}.
    """

    def __init__(
        self,
        *,
        workspace_id: str,
        api_key: SecretStr,
        http: HttpClient,
        base_url: str = ORBIT_BASE_URL,
        user_agent: str | None = None,
    ):
        self._workspace_id = workspace_id
        self._api_key = api_key
        self._http = http
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent

    @property
    def activities_url(self) -> str:
        return f"{self._base_url}/{self._workspace_id}/activities"

    def _headers(self) -> dict[str, str]:
        h = {
            "Authorization": f"Bearer {self._api_key.get_secret_value()}",
            "Accept": "application/json",
        }
        if self._user_agent:
            h["User-Agent"] = self._user_agent
        return h

    async def create_activity(self, payload: dict[str, Any]) -> CreateActivityResult:
        result = await self._http.post_json(url=self.activities_url, headers=self._headers(), json_body=payload)

        if result.ok:
            data = result.detail.get("data") if isinstance(result.detail.get("data"), dict) else {}
            return CreateActivityResult(
                ok=True,
                status_code=result.status_code,
                detail=result.detail,
                external_id=data.get("id"),
            )

        return CreateActivityResult(
            ok=False,
            status_code=result.status_code,
            error_message=result.error_message,
            detail=result.detail,
        )

    def is_duplicate(self, result: CreateActivityResult) -> bool:
        errors = (result.detail or {}).get("errors")
        return isinstance(errors, dict) and "key" in errors
