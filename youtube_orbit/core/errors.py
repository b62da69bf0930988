from __future__ import annotations

import json
from typing import Any, Literal


ErrorKind = Literal["validation", "not_found", "remote_api", "ingestion_item"]


class OrbitYouTubeError(Exception):
    """
    Base for every error raised (or collected) by this package.
    `kind` lets callers branch on the failure category without parsing messages.
    """
    kind: ErrorKind


class ValidationError(OrbitYouTubeError):
    """A required argument or credential is missing. Raised before any network call."""
    kind = "validation"


class NotFoundError(OrbitYouTubeError):
    kind = "not_found"


class RemoteApiError(OrbitYouTubeError):
    """
    Non-2xx response or transport failure from the YouTube API.
    status_code is None when no response was received.
    """
    kind = "remote_api"

    def __init__(self, message: str, *, status_code: int | None = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_response(cls, status_code: int, body: Any) -> "RemoteApiError":
        return cls(f"{status_code}: {json.dumps(body, default=str)}", status_code=status_code, body=body)

    def reasons(self) -> list[str]:
        """Google API error reasons (e.g. commentsDisabled) when the body carries them."""
        if not isinstance(self.body, dict):
            return []
        error = self.body.get("error")
        if not isinstance(error, dict):
            return []
        out = []
        for e in error.get("errors") or []:
            if isinstance(e, dict) and e.get("reason"):
                out.append(str(e["reason"]))
        return out


class IngestionItemError(OrbitYouTubeError):
    """A non-duplicate failure while creating one activity. Collected by the ingestor, never raised."""
    kind = "ingestion_item"

    def __init__(
        self,
        message: str,
        *,
        activity: dict[str, Any] | None = None,
        status_code: int | None = None,
        detail: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.activity = activity
        self.status_code = status_code
        self.detail = detail or {}
