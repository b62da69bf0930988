from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


ActivityType = Literal["youtube:video", "youtube:comment"]


class OrbitIdentity(BaseModel):
    """Who performed the activity, as Orbit matches it to a member."""
    source: str = "youtube"
    source_host: str = "youtube.com"
    uid: str | None = None
    username: str | None = None
    url: str | None = None


class OrbitActivity(BaseModel):
    activity_type: ActivityType
    # Orbit rejects a second activity with the same key (duplicate-key indicator)
    key: str = Field(min_length=1, max_length=255)
    title: str = Field(max_length=500)
    description: str | None = None
    occurred_at: datetime | None = None
    link: str | None = None
    link_text: str | None = None
    tags: list[str] = Field(default_factory=lambda: ["channel:youtube"])

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return v.strip()


class ActivityEnvelope(BaseModel):
    """Request body of Orbit's create-activity endpoint."""
    activity: OrbitActivity
    identity: OrbitIdentity

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
