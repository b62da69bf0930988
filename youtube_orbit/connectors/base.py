from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class CreateActivityResult:
    ok: bool
    status_code: int | None = None
    error_message: str | None = None
    detail: dict[str, Any] | None = None
    external_id: str | None = None  # upstream activity id, if returned


@runtime_checkable
class ActivityStore(Protocol):
    """
    The upstream store activities are ingested into.
    It deduplicates on the activity key and reports a collision as a failed result.
    """

    async def create_activity(self, payload: dict[str, Any]) -> CreateActivityResult:
        ...

    def is_duplicate(self, result: CreateActivityResult) -> bool:
        ...
