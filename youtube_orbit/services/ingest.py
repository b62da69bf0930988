from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from youtube_orbit.connectors.base import ActivityStore, CreateActivityResult
from youtube_orbit.core.errors import IngestionItemError


log = logging.getLogger(__name__)


@dataclass
class IngestStats:
    added: int = 0
    duplicates: int = 0
    errors: list[IngestionItemError] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.added + self.duplicates + len(self.errors)

    def as_dict(self) -> dict[str, Any]:
        return {
            "added": self.added,
            "duplicates": self.duplicates,
            "errors": [{"message": str(e), "status_code": e.status_code, "detail": e.detail} for e in self.errors],
        }


def _item_error(activity: dict[str, Any], result: CreateActivityResult) -> IngestionItemError:
    key = (activity.get("activity") or {}).get("key") if isinstance(activity, dict) else None
    status = result.status_code if result.status_code is not None else "no response"
    return IngestionItemError(
        f"{status}: failed to create activity {key or '<no key>'}: {result.error_message or result.detail}",
        activity=activity,
        status_code=result.status_code,
        detail=result.detail,
    )


async def add_activities(store: ActivityStore, activities: Iterable[dict[str, Any]]) -> IngestStats:
    """
    Submit activities one at a time, in order, awaiting each before the next.

    A rejected activity never stops the run: duplicates (the store's key-conflict
    signal) are counted, anything else is collected in `errors`.
    Only a failure outside the per-item handling (e.g. a non-iterable input) raises.
    """
    stats = IngestStats()

    for activity in activities:
        result = await store.create_activity(activity)
        if result.ok:
            stats.added += 1
        elif store.is_duplicate(result):
            stats.duplicates += 1
        else:
            err = _item_error(activity, result)
            log.warning("ingest: %s", err)
            stats.errors.append(err)

    log.info("ingest: added=%d duplicates=%d errors=%d", stats.added, stats.duplicates, len(stats.errors))
    return stats
