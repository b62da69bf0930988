from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Generic, TypeVar


log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of a cursor-paginated list endpoint.
    A missing (or falsy) next_page_token means the listing is exhausted.
    """
    items: list[T] = field(default_factory=list)
    next_page_token: str | None = None

    @classmethod
    def from_response(cls, body: dict[str, Any]) -> "Page[Any]":
        return cls(items=list(body.get("items") or []), next_page_token=body.get("nextPageToken") or None)


# A page source: optional cursor in, one page out.
PageSource = Callable[[str | None], Awaitable[Page[T]]]


async def collect_all(fetch_page: PageSource[T]) -> list[T]:
    """
    Walk a page source until a page carries no cursor.

    Items are concatenated in fetch order; nothing is reordered or deduplicated.
    Exhaustion is the only stop condition.
    """
    page = await fetch_page(None)
    items: list[T] = list(page.items)
    pages = 1

    while page.next_page_token:
        page = await fetch_page(page.next_page_token)
        items.extend(page.items)
        pages += 1

    log.debug("pagination: collected %d items over %d pages", len(items), pages)
    return items
