import pytest

from youtube_orbit.services.pagination import Page, collect_all


def _pages_source(pages: list[Page]):
    calls: list[str | None] = []

    async def fetch(cursor: str | None) -> Page:
        calls.append(cursor)
        return pages[len(calls) - 1]

    return fetch, calls


@pytest.mark.asyncio
async def test_collect_all_walks_every_page_in_order():
    pages = [
        Page(items=[1, 2], next_page_token="t1"),
        Page(items=[3], next_page_token="t2"),
        Page(items=[4, 5], next_page_token=None),
    ]
    fetch, calls = _pages_source(pages)

    items = await collect_all(fetch)

    assert items == [1, 2, 3, 4, 5]
    assert calls == [None, "t1", "t2"]


@pytest.mark.asyncio
async def test_collect_all_single_page_fetches_once():
    fetch, calls = _pages_source([Page(items=["a"], next_page_token=None)])

    assert await collect_all(fetch) == ["a"]
    assert calls == [None]


@pytest.mark.asyncio
async def test_collect_all_keeps_duplicates_across_pages():
    fetch, _ = _pages_source([
        Page(items=["x"], next_page_token="t1"),
        Page(items=["x"], next_page_token=None),
    ])

    assert await collect_all(fetch) == ["x", "x"]


@pytest.mark.asyncio
async def test_collect_all_empty_cursor_string_means_exhausted():
    fetch, calls = _pages_source([Page(items=[], next_page_token="")])

    assert await collect_all(fetch) == []
    assert calls == [None]


@pytest.mark.asyncio
async def test_collect_all_propagates_page_failure():
    async def fetch(cursor):
        if cursor is None:
            return Page(items=[1], next_page_token="t1")
        raise RuntimeError("page 2 failed")

    with pytest.raises(RuntimeError, match="page 2 failed"):
        await collect_all(fetch)


def test_page_from_response_normalizes_missing_fields():
    page = Page.from_response({"kind": "youtube#playlistItemListResponse"})
    assert page.items == []
    assert page.next_page_token is None

    page = Page.from_response({"items": [{"id": "1"}], "nextPageToken": "CAUQAA"})
    assert page.items == [{"id": "1"}]
    assert page.next_page_token == "CAUQAA"
