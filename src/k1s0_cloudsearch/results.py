"""Paginated search result sets."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Any

PageFetcher = Callable[[int], "ResultSet"]


class ResultSet(Sequence[Any]):
    """One page of search hits plus the paging metadata of the whole result.

    Iterating yields the document ids of the current page in server rank
    order. `iter_all()` walks the following pages lazily through the page
    fetcher supplied by the search client.
    """

    def __init__(
        self,
        ids: list[Any],
        total_entries: int,
        page_size: int,
        current_page: int = 1,
        hit_fields: dict[str, dict[str, Any]] | None = None,
        fetch_page: PageFetcher | None = None,
    ) -> None:
        self._data: list[Any] = list(ids)
        self.total_entries = total_entries
        self.page_size = page_size
        self.current_page = current_page
        self.hit_fields: dict[str, dict[str, Any]] = hit_fields or {}
        self._fetch_page = fetch_page

        complete_pages, remainder = divmod(total_entries, page_size) if page_size > 0 else (0, 0)
        # There is always at least one page.
        self.total_pages = max(complete_pages + (1 if remainder else 0), 1)

    @classmethod
    def sandbox_fake(cls) -> ResultSet:
        return cls(ids=[], total_entries=0, page_size=10)

    @classmethod
    def from_response(
        cls,
        body: dict[str, Any],
        page_size: int,
        current_page: int = 1,
        fetch_page: PageFetcher | None = None,
    ) -> ResultSet:
        """Parse a search response body.

        `page_size` and `current_page` describe the request that produced the
        body; the server's `start` echo is not used for paging.
        """
        hits = body.get("hits") or {}
        hit_list = hits.get("hit") or []
        ids: list[str] = []
        hit_fields: dict[str, dict[str, Any]] = {}
        for hit in hit_list:
            doc_id = hit["id"]
            ids.append(doc_id)
            data = hit.get("fields", hit.get("data"))
            if data:
                hit_fields[doc_id] = data
        return cls(
            ids=ids,
            total_entries=int(hits.get("found") or 0),
            page_size=page_size,
            current_page=current_page,
            hit_fields=hit_fields,
            fetch_page=fetch_page,
        )

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def next_page(self) -> int | None:
        return self.current_page + 1 if self.current_page < self.total_pages else None

    @property
    def previous_page(self) -> int | None:
        return self.current_page - 1 if self.current_page > 1 else None

    @property
    def is_last_page(self) -> bool:
        return (
            self.offset + len(self._data) >= self.total_entries
            or len(self._data) < self.page_size
        )

    def fetch_next_page(self) -> ResultSet | None:
        """Run the search for the following page, or return None when exhausted."""
        if self._fetch_page is None or self.is_last_page:
            return None
        return self._fetch_page(self.current_page + 1)

    def pages(self) -> Iterator[ResultSet]:
        page: ResultSet | None = self
        while page is not None:
            yield page
            page = page.fetch_next_page()

    def iter_all(self) -> Iterator[Any]:
        """Yield ids from this page and every following page."""
        for page in self.pages():
            yield from page

    def replace(self, items: Sequence[Any]) -> ResultSet:
        """Swap the page contents for caller-supplied items, keeping the counts."""
        self._data = list(items)
        self._fetch_page = None
        return self

    def __getitem__(self, index: Any) -> Any:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResultSet):
            return self._data == other._data and self.total_entries == other.total_entries
        if isinstance(other, list):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"ResultSet({self._data!r}, total_entries={self.total_entries}, "
            f"page={self.current_page}/{self.total_pages})"
        )
