"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


def page_count_for(record_count: int, page_size: int) -> int:
    """Number of pages needed for *record_count* rows, ``ceil(count / size)``."""
    return -(-record_count // page_size)


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One offset-based page of results plus navigation metadata.

    ``record_count`` is the number of rows matching the query, not the number
    of rows on this page. The count and the slice come from two separate
    evaluations of the query, so a store that changes in between can yield a
    ``record_count`` that disagrees with ``results``.
    """

    current_page: int
    page_size: int
    record_count: int
    page_count: int
    results: tuple[T, ...]

    @classmethod
    def of(
        cls,
        results: Iterable[T],
        *,
        current_page: int,
        page_size: int,
        record_count: int,
    ) -> "Page[T]":
        """Build a page, deriving ``page_count`` from the record count."""
        return cls(
            current_page=current_page,
            page_size=page_size,
            record_count=record_count,
            page_count=page_count_for(record_count, page_size),
            results=tuple(results),
        )

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def has_next(self) -> bool:
        return self.current_page < self.page_count

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each result transformed by *fn*."""
        return dataclasses.replace(self, results=tuple(fn(item) for item in self.results))


__all__ = ["Page", "page_count_for"]
