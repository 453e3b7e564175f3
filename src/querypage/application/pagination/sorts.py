"""Application pagination – Sort, Sorts."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Iterable, Iterator, TypeVar

from querypage.kernel.query import Queryable
from querypage.kernel.types import Nothing, Option, Some

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Sort(Generic[T]):
    """An enabled ordering key.

    ``apply`` hides the key's type from the caller: composing a sort chain
    only needs to know whether a step is the primary key or a refinement.
    """

    key: Any
    descending: bool = False

    def apply(self, query: Queryable[T], *, primary: bool) -> Queryable[T]:
        if primary:
            return query.order_by(self.key, descending=self.descending)
        return query.then_by(self.key, descending=self.descending)


class Sorts(Generic[T]):
    """Ordered collection of conditional sort keys.

    The first enabled entry becomes the primary order; each later one breaks
    ties left by those before it. Disabled entries are skipped without
    disturbing that relative order.

    As with :class:`~querypage.application.pagination.filters.Filters`, entries
    whose key must not be built when disabled are passed as options::

        sorts = Sorts([some_if(by_rank, lambda: Sort(rank_expression(), descending=True))])
    """

    def __init__(self, entries: Iterable[Option[Sort[T]]] = ()) -> None:
        self._entries: list[Option[Sort[T]]] = list(entries)

    def add(self, condition: bool, key: Any, descending: bool = False) -> "Sorts[T]":
        self._entries.append(Some(Sort(key, descending)) if condition else Nothing())
        return self

    def is_valid(self) -> bool:
        return any(entry.is_some() for entry in self._entries)

    def get(self) -> tuple[Sort[T], ...]:
        return tuple(s for entry in self._entries for s in entry)

    def __iter__(self) -> Iterator[Sort[T]]:
        return iter(self.get())

    def __repr__(self) -> str:
        return f"Sorts(enabled={len(self.get())}, declared={len(self._entries)})"


__all__ = ["Sort", "Sorts"]
