"""In-memory adapter – InMemoryQuery."""
from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, TypeVar

from querypage.kernel.query import Queryable

T = TypeVar("T")

KeySelector = Callable[[Any], Any] | str


def _resolve_key(key: KeySelector) -> Callable[[Any], Any]:
    if isinstance(key, str):
        return operator.attrgetter(key)
    if callable(key):
        return key
    raise TypeError(f"Sort key must be a callable or an attribute name, got {type(key).__name__}")


class InMemoryQuery(Queryable[T]):
    """Deferred query over an in-memory source.

    Predicates are ``entity -> bool`` callables. Keys are callables or
    attribute names. Nothing runs until :meth:`count` or :meth:`fetch`, and
    each of those re-reads *source*. An iterator source (a generator, say) is
    buffered into a tuple up front so both reads see the same rows.

    Example::

        query = InMemoryQuery(people).where(lambda p: p.age > 20).order_by("age")
        query.fetch(0, 10)
    """

    def __init__(
        self,
        source: Iterable[T],
        *,
        predicates: tuple[Callable[[T], bool], ...] = (),
        ordering: tuple[tuple[Callable[[T], Any], bool], ...] = (),
    ) -> None:
        self._source: Iterable[T] = tuple(source) if isinstance(source, Iterator) else source
        self._predicates = predicates
        self._ordering = ordering

    def where(self, predicate: Callable[[T], bool]) -> "InMemoryQuery[T]":
        return InMemoryQuery(
            self._source,
            predicates=self._predicates + (predicate,),
            ordering=self._ordering,
        )

    def order_by(self, key: KeySelector, *, descending: bool = False) -> "InMemoryQuery[T]":
        return InMemoryQuery(
            self._source,
            predicates=self._predicates,
            ordering=((_resolve_key(key), descending),),
        )

    def then_by(self, key: KeySelector, *, descending: bool = False) -> "InMemoryQuery[T]":
        return InMemoryQuery(
            self._source,
            predicates=self._predicates,
            ordering=self._ordering + ((_resolve_key(key), descending),),
        )

    def _evaluate(self) -> list[T]:
        items = [item for item in self._source if all(p(item) for p in self._predicates)]
        # list.sort is stable, so sorting by the last key first leaves the
        # first key dominant and earlier keys break ties for later ones.
        for key, descending in reversed(self._ordering):
            items.sort(key=key, reverse=descending)
        return items

    def count(self) -> int:
        return sum(1 for item in self._source if all(p(item) for p in self._predicates))

    def fetch(self, offset: int, limit: int) -> list[T]:
        if offset < 0 or limit < 0:
            raise ValueError(f"offset and limit must be >= 0, got offset={offset} limit={limit}")
        return self._evaluate()[offset : offset + limit]

    async def count_async(self) -> int:
        return self.count()

    async def fetch_async(self, offset: int, limit: int) -> list[T]:
        return self.fetch(offset, limit)

    def __repr__(self) -> str:
        return (
            f"InMemoryQuery(predicates={len(self._predicates)}, "
            f"ordering={len(self._ordering)})"
        )


__all__ = ["InMemoryQuery"]
