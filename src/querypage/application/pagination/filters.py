"""Application pagination – Filter, Filters."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Iterable, Iterator, TypeVar

from querypage.kernel.types import Nothing, Option, Some

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Filter(Generic[T]):
    """An enabled restriction; *predicate* is understood by the query engine."""

    predicate: Any


class Filters(Generic[T]):
    """Ordered collection of conditional filters.

    Each :meth:`add` records ``Some(Filter)`` when its condition holds and
    ``Nothing()`` otherwise, so a disabled predicate is dropped on the spot
    and can be ``None`` or anything else without consequence.

    Example::

        filters = (
            Filters()
            .add(name is not None, User.name == name)
            .add(min_age is not None, User.age >= (min_age or 0))
        )

    ``add`` still builds its predicate at the call site. When building it is
    itself unsafe for a disabled entry, pass options made with
    :func:`~querypage.kernel.types.some_if`, whose factory only runs for a
    true condition::

        filters = Filters([some_if(name is not None, lambda: Filter(User.name.ilike(name)))])
    """

    def __init__(self, entries: Iterable[Option[Filter[T]]] = ()) -> None:
        self._entries: list[Option[Filter[T]]] = list(entries)

    def add(self, condition: bool, predicate: Any) -> "Filters[T]":
        self._entries.append(Some(Filter(predicate)) if condition else Nothing())
        return self

    def is_valid(self) -> bool:
        """True when at least one entry is enabled."""
        return any(entry.is_some() for entry in self._entries)

    def get(self) -> tuple[Filter[T], ...]:
        """Enabled filters in insertion order."""
        return tuple(f for entry in self._entries for f in entry)

    def __iter__(self) -> Iterator[Filter[T]]:
        return iter(self.get())

    def __repr__(self) -> str:
        return f"Filters(enabled={len(self.get())}, declared={len(self._entries)})"


__all__ = ["Filter", "Filters"]
