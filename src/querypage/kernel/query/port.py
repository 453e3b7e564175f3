"""Queryable port — a lazily-evaluated, composable data request.

Composition methods (``where``, ``order_by``, ``then_by``) never execute
anything and never mutate the receiver; they return a new query. Only
``count``/``fetch`` and their async mirrors reach the underlying store, and
each of those calls is an independent round-trip.

Concrete engines live in ``adapters/memory`` and ``adapters/sqlalchemy``.
"""

from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Queryable(abc.ABC, Generic[T]):
    """Port: a deferred query over entities of type ``T``.

    What counts as a *predicate* or a *key* is engine-defined: plain
    callables for the in-memory engine, SQL expressions for SQLAlchemy.
    """

    @abc.abstractmethod
    def where(self, predicate: Any) -> "Queryable[T]":
        """Restrict the query; successive calls are ANDed."""

    @abc.abstractmethod
    def order_by(self, key: Any, *, descending: bool = False) -> "Queryable[T]":
        """Replace any existing ordering with *key* as the primary key."""

    @abc.abstractmethod
    def then_by(self, key: Any, *, descending: bool = False) -> "Queryable[T]":
        """Append *key* as a tie-breaker after the current ordering."""

    @abc.abstractmethod
    def count(self) -> int: ...

    @abc.abstractmethod
    def fetch(self, offset: int, limit: int) -> list[T]: ...

    @abc.abstractmethod
    async def count_async(self) -> int: ...

    @abc.abstractmethod
    async def fetch_async(self, offset: int, limit: int) -> list[T]: ...


__all__ = ["Queryable"]
