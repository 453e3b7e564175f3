"""SQLAlchemy adapter – SqlAlchemyQuery, AsyncSqlAlchemyQuery.

Both wrap a 2.x :class:`~sqlalchemy.sql.Select` selecting one ORM entity.
Predicates are SQL boolean expressions (``User.age > 20``); keys are column
expressions (``User.age``) or attribute names of the selected entity
(``"age"``).

Sessions are owned by the caller. These classes only execute statements on
them; they never commit, roll back or close.
"""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from querypage.kernel.errors import QueryExecutionModeError
from querypage.kernel.query import Queryable

T = TypeVar("T")
TSession = TypeVar("TSession")


class _SelectQuery(Queryable[T], Generic[T, TSession]):
    """Statement composition shared by the blocking and async flavours."""

    def __init__(self, session: TSession, statement: Select[Any]) -> None:
        self._session = session
        self._statement = statement

    @property
    def statement(self) -> Select[Any]:
        return self._statement

    def _derive(self, statement: Select[Any]) -> Any:
        return type(self)(self._session, statement)

    def where(self, predicate: Any) -> Any:
        return self._derive(self._statement.where(predicate))

    def order_by(self, key: Any, *, descending: bool = False) -> Any:
        clause = self._order_clause(key, descending)
        return self._derive(self._statement.order_by(None).order_by(clause))

    def then_by(self, key: Any, *, descending: bool = False) -> Any:
        return self._derive(self._statement.order_by(self._order_clause(key, descending)))

    def _order_clause(self, key: Any, descending: bool) -> Any:
        column = self._resolve_key(key)
        return column.desc() if descending else column.asc()

    def _resolve_key(self, key: Any) -> Any:
        if not isinstance(key, str):
            return key
        entity = self._statement.column_descriptions[0].get("entity")
        if entity is None:
            raise ValueError(f"Cannot resolve sort key {key!r}: statement does not select an ORM entity")
        return getattr(entity, key)

    def _count_statement(self) -> Select[Any]:
        # ORDER BY is irrelevant to the cardinality and some backends reject
        # it inside a subquery.
        return select(func.count()).select_from(self._statement.order_by(None).subquery())

    def _slice_statement(self, offset: int, limit: int) -> Select[Any]:
        return self._statement.offset(offset).limit(limit)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._statement})"


class SqlAlchemyQuery(_SelectQuery[T, Session]):
    """Deferred ``Select`` executed through a blocking :class:`Session`."""

    def count(self) -> int:
        return self._session.execute(self._count_statement()).scalar_one()

    def fetch(self, offset: int, limit: int) -> list[T]:
        return list(self._session.execute(self._slice_statement(offset, limit)).scalars().all())

    async def count_async(self) -> int:
        raise QueryExecutionModeError(
            type(self).__name__, "count_async", "wrap an AsyncSession in AsyncSqlAlchemyQuery instead"
        )

    async def fetch_async(self, offset: int, limit: int) -> list[T]:
        raise QueryExecutionModeError(
            type(self).__name__, "fetch_async", "wrap an AsyncSession in AsyncSqlAlchemyQuery instead"
        )


class AsyncSqlAlchemyQuery(_SelectQuery[T, AsyncSession]):
    """Deferred ``Select`` executed through an :class:`AsyncSession`."""

    def count(self) -> int:
        raise QueryExecutionModeError(
            type(self).__name__, "count", "await count_async() or use SqlAlchemyQuery with a Session"
        )

    def fetch(self, offset: int, limit: int) -> list[T]:
        raise QueryExecutionModeError(
            type(self).__name__, "fetch", "await fetch_async() or use SqlAlchemyQuery with a Session"
        )

    async def count_async(self) -> int:
        result = await self._session.execute(self._count_statement())
        return result.scalar_one()

    async def fetch_async(self, offset: int, limit: int) -> list[T]:
        result = await self._session.execute(self._slice_statement(offset, limit))
        return list(result.scalars().all())


__all__ = ["AsyncSqlAlchemyQuery", "SqlAlchemyQuery"]
