"""Unit tests for the SQLAlchemy adapter – SqlAlchemyQuery, AsyncSqlAlchemyQuery.

Uses in-memory SQLite (``pysqlite`` for the blocking flavour, *aiosqlite*
for the async one), so no running server is needed.
"""
from __future__ import annotations

import asyncio

import pytest
from sqlalchemy import Integer, String, create_engine, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from querypage.adapters.sqlalchemy import AsyncSqlAlchemyQuery, SqlAlchemyQuery
from querypage.application.pagination import (
    Filters,
    PaginationSettings,
    Sorts,
    paginate,
    paginate_async,
)
from querypage.kernel.errors import QueryExecutionModeError

# ---------------------------------------------------------------------------
# Shared ORM base and test model
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class PersonModel(Base):
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50))
    age: Mapped[int] = mapped_column(Integer)
    city: Mapped[str] = mapped_column(String(50))


ROWS = [
    ("A", 30, "Lisbon"),
    ("B", 20, "Porto"),
    ("C", 25, "Lisbon"),
    ("D", 25, "Braga"),
    ("E", 41, "Porto"),
]

SETTINGS = PaginationSettings(default_page_size=20)


def _people() -> list[PersonModel]:
    return [PersonModel(id=i, name=n, age=a, city=c) for i, (n, a, c) in enumerate(ROWS, start=1)]


@pytest.fixture()
def session():
    engine = create_engine("sqlite://", echo=False)
    Base.metadata.create_all(engine)
    with Session(engine) as s:
        s.add_all(_people())
        s.commit()
        yield s
    engine.dispose()


async def _setup_async_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    sf = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with sf() as s:
        s.add_all(_people())
        await s.commit()
    return engine, sf


def _names(rows: list[PersonModel] | tuple[PersonModel, ...]) -> list[str]:
    return [r.name for r in rows]


# ---------------------------------------------------------------------------
# SqlAlchemyQuery
# ---------------------------------------------------------------------------


class TestSqlAlchemyQuery:
    def test_count_all(self, session: Session) -> None:
        assert SqlAlchemyQuery(session, select(PersonModel)).count() == 5

    def test_where_is_anded(self, session: Session) -> None:
        query = (
            SqlAlchemyQuery(session, select(PersonModel))
            .where(PersonModel.age >= 25)
            .where(PersonModel.city == "Lisbon")
        )
        assert query.count() == 2

    def test_order_by_column_and_name(self, session: Session) -> None:
        by_column = SqlAlchemyQuery(session, select(PersonModel)).order_by(PersonModel.age).then_by("name")
        assert _names(by_column.fetch(0, 10)) == ["B", "C", "D", "A", "E"]

    def test_then_by_descending(self, session: Session) -> None:
        query = SqlAlchemyQuery(session, select(PersonModel)).order_by("age", descending=True).then_by(
            "name", descending=True
        )
        assert _names(query.fetch(0, 10)) == ["E", "A", "D", "C", "B"]

    def test_order_by_replaces_statement_ordering(self, session: Session) -> None:
        stmt = select(PersonModel).order_by(PersonModel.name.desc())
        query = SqlAlchemyQuery(session, stmt).order_by("id")
        assert _names(query.fetch(0, 10)) == ["A", "B", "C", "D", "E"]

    def test_fetch_offset_limit(self, session: Session) -> None:
        query = SqlAlchemyQuery(session, select(PersonModel)).order_by("id")
        assert _names(query.fetch(1, 2)) == ["B", "C"]

    def test_count_ignores_ordering(self, session: Session) -> None:
        query = SqlAlchemyQuery(session, select(PersonModel)).order_by("age").where(PersonModel.age > 24)
        assert query.count() == 4
        assert "ORDER BY" not in str(query._count_statement())

    def test_composition_does_not_mutate(self, session: Session) -> None:
        base = SqlAlchemyQuery(session, select(PersonModel))
        base.where(PersonModel.age > 100)
        assert base.count() == 5

    def test_unknown_attribute_name(self, session: Session) -> None:
        with pytest.raises(AttributeError):
            SqlAlchemyQuery(session, select(PersonModel)).order_by("missing")

    def test_async_methods_refused(self, session: Session) -> None:
        query = SqlAlchemyQuery(session, select(PersonModel))
        with pytest.raises(QueryExecutionModeError):
            asyncio.run(query.count_async())

    def test_engine_errors_propagate(self, session: Session) -> None:
        session.connection().exec_driver_sql("DROP TABLE people")
        with pytest.raises(OperationalError):
            paginate(SqlAlchemyQuery(session, select(PersonModel)), 1, 2, settings=SETTINGS)


class TestPaginateWithSqlAlchemy:
    def test_sorted_page(self, session: Session) -> None:
        sorts = Sorts[PersonModel]().add(True, PersonModel.age).add(True, PersonModel.name)
        page = paginate(SqlAlchemyQuery(session, select(PersonModel)), 1, 2, sorts, settings=SETTINGS)
        assert _names(page.results) == ["B", "C"]
        assert page.record_count == 5
        assert page.page_count == 3

    def test_filtered_sorted_page(self, session: Session) -> None:
        city: str | None = "Lisbon"
        min_age: int | None = None
        filters = (
            Filters[PersonModel]()
            .add(city is not None, PersonModel.city == city)
            .add(min_age is not None, None)
        )
        sorts = Sorts[PersonModel]().add(True, "age", descending=True)
        page = paginate(
            SqlAlchemyQuery(session, select(PersonModel)), 1, 10, sorts, filters, settings=SETTINGS
        )
        assert _names(page.results) == ["A", "C"]
        assert page.record_count == 2
        assert page.page_count == 1


# ---------------------------------------------------------------------------
# AsyncSqlAlchemyQuery
# ---------------------------------------------------------------------------


class TestAsyncSqlAlchemyQuery:
    def test_paginate_async(self) -> None:
        async def run() -> None:
            engine, sf = await _setup_async_engine()
            async with sf() as s:
                filters = Filters[PersonModel]().add(True, PersonModel.age >= 25)
                sorts = Sorts[PersonModel]().add(True, "city").add(True, "name")
                page = await paginate_async(
                    AsyncSqlAlchemyQuery(s, select(PersonModel)), 2, 2, sorts, filters, settings=SETTINGS
                )
            assert _names(page.results) == ["C", "E"]
            assert page.record_count == 4
            assert page.page_count == 2
            assert page.current_page == 2
            await engine.dispose()

        asyncio.run(run())

    def test_count_async(self) -> None:
        async def run() -> None:
            engine, sf = await _setup_async_engine()
            async with sf() as s:
                query = AsyncSqlAlchemyQuery(s, select(PersonModel)).where(PersonModel.city == "Porto")
                assert await query.count_async() == 2
                assert _names(await query.order_by("age").fetch_async(0, 5)) == ["B", "E"]
            await engine.dispose()

        asyncio.run(run())

    def test_blocking_methods_refused(self) -> None:
        async def run() -> None:
            engine, sf = await _setup_async_engine()
            async with sf() as s:
                query = AsyncSqlAlchemyQuery(s, select(PersonModel))
                with pytest.raises(QueryExecutionModeError):
                    query.count()
                with pytest.raises(QueryExecutionModeError):
                    query.fetch(0, 1)
            await engine.dispose()

        asyncio.run(run())
