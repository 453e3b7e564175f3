"""Application pagination – paginate, paginate_async.

Composition order is fixed: filters, then sorts, then count, then slice.

Without *sorts* the query must already be totally ordered; offset slicing of
an unordered query gives page boundaries that can shift between calls.

The count and the slice are two independent round-trips to the store with
no snapshot between them. If rows change in between, ``record_count`` and
``results`` may disagree. Callers that need a consistent page run both
inside their own transaction.

Errors raised by the query engine propagate unchanged.
"""
from __future__ import annotations

from typing import TypeVar

from querypage.application.pagination.filters import Filters
from querypage.application.pagination.page import Page
from querypage.application.pagination.settings import PaginationSettings, load_settings
from querypage.application.pagination.sorts import Sorts
from querypage.kernel.errors import InvalidPageRequestError
from querypage.kernel.query import Queryable
from querypage.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def apply_filters(query: Queryable[T], filters: Filters[T] | None) -> Queryable[T]:
    """AND every enabled filter into *query*; no-op when none is enabled."""
    if filters is None or not filters.is_valid():
        return query
    enabled = filters.get()
    for entry in enabled:
        query = query.where(entry.predicate)
    logger.debug("pagination.filters_applied", count=len(enabled))
    return query


def apply_sorts(query: Queryable[T], sorts: Sorts[T] | None) -> Queryable[T]:
    """Order *query* by the enabled sorts; keeps its existing order when none is enabled."""
    if sorts is None or not sorts.is_valid():
        return query
    enabled = sorts.get()
    for index, entry in enumerate(enabled):
        query = entry.apply(query, primary=index == 0)
    logger.debug("pagination.sorts_applied", count=len(enabled))
    return query


def _resolve_page_size(page_size: int | None, settings: PaginationSettings) -> int:
    if page_size is None:
        return settings.default_page_size
    if page_size < 1:
        raise InvalidPageRequestError("page_size", page_size, "must be >= 1")
    if settings.max_page_size and page_size > settings.max_page_size:
        raise InvalidPageRequestError("page_size", page_size, f"must be <= {settings.max_page_size}")
    return page_size


def _prepare(
    query: Queryable[T],
    page_number: int,
    page_size: int | None,
    sorts: Sorts[T] | None,
    filters: Filters[T] | None,
    settings: PaginationSettings | None,
) -> tuple[Queryable[T], int]:
    if page_number < 1:
        raise InvalidPageRequestError("page_number", page_number, "must be >= 1")
    size = _resolve_page_size(page_size, settings or load_settings())
    return apply_sorts(apply_filters(query, filters), sorts), size


def _log_page(page: Page[T]) -> None:
    logger.debug(
        "pagination.page_fetched",
        page=page.current_page,
        page_size=page.page_size,
        record_count=page.record_count,
        page_count=page.page_count,
        returned=len(page.results),
    )


def paginate(
    query: Queryable[T],
    page_number: int,
    page_size: int | None = None,
    sorts: Sorts[T] | None = None,
    filters: Filters[T] | None = None,
    *,
    settings: PaginationSettings | None = None,
) -> Page[T]:
    """Return page *page_number* (1-based) of *query*.

    Parameters
    ----------
    query:
        Deferred query to paginate. Must be totally ordered when *sorts* is
        omitted or has no enabled entry.
    page_number:
        1-based page to fetch.
    page_size:
        Rows per page; ``None`` uses ``settings.default_page_size``.
    sorts:
        Conditional ordering, applied after *filters*.
    filters:
        Conditional restrictions, all ANDed together.
    settings:
        Overrides the environment-loaded :class:`PaginationSettings`.

    Raises
    ------
    InvalidPageRequestError
        When *page_number* or *page_size* is below 1, or *page_size* exceeds
        a configured ``max_page_size``.
    """
    prepared, size = _prepare(query, page_number, page_size, sorts, filters, settings)
    record_count = prepared.count()
    results = prepared.fetch((page_number - 1) * size, size)
    page = Page.of(results, current_page=page_number, page_size=size, record_count=record_count)
    _log_page(page)
    return page


async def paginate_async(
    query: Queryable[T],
    page_number: int,
    page_size: int | None = None,
    sorts: Sorts[T] | None = None,
    filters: Filters[T] | None = None,
    *,
    settings: PaginationSettings | None = None,
) -> Page[T]:
    """Async mirror of :func:`paginate`; awaits the engine's count and fetch."""
    prepared, size = _prepare(query, page_number, page_size, sorts, filters, settings)
    record_count = await prepared.count_async()
    results = await prepared.fetch_async((page_number - 1) * size, size)
    page = Page.of(results, current_page=page_number, page_size=size, record_count=record_count)
    _log_page(page)
    return page


__all__ = ["apply_filters", "apply_sorts", "paginate", "paginate_async"]
