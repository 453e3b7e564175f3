"""Application – pagination use cases (engine-agnostic)."""

from querypage.application.pagination import (
    Filter,
    Filters,
    Page,
    PaginationSettings,
    Sort,
    Sorts,
    paginate,
    paginate_async,
)

__all__ = [
    "Filter",
    "Filters",
    "Page",
    "PaginationSettings",
    "Sort",
    "Sorts",
    "paginate",
    "paginate_async",
]
