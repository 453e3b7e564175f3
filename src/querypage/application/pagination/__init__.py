"""Application pagination – conditional filters/sorts, Page, paginate."""
from querypage.application.pagination.filters import Filter, Filters
from querypage.application.pagination.page import Page, page_count_for
from querypage.application.pagination.service import (
    apply_filters,
    apply_sorts,
    paginate,
    paginate_async,
)
from querypage.application.pagination.settings import PaginationSettings, load_settings
from querypage.application.pagination.sorts import Sort, Sorts

__all__ = [
    "Filter",
    "Filters",
    "Page",
    "PaginationSettings",
    "Sort",
    "Sorts",
    "apply_filters",
    "apply_sorts",
    "load_settings",
    "page_count_for",
    "paginate",
    "paginate_async",
]
