"""Kernel – framework-agnostic building blocks."""

from querypage.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidPageRequestError,
    QueryExecutionModeError,
    ValidationError,
)
from querypage.kernel.query import Queryable
from querypage.kernel.types import Nothing, Option, Some

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidPageRequestError",
    "Nothing",
    "Option",
    "QueryExecutionModeError",
    "Queryable",
    "Some",
    "ValidationError",
]
