"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── InvalidPageRequestError
    └── ApplicationError         (application.py)
        └── QueryExecutionModeError

Errors raised by a query engine (SQLAlchemy, a driver, ...) are never
wrapped; they reach the caller unchanged.
"""

from querypage.kernel.errors.application import ApplicationError, QueryExecutionModeError
from querypage.kernel.errors.base import BaseError
from querypage.kernel.errors.domain import (
    DomainError,
    InvalidPageRequestError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidPageRequestError",
    "QueryExecutionModeError",
    "ValidationError",
]
