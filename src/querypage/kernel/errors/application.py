"""Application-layer errors — misuse of the query contract."""

from __future__ import annotations

from querypage.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class QueryExecutionModeError(ApplicationError, TypeError):
    """A blocking call was made on an async-only query, or vice versa."""

    default_code = "query_execution_mode"

    def __init__(self, query_type: str, operation: str, hint: str) -> None:
        super().__init__(
            f"{query_type} does not support {operation}(); {hint}",
            detail={"query_type": query_type, "operation": operation},
        )
        self.query_type = query_type
        self.operation = operation


__all__ = ["ApplicationError", "QueryExecutionModeError"]
