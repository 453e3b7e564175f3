"""Domain errors — rejected pagination requests."""

from __future__ import annotations

from typing import Any

from querypage.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a request breaks a library rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level failures, one dict per field.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidPageRequestError(ValidationError, ValueError):
    """Page number or page size is out of range.

    Raised before the query is touched, so a bad request never reaches the
    engine as a negative offset or a zero-sized slice.
    """

    default_code = "invalid_page_request"

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid {field} {value!r}: {reason}",
            errors=[{"field": field, "value": value, "reason": reason}],
        )
        self.field = field
        self.value = value
        self.reason = reason


__all__ = ["DomainError", "InvalidPageRequestError", "ValidationError"]
