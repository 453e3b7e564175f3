"""BaseError — root of every error querypage raises itself."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Library-raised failure carrying a stable ``code`` and a ``detail`` dict.

    Query engine errors never pass through here; only rejections made by
    querypage (bad page requests, bad settings, sync/async misuse) do.

    Args:
        message: What was rejected, for humans.
        code: Slug for callers that branch on the failure kind; falls back to
            the subclass ``default_code``.
        detail: Offending values, kept JSON-serialisable so they can be bound
            to a structlog event as-is.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``code``, ``message`` and ``detail`` as a plain dict."""
        return {"code": self.code, "message": self.message, "detail": self.detail}


__all__ = ["BaseError"]
