"""Application pagination – PaginationSettings."""
from __future__ import annotations

import dataclasses
import functools

from querypage.config.settings import EnvSettingsLoader, Settings
from querypage.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class PaginationSettings(Settings):
    """Defaults applied by :func:`paginate`.

    Read from ``QUERYPAGE_DEFAULT_PAGE_SIZE`` and ``QUERYPAGE_MAX_PAGE_SIZE``.
    A ``max_page_size`` of ``0`` means no upper bound.
    """

    _prefix: dataclasses.ClassVar[str] = "QUERYPAGE"

    default_page_size: int = 20
    max_page_size: int = 0

    def _validate(self) -> None:
        if self.default_page_size < 1:
            raise InvalidSettingValueError("default_page_size", self.default_page_size, "must be >= 1")
        if self.max_page_size < 0:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 0")
        if self.max_page_size and self.default_page_size > self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, f"exceeds max_page_size {self.max_page_size}"
            )


@functools.lru_cache(maxsize=1)
def load_settings() -> PaginationSettings:
    """Load settings from the environment once; ``cache_clear()`` to reload."""
    return EnvSettingsLoader().load(PaginationSettings)


__all__ = ["PaginationSettings", "load_settings"]
