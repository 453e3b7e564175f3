"""Config validation errors raised while loading ``QUERYPAGE_*`` settings."""
from querypage.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be built from the environment."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable for a field without a default is unset.

    ``PaginationSettings`` defaults every field, so it never raises this;
    settings classes that declare a required field and load through
    :class:`~querypage.config.settings.EnvSettingsLoader` do.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Environment variable '{setting_name}' is required",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value does not parse, or breaks a page-size bound such as
    ``default_page_size <= max_page_size``."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' rejected {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
