"""Config errors."""
from __future__ import annotations

from folio_commons.kernel.errors import ConfigError

__all__ = ["InvalidSettingValueError", "MissingRequiredSettingError"]


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"environment variable {env_key} is required", detail={"env_key": env_key})
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting"

    def __init__(self, name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{name}={value!r} is invalid: {reason}",
            detail={"setting": name, "reason": reason},
        )
        self.name = name
        self.value = value
        self.reason = reason
