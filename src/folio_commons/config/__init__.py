"""Config – dataclass settings read from the environment."""

from folio_commons.config.errors import InvalidSettingValueError, MissingRequiredSettingError
from folio_commons.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsLoader
from folio_commons.kernel.errors import ConfigError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
