"""Config settings – dataclass settings and environment loaders.

A settings class declares its env prefix and typed fields with defaults::

    @dataclasses.dataclass
    class ViewReportSettings(Settings):
        _prefix: ClassVar[str] = "VIEW_REPORT"
        interval_ms: int = 3000

    EnvSettingsLoader().load(ViewReportSettings)   # reads VIEW_REPORT_INTERVAL_MS
"""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, ClassVar, TypeVar

from folio_commons.config.errors import MissingRequiredSettingError
from folio_commons.kernel.errors import ConfigError

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]

S = TypeVar("S", bound="Settings")


@dataclasses.dataclass
class Settings:
    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for out-of-range values."""


def _to_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _to_list(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


# keyed by the annotation as written; modules use ``from __future__ import annotations``
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": _to_bool,
    "int": int,
    "float": float,
    "str": str,
    "list[str]": _to_list,
}


def _annotation_name(type_hint: Any) -> str:
    if isinstance(type_hint, str):
        return type_hint.replace(" ", "")
    if getattr(type_hint, "__origin__", None) is list:
        return "list[str]"
    return getattr(type_hint, "__name__", str(type_hint))


def env_key(settings_class: type[Settings], field_name: str) -> str:
    prefix = settings_class._prefix.upper()
    return f"{prefix}_{field_name.upper()}" if prefix else field_name.upper()


class SettingsLoader(abc.ABC):
    @abc.abstractmethod
    def load(self, settings_class: type[S]) -> S: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from ``<PREFIX>_<FIELD>`` environment variables.

    Unset variables keep the field default; a field without default must be
    set. Values that cannot be coerced or fail validation raise
    :class:`ConfigError`.
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[S]) -> S:
        environ = self._environ if self._environ is not None else os.environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = env_key(settings_class, field.name)
            raw = environ.get(key)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(key)
                continue
            coerce = _COERCERS.get(_annotation_name(field.type), str)
            try:
                values[field.name] = coerce(raw)
            except ValueError as exc:
                raise ConfigError(f"{key}={raw!r} is not a valid {field.type}", cause=exc) from exc
        return settings_class(**values)


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the process environment, then read it like :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", *, override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[S]) -> S:
        from dotenv import load_dotenv

        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)
