"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from folio_commons.application.view_tracking import ViewIngestSettings, ViewReportSettings
from folio_commons.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)


@dataclass
class SiteSettings(Settings):
    _prefix: ClassVar[str] = "SITE"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    ratio: float = 0.5
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    api_key: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITE_HOST", "example.com")
        assert EnvSettingsLoader().load(SiteSettings).host == "example.com"

    def test_loads_int_and_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITE_PORT", "9000")
        monkeypatch.setenv("SITE_RATIO", "0.25")
        settings = EnvSettingsLoader().load(SiteSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("SITE_DEBUG", truthy)
            assert EnvSettingsLoader().load(SiteSettings).debug is True
        for falsy in ("false", "0", "no", "off"):
            monkeypatch.setenv("SITE_DEBUG", falsy)
            assert EnvSettingsLoader().load(SiteSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITE_ALLOWED_ORIGINS", "http://a.com, http://b.com,")
        assert EnvSettingsLoader().load(SiteSettings).allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved_when_env_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("SITE_HOST", "SITE_PORT", "SITE_DEBUG", "SITE_RATIO", "SITE_ALLOWED_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(SiteSettings)
        assert settings == SiteSettings()

    def test_missing_required_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_API_KEY", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.env_key == "REQ_API_KEY"

    def test_bad_int_wrapped_in_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITE_PORT", "eighty")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(SiteSettings)


class TestDotenvSettingsLoader:
    def test_override_reads_env_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITE_HOST", "from-env")
        env_file = tmp_path / ".env"
        env_file.write_text("SITE_HOST=dotenv.example\n")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(SiteSettings)
        assert settings.host == "dotenv.example"

    def test_existing_env_wins_without_override(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITE_HOST", "from-env")
        env_file = tmp_path / ".env"
        env_file.write_text("SITE_HOST=dotenv.example\n")
        assert DotenvSettingsLoader(str(env_file)).load(SiteSettings).host == "from-env"


# ---------------------------------------------------------------------------
# View tracking settings
# ---------------------------------------------------------------------------


class TestViewReportSettings:
    def test_defaults(self) -> None:
        settings = ViewReportSettings()
        assert settings.url == "/api/view/report"
        assert settings.interval_ms == 3000
        assert settings.interval == 3.0

    def test_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIEW_REPORT_BASE_URL", "https://folio.example")
        monkeypatch.setenv("VIEW_REPORT_TIMEOUT", "2.5")
        settings = EnvSettingsLoader().load(ViewReportSettings)
        assert settings.base_url == "https://folio.example"
        assert settings.timeout == 2.5

    @pytest.mark.parametrize("interval_ms", [0, -100])
    def test_non_positive_interval_rejected(self, interval_ms: int) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ViewReportSettings(interval_ms=interval_ms)
        assert exc_info.value.name == "interval_ms"

    def test_invalid_env_interval_surfaces_as_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIEW_REPORT_INTERVAL_MS", "0")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(ViewReportSettings)

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ViewReportSettings(timeout=0)


class TestViewIngestSettings:
    def test_defaults(self) -> None:
        settings = ViewIngestSettings()
        assert settings.dedupe_window_minutes == 30
        assert settings.count_bots is False
        assert settings.set_visitor_cookie is True
        assert settings.client_ip_placeholder == "0.0.0.0"

    def test_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIEW_DEDUPE_WINDOW_MINUTES", "10")
        monkeypatch.setenv("VIEW_COUNT_BOTS", "true")
        monkeypatch.setenv("VIEW_SET_VISITOR_COOKIE", "false")
        settings = EnvSettingsLoader().load(ViewIngestSettings)
        assert settings.dedupe_window_minutes == 10
        assert settings.count_bots is True
        assert settings.set_visitor_cookie is False
