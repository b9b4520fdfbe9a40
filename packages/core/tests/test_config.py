"""Tests for the configuration system."""

from decimal import Decimal

import pytest

from runway_core.config import RunwaySettings, load_settings
from runway_core.exceptions import ConfigurationError


class TestRunwaySettings:
    """Test suite for RunwaySettings."""

    def test_default_values(self):
        """Settings should match the documented command line defaults."""
        settings = RunwaySettings()

        assert settings.cash_events_file_path == "data/cash_events.csv"
        assert settings.months == 12
        assert settings.tax_rate == Decimal("0.169")
        assert settings.verbose is False
        assert settings.log_level == "WARNING"

    def test_custom_values(self):
        settings = RunwaySettings(
            cash_events_file_path="events.csv",
            months=24,
            tax_rate="0.25",
            verbose=True,
            log_level="info",
        )

        assert settings.cash_events_file_path == "events.csv"
        assert settings.months == 24
        assert settings.tax_rate == Decimal("0.25")
        assert settings.verbose is True
        assert settings.log_level == "INFO"

    def test_tax_rate_bounds(self):
        RunwaySettings(tax_rate="0")
        RunwaySettings(tax_rate="1")

        with pytest.raises(ValueError):
            RunwaySettings(tax_rate="-0.1")

        with pytest.raises(ValueError):
            RunwaySettings(tax_rate="1.5")

    def test_negative_months_rejected(self):
        with pytest.raises(ValueError):
            RunwaySettings(months=-1)

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            RunwaySettings(log_level="LOUD")

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            RunwaySettings(cash_events_file_path="  ")

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("RUNWAY_MONTHS", "6")
        monkeypatch.setenv("RUNWAY_TAX_RATE", "0.3")
        monkeypatch.setenv("RUNWAY_CASH_EVENTS_FILE_PATH", "/tmp/events.csv")

        settings = RunwaySettings()

        assert settings.months == 6
        assert settings.tax_rate == Decimal("0.3")
        assert settings.cash_events_file_path == "/tmp/events.csv"

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("RUNWAY_MONTHS=3\n", encoding="utf-8")

        assert RunwaySettings().months == 3


class TestLoadSettings:
    """Test suite for load_settings."""

    def test_none_overrides_are_ignored(self, monkeypatch):
        monkeypatch.setenv("RUNWAY_MONTHS", "6")

        settings = load_settings(months=None, tax_rate=None)

        assert settings.months == 6
        assert settings.tax_rate == Decimal("0.169")

    def test_overrides_beat_environment(self, monkeypatch):
        monkeypatch.setenv("RUNWAY_MONTHS", "6")

        assert load_settings(months=18).months == 18

    def test_invalid_value_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(tax_rate="2")

        assert exc_info.value.config_key == "tax_rate"
        assert exc_info.value.details["config_key"] == "tax_rate"

    def test_unparseable_tax_rate(self):
        with pytest.raises(ConfigurationError):
            load_settings(tax_rate="a lot")
