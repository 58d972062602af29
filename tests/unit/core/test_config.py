"""
Unit tests for the configuration layer.

Test Coverage
-------------
- Environment parsing with fallback
- Safe environment parsing (ints, bools, strings)
- Loading, validation and environment checks
"""

import pytest

from skillwatch.core.config import Config, Environment

_CONFIG_ATTRS = (
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_JSON",
    "LOG_COLORS",
    "LOG_TO_FILE",
    "LOG_RETENTION_DAYS",
    "LOG_QUEUE_SIZE",
    "LOGS_DIR",
)


@pytest.fixture
def restore_config():
    """Restore Config class attributes after a test reloads them."""
    saved = {attr: getattr(Config, attr) for attr in _CONFIG_ATTRS}
    yield
    for attr, value in saved.items():
        setattr(Config, attr, value)


@pytest.mark.unit
class TestEnvironment:
    """Test Environment parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("production", Environment.PRODUCTION),
            ("TESTING", Environment.TESTING),
            ("staging", Environment.STAGING),
            ("nonsense", Environment.DEVELOPMENT),
        ],
    )
    def test_from_string(self, raw, expected):
        assert Environment.from_string(raw) is expected


@pytest.mark.unit
class TestSafeParsing:
    """Test the _safe_* helpers."""

    def test_int_from_env(self, monkeypatch):
        monkeypatch.setenv("SKILLWATCH_TEST_INT", "42")
        assert Config._safe_int("SKILLWATCH_TEST_INT", 5) == 42

    def test_int_default_when_missing(self, monkeypatch):
        monkeypatch.delenv("SKILLWATCH_TEST_INT", raising=False)
        assert Config._safe_int("SKILLWATCH_TEST_INT", 5) == 5

    def test_int_invalid_records_error(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("SKILLWATCH_TEST_INT", "many")

        # Act
        value = Config._safe_int("SKILLWATCH_TEST_INT", 5)

        # Assert
        assert value == 5
        assert "SKILLWATCH_TEST_INT" in Config.get_metrics().validation_errors

    @pytest.mark.parametrize("raw", ["0", "1000"])
    def test_int_out_of_bounds(self, monkeypatch, raw):
        monkeypatch.setenv("SKILLWATCH_TEST_INT", raw)
        assert Config._safe_int("SKILLWATCH_TEST_INT", 5, min_val=1, max_val=365) == 5

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("YES", True), ("1", True), ("off", False), ("no", False)],
    )
    def test_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("SKILLWATCH_TEST_BOOL", raw)
        assert Config._safe_bool("SKILLWATCH_TEST_BOOL", None) is expected

    def test_bool_invalid_falls_back(self, monkeypatch):
        monkeypatch.setenv("SKILLWATCH_TEST_BOOL", "maybe")
        assert Config._safe_bool("SKILLWATCH_TEST_BOOL", True) is True

    def test_str(self, monkeypatch):
        monkeypatch.setenv("SKILLWATCH_TEST_STR", "value")
        assert Config._safe_str("SKILLWATCH_TEST_STR", "default") == "value"


@pytest.mark.unit
class TestConfigLoad:
    """Test Config.load() and Config.validate()."""

    def test_testing_environment_from_pytest_configure(self):
        assert Config.is_testing() is True
        assert Config.is_production() is False

    def test_load_reads_environment(self, monkeypatch, restore_config, tmp_path):
        # Arrange
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_JSON", "true")
        monkeypatch.setenv("LOG_RETENTION_DAYS", "30")
        monkeypatch.setenv("LOGS_DIR", str(tmp_path))

        # Act
        Config.load()
        Config.validate()

        # Assert
        assert Config.is_production() is True
        assert Config.LOG_LEVEL == "WARNING"
        assert Config.LOG_JSON is True
        assert Config.LOG_RETENTION_DAYS == 30
        assert Config.LOGS_DIR == tmp_path

    def test_invalid_log_level_falls_back_to_info(self, monkeypatch, restore_config):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        Config.load()
        Config.validate()

        assert Config.LOG_LEVEL == "INFO"
        assert "LOG_LEVEL" in Config.get_metrics().validation_errors

    def test_reload_safe_configs(self, monkeypatch, restore_config):
        monkeypatch.setenv("DEBUG", "true")

        Config.reload_safe_configs()

        assert Config.DEBUG is True

    def test_config_summary(self):
        summary = Config.get_config_summary()

        assert summary["environment"] == Config.ENVIRONMENT
        assert summary["log_level"] == Config.LOG_LEVEL
        assert set(summary) >= {"debug", "log_json", "log_to_file", "logs_dir"}
