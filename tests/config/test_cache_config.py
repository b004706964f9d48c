"""Tests for cache configuration, environment settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from ant_cache.config import (
    DEFAULT_CHECK_PERIOD,
    CacheConfig,
    CacheSettings,
    LogFormat,
    LoggingConfig,
    setup_logging,
)


class TestCacheConfig:
    """Test cache configuration model."""

    def test_defaults(self):
        """Test default values."""
        config = CacheConfig()

        assert config.check_period_seconds == DEFAULT_CHECK_PERIOD
        assert config.ttl_seconds == 2 * DEFAULT_CHECK_PERIOD
        assert config.max_keys == 0
        assert config.delete_on_expire is True
        assert config.sweeper_enabled
        assert not config.is_bounded

    def test_ttl_derived_from_check_period(self):
        """Test an omitted TTL is twice the check period."""
        assert CacheConfig(check_period_seconds=5).ttl_seconds == 10
        assert CacheConfig(check_period_seconds=5, ttl_seconds=None).ttl_seconds == 10

    def test_explicit_ttl_wins(self):
        """Test an explicit TTL, including 0, is kept."""
        assert CacheConfig(check_period_seconds=5, ttl_seconds=3).ttl_seconds == 3
        assert CacheConfig(check_period_seconds=5, ttl_seconds=0).ttl_seconds == 0

    def test_zero_check_period_disables_sweeper(self):
        """Test a zero period turns the sweeper off."""
        config = CacheConfig(check_period_seconds=0)

        assert not config.sweeper_enabled
        assert config.ttl_seconds == 0

    def test_bounded(self):
        """Test max_keys above zero bounds the cache."""
        assert CacheConfig(max_keys=10).is_bounded

    @pytest.mark.parametrize(
        "overrides",
        [
            {"check_period_seconds": -1},
            {"ttl_seconds": -0.5},
            {"max_keys": -1},
            {"check_period_seconds": "soon"},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test negative and non-numeric values are rejected."""
        with pytest.raises(ValidationError):
            CacheConfig(**overrides)

    def test_unknown_field_rejected(self):
        """Test misspelled options fail loudly."""
        with pytest.raises(ValidationError):
            CacheConfig(maxKeys=10)

    def test_frozen(self):
        """Test configuration is immutable."""
        config = CacheConfig()

        with pytest.raises(ValidationError):
            config.max_keys = 5


class TestCacheSettings:
    """Test environment-based settings."""

    @pytest.fixture(autouse=True)
    def clean_environment(self, monkeypatch, tmp_path):
        for name in ["CHECK_PERIOD_SECONDS", "TTL_SECONDS", "MAX_KEYS", "DELETE_ON_EXPIRE"]:
            monkeypatch.delenv(f"ANT_CACHE_{name}", raising=False)
        monkeypatch.chdir(tmp_path)

    def test_defaults(self):
        """Test settings default to the config defaults."""
        assert CacheSettings().to_config() == CacheConfig()

    def test_reads_prefixed_variables(self, monkeypatch):
        """Test ANT_CACHE_* variables are applied."""
        monkeypatch.setenv("ANT_CACHE_CHECK_PERIOD_SECONDS", "2.5")
        monkeypatch.setenv("ANT_CACHE_TTL_SECONDS", "8")
        monkeypatch.setenv("ANT_CACHE_MAX_KEYS", "100")
        monkeypatch.setenv("ANT_CACHE_DELETE_ON_EXPIRE", "false")

        config = CacheSettings().to_config()

        assert config.check_period_seconds == 2.5
        assert config.ttl_seconds == 8
        assert config.max_keys == 100
        assert config.delete_on_expire is False

    def test_ttl_derived_when_unset(self, monkeypatch):
        """Test the derived TTL also applies to environment settings."""
        monkeypatch.setenv("ANT_CACHE_CHECK_PERIOD_SECONDS", "3")

        assert CacheSettings().to_config().ttl_seconds == 6

    def test_reads_env_file(self, tmp_path):
        """Test values from a .env file in the working directory."""
        (tmp_path / ".env").write_text("ANT_CACHE_MAX_KEYS=7\n", encoding="utf-8")

        assert CacheSettings().to_config().max_keys == 7

    def test_invalid_variable(self, monkeypatch):
        """Test invalid environment values are rejected."""
        monkeypatch.setenv("ANT_CACHE_MAX_KEYS", "-3")

        with pytest.raises(ValidationError):
            CacheSettings()


class TestLoggingConfig:
    """Test logging configuration."""

    @pytest.fixture
    def restore_logger(self):
        logger = logging.getLogger(LoggingConfig.LOGGER_NAME)
        handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
        yield logger
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate

    def test_build_defaults(self, monkeypatch):
        """Test INFO and the simple format without environment overrides."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        config = LoggingConfig.build()

        assert config["loggers"]["ant_cache"]["level"] == "INFO"
        assert config["formatters"]["default"]["format"] == "%(asctime)s - %(levelname)s - %(message)s"

    def test_build_from_environment(self, monkeypatch):
        """Test LOG_LEVEL and LOG_FORMAT are honoured."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "DETAILED")

        config = LoggingConfig.build()

        assert config["handlers"]["console"]["level"] == "DEBUG"
        assert "%(lineno)d" in config["formatters"]["default"]["format"]

    def test_build_arguments_override_environment(self, monkeypatch):
        """Test explicit arguments win."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = LoggingConfig.build(level="error", log_format=LogFormat.JSON.value)

        assert config["loggers"]["ant_cache"]["level"] == "ERROR"
        assert config["formatters"]["default"]["format"].startswith('{"time"')

    def test_build_rejects_unknown_level(self):
        """Test an unknown level name."""
        with pytest.raises(ValueError):
            LoggingConfig.build(level="loud")

    def test_setup_logging(self, restore_logger):
        """Test the ant_cache logger gets a handler and level."""
        setup_logging(level="WARNING")

        assert restore_logger.level == logging.WARNING
        assert restore_logger.handlers
        assert restore_logger.propagate is False

    def test_set_level(self, restore_logger):
        """Test changing the level at runtime."""
        LoggingConfig.set_level("debug")

        assert restore_logger.level == logging.DEBUG
