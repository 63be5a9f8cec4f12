"""
Tests for configuration.

Validates:
  - Environment parsing for flags and log levels
  - Overrides and their validation
  - configure()/reset_config() lifecycle and logging setup
"""

import logging

import pytest
from lazyrange.config import (
    ENV_ALLOW_UNDEFINED_BEHAVIOUR,
    ENV_LOG_LEVEL,
    RangeConfig,
    configure,
    get_config,
    load_config,
    reset_config,
)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    level = logging.getLogger("lazyrange").level
    yield
    reset_config()
    logging.getLogger("lazyrange").setLevel(level)


class TestLoadConfig:
    def test_defaults(self):
        config = load_config(environ={})
        assert config == RangeConfig()
        assert config.allow_undefined_behaviour is False
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("raw,expected", [
        ("1", True), ("true", True), ("YES", True), ("on", True),
        ("0", False), ("false", False), ("off", False), ("", False),
    ])
    def test_flag_parsing(self, raw, expected):
        config = load_config(environ={ENV_ALLOW_UNDEFINED_BEHAVIOUR: raw})
        assert config.allow_undefined_behaviour is expected

    def test_invalid_flag(self):
        with pytest.raises(ValueError):
            load_config(environ={ENV_ALLOW_UNDEFINED_BEHAVIOUR: "maybe"})

    def test_log_level_is_normalized(self):
        assert load_config(environ={ENV_LOG_LEVEL: "debug"}).log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            load_config(environ={ENV_LOG_LEVEL: "LOUD"})

    def test_overrides_win_over_environment(self):
        config = load_config(
            overrides={"allow_undefined_behaviour": False, "log_level": "info"},
            environ={ENV_ALLOW_UNDEFINED_BEHAVIOUR: "1"},
        )
        assert config.allow_undefined_behaviour is False
        assert config.log_level == "INFO"

    def test_unknown_override(self):
        with pytest.raises(TypeError):
            load_config(overrides={"bogus": 1}, environ={})


class TestActiveConfig:
    def test_loaded_from_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_ALLOW_UNDEFINED_BEHAVIOUR, "true")
        assert get_config().allow_undefined_behaviour is True

    def test_configure_accumulates(self, monkeypatch):
        monkeypatch.delenv(ENV_ALLOW_UNDEFINED_BEHAVIOUR, raising=False)
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        configure(log_level="debug")
        config = configure(allow_undefined_behaviour=True)
        assert config.log_level == "DEBUG"
        assert config.allow_undefined_behaviour is True
        assert get_config() is config

    def test_configure_sets_package_log_level(self):
        configure(log_level="INFO")
        assert logging.getLogger("lazyrange").level == logging.INFO

    def test_unsafe_mode_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="lazyrange"):
            configure(allow_undefined_behaviour=True)
        assert any("stateless" in record.message for record in caplog.records)

    def test_configure_rejects_unknown_keys(self):
        with pytest.raises(TypeError):
            configure(bogus=True)

    def test_reset(self, monkeypatch):
        monkeypatch.delenv(ENV_ALLOW_UNDEFINED_BEHAVIOUR, raising=False)
        configure(allow_undefined_behaviour=True)
        reset_config()
        assert get_config().allow_undefined_behaviour is False
