"""
Configuration
=============

Process-wide switches for lazyrange.

The only behavioural switch is ``allow_undefined_behaviour``: when enabled,
callables without instance state are stored as a bare type and invoked
through a null receiver (see :class:`lazyrange.core.nullable_function.StatelessFunction`).
It is off unless explicitly requested, either through ``configure()`` or the
``LAZYRANGE_ALLOW_UNDEFINED_BEHAVIOUR`` environment variable.

Usage:
    >>> from lazyrange.config import configure, get_config
    >>> configure(enable_logging=True, log_level="DEBUG")
    >>> get_config().allow_undefined_behaviour
    False
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

ENV_ALLOW_UNDEFINED_BEHAVIOUR = "LAZYRANGE_ALLOW_UNDEFINED_BEHAVIOUR"
ENV_LOG_LEVEL = "LAZYRANGE_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeConfig:
    """Active configuration for lazyrange."""
    allow_undefined_behaviour: bool = False
    log_level: str = "WARNING"
    enable_logging: bool = False


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"Unsupported log level: {raw}")
    return level


def load_config(
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RangeConfig:
    """
    Build a configuration from the environment, then apply ``overrides``.

    ``environ`` defaults to ``os.environ``; tests pass a plain dict.
    Unknown override keys raise ``TypeError`` like a bad keyword argument.
    """
    if environ is None:
        environ = os.environ
    values = {}
    if ENV_ALLOW_UNDEFINED_BEHAVIOUR in environ:
        values["allow_undefined_behaviour"] = _parse_bool(
            ENV_ALLOW_UNDEFINED_BEHAVIOUR, environ[ENV_ALLOW_UNDEFINED_BEHAVIOUR]
        )
    if ENV_LOG_LEVEL in environ:
        values["log_level"] = _parse_level(environ[ENV_LOG_LEVEL])

    config = RangeConfig(**values)
    if overrides:
        overrides = dict(overrides)
        if "log_level" in overrides:
            overrides["log_level"] = _parse_level(overrides["log_level"])
        config = replace(config, **overrides)
    return config


_active: Optional[RangeConfig] = None


def get_config() -> RangeConfig:
    """Return the active configuration, loading it lazily on first use."""
    global _active
    if _active is None:
        _active = load_config()
    return _active


def configure(**overrides: Any) -> RangeConfig:
    """
    Install a new active configuration.

    Starts from the current configuration so repeated calls accumulate.
    ``enable_logging=True`` sets up root logging at ``log_level``.
    """
    global _active
    config = replace(get_config(), **overrides)
    if "log_level" in overrides:
        config = replace(config, log_level=_parse_level(config.log_level))
    _active = config

    if config.enable_logging:
        logging.basicConfig(level=getattr(logging, config.log_level))
    logging.getLogger("lazyrange").setLevel(getattr(logging, config.log_level))
    if config.allow_undefined_behaviour:
        logger.warning("Unchecked stateless-callable storage is enabled")
    return config


def reset_config() -> None:
    """Forget the active configuration; the next ``get_config`` reloads it."""
    global _active
    _active = None
