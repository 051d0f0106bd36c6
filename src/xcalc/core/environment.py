"""
Environment configuration for xcalc.

The only setting read from the environment is the logging level:

    XCALC_LOG_LEVEL - one of debug, info, warning, error, critical
                      (default: warning)

Usage:
    from xcalc.core.environment import get_log_level

    logging.basicConfig(level=get_log_level())
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum


class LogLevel(StrEnum):
    """Accepted logging level names."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


# Default level
_DEFAULT_LEVEL = LogLevel.WARNING

# Environment variable name
XCALC_LOG_LEVEL_VAR = "XCALC_LOG_LEVEL"

# Fractional digits printed for a result when no precision is given
DEFAULT_PRECISION = 6


def get_log_level_name() -> LogLevel:
    """Get the configured level from XCALC_LOG_LEVEL.

    Returns:
        LogLevel: The configured level. Defaults to warning if the
        variable is not set or invalid.

    Examples:
        >>> import os
        >>> os.environ["XCALC_LOG_LEVEL"] = "DEBUG"
        >>> get_log_level_name()
        <LogLevel.DEBUG: 'debug'>
    """
    env_value = os.environ.get(XCALC_LOG_LEVEL_VAR, "").lower().strip()

    if env_value == "":
        return _DEFAULT_LEVEL
    try:
        return LogLevel(env_value)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Unknown XCALC_LOG_LEVEL value '%s'. Valid values: %s. Defaulting to %s.",
            env_value,
            ", ".join(level.value for level in LogLevel),
            _DEFAULT_LEVEL.value,
        )
        return _DEFAULT_LEVEL


def get_log_level(verbose: bool = False) -> int:
    """Resolve the numeric logging level.

    ``verbose`` forces DEBUG regardless of the environment.
    """
    if verbose:
        return logging.DEBUG
    return getattr(logging, get_log_level_name().value.upper())
