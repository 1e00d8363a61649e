from __future__ import annotations

import logging
import os
import string
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)

_ENV_LOG_LEVEL = 'LOQY_LOG_LEVEL'


def _level_name(level: str) -> str:
    """upper-cased level name, or a valueerror when logging does not know it"""
    name = str(level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"unknown log level: '{level}'")
    return name


def _apply_level(level: str) -> None:
    logging.getLogger('loqy').setLevel(level)


@dataclass(frozen=True)
class Settings:
    """library-wide defaults"""
    default_charset: str = string.ascii_letters + string.digits
    max_capacity: int = 1 << 30  # ceiling for nearest_power_of_two
    ellipsis_marker: str = '...'
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls) -> 'Settings':
        """
        build settings, taking the log level from LOQY_LOG_LEVEL when set.
        an unknown level is reported and the default kept.
        """
        level = os.environ.get(_ENV_LOG_LEVEL)
        if not level:
            return cls()
        try:
            return cls(log_level=_level_name(level))
        except ValueError as e:
            logger.warning(f"ignoring {_ENV_LOG_LEVEL}: {e}")
            return cls()


_active = Settings.from_env()
if os.environ.get(_ENV_LOG_LEVEL):
    _apply_level(_active.log_level)


def get_settings() -> Settings:
    return _active


def configure(**overrides) -> Settings:
    """
    replaces the active settings with a copy carrying the given overrides.
    unknown field names raise a typeerror, bad values a valueerror; either
    way the active settings stay as they were. the log level is applied to
    the 'loqy' logger immediately.
    """
    global _active
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown setting(s): {', '.join(sorted(unknown))}")
    if 'default_charset' in overrides and not overrides['default_charset']:
        raise ValueError("default_charset must not be empty")
    if 'log_level' in overrides:
        overrides['log_level'] = _level_name(overrides['log_level'])

    _active = replace(_active, **overrides)
    _apply_level(_active.log_level)
    logger.debug(f"settings updated: {overrides}")
    return _active
