"""Utility functions."""

from .config import ConfigError, get_default_config, load_config, load_config_or_default
from .datetime_utils import Weekday, ceil_days_between, format_work_days, weekday_of

__all__ = [
    'ConfigError',
    'get_default_config',
    'load_config',
    'load_config_or_default',
    'Weekday',
    'ceil_days_between',
    'format_work_days',
    'weekday_of',
]
