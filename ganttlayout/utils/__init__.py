"""Utility functions."""

from .config import get_default_config, load_config, merge_config
from .datetime_utils import end_of_day, parse_timestamp, start_of_day, week_start

__all__ = [
    'load_config',
    'get_default_config',
    'merge_config',
    'start_of_day',
    'end_of_day',
    'week_start',
    'parse_timestamp',
]
