"""Leap seconds — таблица leap seconds и конвертация Instant в эпохи UNIX/GPS/TAI.

- LeapSecondTable: упорядоченная immutable таблица (TAI-UTC)
- load_leap_seconds: lazy + memoized загрузка, безопасная для потоков
- EpochConverter: timestamp(instant, epoch) с коррекцией leap seconds
"""

from .converter import EpochConverter
from .table import (
    LeapSecond,
    LeapSecondRecord,
    LeapSecondTable,
    load_leap_seconds,
    parse_leap_seconds,
    read_leap_seconds,
    reset_leap_seconds_cache,
)

__all__ = [
    "EpochConverter",
    "LeapSecond",
    "LeapSecondRecord",
    "LeapSecondTable",
    "load_leap_seconds",
    "parse_leap_seconds",
    "read_leap_seconds",
    "reset_leap_seconds_cache",
]
