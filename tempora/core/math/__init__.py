"""
Core math modules для tempora

Точная целочисленная арифметика над (seconds, microsecond).
"""

from tempora.core.math.exact import (
    INT64_MAX,
    INT64_MIN,
    MICROSECONDS_PER_MILLISECOND,
    MICROSECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    add_pairs,
    compare_pairs,
    ensure_int64,
    join_microseconds,
    split_microseconds,
    sub_pairs,
    validate_pair,
)

__all__ = [
    # Constants
    "INT64_MAX",
    "INT64_MIN",
    "MICROSECONDS_PER_MILLISECOND",
    "MICROSECONDS_PER_SECOND",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    # Functions
    "add_pairs",
    "compare_pairs",
    "ensure_int64",
    "join_microseconds",
    "split_microseconds",
    "sub_pairs",
    "validate_pair",
]
