"""
tempora — Gregorian time periods and leap-second aware epochs.

Public API re-exported from tempora.core and tempora.leap.
"""

from tempora.core.domain import (
    Duration,
    EpochKind,
    Instant,
    IntervalBoundary,
    Period,
    PeriodSet,
    PeriodsSort,
    SortDirection,
    SortKey,
    Subdivision,
    TimeEpoch,
)
from tempora.core.exceptions import (
    EpochRangeError,
    InstantOverflowError,
    InvalidArgumentError,
    InvalidOperationError,
    TemporaError,
)
from tempora.leap import EpochConverter, LeapSecond, LeapSecondTable, load_leap_seconds

__all__ = [
    "Duration",
    "EpochKind",
    "Instant",
    "IntervalBoundary",
    "Period",
    "PeriodSet",
    "PeriodsSort",
    "SortDirection",
    "SortKey",
    "Subdivision",
    "TimeEpoch",
    "TemporaError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "EpochRangeError",
    "InstantOverflowError",
    "EpochConverter",
    "LeapSecond",
    "LeapSecondTable",
    "load_leap_seconds",
]
