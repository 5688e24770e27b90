"""
Domain models и value objects.

Содержит Instant, Duration, Period, PeriodSet, IntervalBoundary, TimeEpoch.
"""

from tempora.core.domain.epoch import (
    GPS_EPOCH_ORIGIN,
    TAI_EPOCH_ORIGIN,
    UNIX_EPOCH_ORIGIN,
    EpochKind,
    TimeEpoch,
)
from tempora.core.domain.instant import Duration, Instant
from tempora.core.domain.interval import IntervalBoundary
from tempora.core.domain.period import Period, Subdivision
from tempora.core.domain.period_set import PeriodSet, PeriodsSort, SortDirection, SortKey

__all__ = [
    # Instant module
    "Instant",
    "Duration",
    # Interval module
    "IntervalBoundary",
    # Period model
    "Period",
    "Subdivision",
    # PeriodSet model
    "PeriodSet",
    "PeriodsSort",
    "SortKey",
    "SortDirection",
    # Epoch module
    "EpochKind",
    "TimeEpoch",
    "UNIX_EPOCH_ORIGIN",
    "GPS_EPOCH_ORIGIN",
    "TAI_EPOCH_ORIGIN",
]
