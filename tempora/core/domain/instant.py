"""
Instant & Duration — абсолютные точки времени и знаковые промежутки

Instant: точка во времени с разрешением в микросекунду, не зависящая от
leap seconds (UNIX seconds + microsecond, знаковые для дат до 1970).

Duration: знаковый промежуток в том же представлении (seconds, microsecond).

Оба типа — immutable value objects (frozen dataclass), сравнение и hash
определяются только полями. Порядок полей (seconds, microsecond) при
нормализованном microsecond даёт корректный total order (order=True).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from tempora.core.math.exact import (
    MICROSECONDS_PER_MILLISECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    add_pairs,
    compare_pairs,
    join_microseconds,
    split_microseconds,
    sub_pairs,
    validate_pair,
)

if TYPE_CHECKING:
    from tempora.core.domain.period import Period
    from tempora.core.domain.period_set import PeriodSet


# =============================================================================
# DURATION
# =============================================================================


@dataclass(frozen=True, order=True)
class Duration:
    """
    Знаковый промежуток времени.

    Отрицательный Duration хранится как (seconds < 0, microsecond >= 0):
    -1.5s = Duration(seconds=-2, microsecond=500000).
    """

    seconds: int
    microsecond: int = 0

    def __post_init__(self) -> None:
        validate_pair(self.seconds, self.microsecond)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Duration:
        return cls(*split_microseconds(microseconds))

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        return cls.from_microseconds(milliseconds * MICROSECONDS_PER_MILLISECOND)

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds, 0)

    @classmethod
    def from_minutes(cls, minutes: int) -> Duration:
        return cls(minutes * SECONDS_PER_MINUTE, 0)

    @classmethod
    def from_hours(cls, hours: int) -> Duration:
        return cls(hours * SECONDS_PER_HOUR, 0)

    @classmethod
    def from_days(cls, days: int) -> Duration:
        return cls(days * SECONDS_PER_DAY, 0)

    @classmethod
    def zero(cls) -> Duration:
        return cls(0, 0)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def in_microseconds(self) -> int:
        return join_microseconds(self.seconds, self.microsecond)

    def in_seconds(self) -> int:
        """Целые секунды (округление к -inf)."""
        return self.seconds

    def as_pair(self) -> tuple[int, int]:
        return (self.seconds, self.microsecond)

    # -------------------------------------------------------------------------
    # Sign
    # -------------------------------------------------------------------------

    def is_positive(self) -> bool:
        return self.seconds > 0 or (self.seconds == 0 and self.microsecond > 0)

    def is_negative(self) -> bool:
        return self.seconds < 0

    def is_zero(self) -> bool:
        return self.seconds == 0 and self.microsecond == 0

    def invert(self) -> Duration:
        return Duration.from_microseconds(-self.in_microseconds())

    def absolute(self) -> Duration:
        return self.invert() if self.is_negative() else self

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Duration) -> Duration:
        return Duration(*add_pairs(self.as_pair(), other.as_pair()))

    def sub(self, other: Duration) -> Duration:
        return Duration(*sub_pairs(self.as_pair(), other.as_pair()))

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> Duration:
        return self.invert()


# =============================================================================
# INSTANT
# =============================================================================


@dataclass(frozen=True, order=True)
class Instant:
    """
    Абсолютная точка во времени.

    seconds — секунды от 1970-01-01T00:00:00Z (без leap seconds),
    microsecond — доля секунды в [0, 1_000_000).

    Instant создаётся civil-календарём (tempora.core.civil) или
    напрямую из UNIX timestamp.
    """

    seconds: int
    microsecond: int = 0

    def __post_init__(self) -> None:
        validate_pair(self.seconds, self.microsecond)

    @classmethod
    def from_timestamp(cls, seconds: int, microsecond: int = 0) -> Instant:
        return cls(seconds, microsecond)

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Instant:
        return cls(*split_microseconds(microseconds))

    def as_pair(self) -> tuple[int, int]:
        return (self.seconds, self.microsecond)

    def timestamp_unix(self) -> Duration:
        """Секунды от начала UNIX эпохи, без учёта leap seconds."""
        return Duration(self.seconds, self.microsecond)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, duration: Duration) -> Instant:
        return Instant(*add_pairs(self.as_pair(), duration.as_pair()))

    def sub(self, duration: Duration) -> Instant:
        return Instant(*sub_pairs(self.as_pair(), duration.as_pair()))

    def distance_to(self, other: Instant) -> Duration:
        """Знаковое расстояние: other - self."""
        return Duration(*sub_pairs(other.as_pair(), self.as_pair()))

    def absolute_difference(self, other: Instant) -> Duration:
        return self.distance_to(other).absolute()

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Union[Instant, Duration]:
        if isinstance(other, Duration):
            return self.sub(other)
        if isinstance(other, Instant):
            return other.distance_to(self)
        return NotImplemented

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def compare(self, other: Instant) -> int:
        return compare_pairs(self.as_pair(), other.as_pair())

    def is_equal(self, other: Instant) -> bool:
        return self.compare(other) == 0

    def is_before(self, other: Instant) -> bool:
        return self.compare(other) < 0

    def is_before_or_equal(self, other: Instant) -> bool:
        return self.compare(other) <= 0

    def is_after(self, other: Instant) -> bool:
        return self.compare(other) > 0

    def is_after_or_equal(self, other: Instant) -> bool:
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Periods
    # -------------------------------------------------------------------------

    def until(self, other: Instant) -> Period:
        from tempora.core.domain.period import Period

        return Period(start=self, end=other)

    def since(self, other: Instant) -> Period:
        from tempora.core.domain.period import Period

        return Period(start=other, end=self)

    def iterate(self, other: Instant, step: Duration) -> PeriodSet:
        """
        Нарезка промежутка между self и other на шаги step (Closed).

        Если other раньше self — обратная нарезка since(other),
        иначе — прямая нарезка until(other).
        """
        from tempora.core.domain.interval import IntervalBoundary

        if other.is_before(self):
            return self.since(other).subdivide_backward(step, IntervalBoundary.CLOSED).to_period_set()
        return self.until(other).subdivide_forward(step, IntervalBoundary.CLOSED).to_period_set()
