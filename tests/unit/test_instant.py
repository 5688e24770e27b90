"""
Тесты для Instant и Duration

Проверяет:
1. Нормализацию отрицательных значений (microsecond >= 0)
2. Точную арифметику add/sub/distance без float
3. Total order и compare
4. Immutability (frozen dataclass)
5. Instant.iterate (прямая и обратная нарезка)
"""

from dataclasses import FrozenInstanceError

import pytest

from tempora import Duration, Instant, Period
from tempora.core.civil import to_instant
from tempora.core.exceptions import InstantOverflowError, InvalidArgumentError
from tempora.core.math import INT64_MAX


# =============================================================================
# DURATION TESTS
# =============================================================================


class TestDuration:
    """Тесты для Duration"""

    def test_factories(self):
        assert Duration.from_minutes(2) == Duration(120)
        assert Duration.from_hours(1) == Duration(3_600)
        assert Duration.from_days(1) == Duration(86_400)
        assert Duration.from_milliseconds(1_500) == Duration(1, 500_000)
        assert Duration.from_microseconds(-1) == Duration(-1, 999_999)

    def test_sign(self):
        assert Duration(0, 1).is_positive()
        assert Duration(-1, 999_999).is_negative()
        assert Duration.zero().is_zero()
        assert not Duration.zero().is_positive()
        assert not Duration.zero().is_negative()

    def test_invert_and_absolute(self):
        d = Duration(1, 500_000)
        assert d.invert() == Duration(-2, 500_000)
        assert d.invert().in_microseconds() == -1_500_000
        assert d.invert().absolute() == d
        assert -d == d.invert()

    def test_add_sub(self):
        a = Duration(1, 700_000)
        b = Duration(0, 600_000)
        assert a + b == Duration(2, 300_000)
        assert b - a == Duration.from_microseconds(-1_100_000)

    def test_ordering(self):
        assert Duration(-1, 999_999) < Duration.zero() < Duration(0, 1)

    def test_invalid_fraction(self):
        with pytest.raises(InvalidArgumentError):
            Duration(0, 1_000_000)


# =============================================================================
# INSTANT TESTS
# =============================================================================


class TestInstant:
    """Тесты для Instant"""

    def test_pre_epoch_fraction_non_negative(self):
        instant = Instant.from_microseconds(-500_000)
        assert instant.seconds == -1
        assert instant.microsecond == 500_000

    def test_negative_fraction_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Instant(0, -1)

    def test_immutable(self):
        instant = Instant(10)
        with pytest.raises(FrozenInstanceError):
            instant.seconds = 11  # type: ignore[misc]

    def test_add_carries_microseconds(self):
        instant = Instant(10, 900_000)
        assert instant.add(Duration(0, 200_000)) == Instant(11, 100_000)
        assert instant + Duration(1) == Instant(11, 900_000)

    def test_sub_borrows_microseconds(self):
        instant = Instant(10, 100_000)
        assert instant.sub(Duration(0, 200_000)) == Instant(9, 900_000)

    def test_sub_across_epoch(self):
        assert Instant(0, 100_000).sub(Duration(0, 600_000)) == Instant(-1, 500_000)

    def test_instant_minus_instant_is_duration(self):
        assert Instant(10) - Instant(4, 500_000) == Duration(5, 500_000)
        assert Instant(4, 500_000) - Instant(10) == Duration(-6, 500_000)

    def test_distance_and_absolute_difference(self):
        a = Instant(100)
        b = Instant(40, 250_000)
        assert a.distance_to(b) == Duration.from_microseconds(-59_750_000)
        assert a.absolute_difference(b) == Duration(59, 750_000)
        assert b.absolute_difference(a) == Duration(59, 750_000)

    def test_compare(self):
        a = Instant(1, 0)
        b = Instant(1, 1)
        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a.compare(Instant(1)) == 0
        assert a < b and b > a
        assert a.is_before(b) and b.is_after(a)
        assert a.is_before_or_equal(Instant(1)) and a.is_after_or_equal(Instant(1))

    def test_sorting_is_chronological(self):
        instants = [Instant(3), Instant(-1, 999_999), Instant(0), Instant(-2)]
        assert sorted(instants) == [Instant(-2), Instant(-1, 999_999), Instant(0), Instant(3)]

    def test_hashable(self):
        assert len({Instant(1), Instant(1), Instant(1, 1)}) == 2

    def test_overflow(self):
        with pytest.raises(InstantOverflowError):
            Instant(INT64_MAX).add(Duration(1))

    def test_until_since(self):
        a = Instant(0)
        b = Instant(60)
        assert a.until(b) == Period(start=a, end=b)
        assert b.since(a) == Period(start=a, end=b)

    def test_timestamp_unix(self):
        instant = to_instant(2020, 1, 1, 0, 0, 0, 250_000)
        assert instant.timestamp_unix() == Duration(1_577_836_800, 250_000)


class TestInstantIterate:
    """Тесты Instant.iterate"""

    def test_iterate_forward(self):
        start = to_instant(2020, 1, 1)
        end = to_instant(2020, 1, 4)
        periods = start.iterate(end, Duration.from_days(1))

        assert len(periods) == 3
        assert periods.first() == Period(start=start, end=to_instant(2020, 1, 2))
        assert all(p.is_forward() for p in periods)

    def test_iterate_backward(self):
        start = to_instant(2020, 1, 4)
        end = to_instant(2020, 1, 1)
        periods = start.iterate(end, Duration.from_days(1))

        assert len(periods) == 3
        assert all(p.is_backward() for p in periods)
        # Выдаются по возрастанию
        assert periods.first() == Period(start=to_instant(2020, 1, 2), end=to_instant(2020, 1, 1))
        assert periods.last() == Period(start=to_instant(2020, 1, 4), end=to_instant(2020, 1, 3))
