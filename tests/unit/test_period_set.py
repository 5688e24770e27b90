"""
Тесты для PeriodSet

Проверяет:
1. Стабильную сортировку по start/end в обоих направлениях
2. gaps(): нормализация, sweep, пустой/одиночный набор
3. add/merge_all — конкатенация без coalescing
4. Коллекционный API (first/last/filter/map)
"""

import pytest

from tempora import Instant, Period, PeriodSet, PeriodsSort, SortDirection
from tempora.core.civil import to_instant


def day(d: int) -> Instant:
    return to_instant(2020, 1, d)


def period(a: int, b: int) -> Period:
    return Period(start=day(a), end=day(b))


# =============================================================================
# COLLECTION
# =============================================================================


class TestPeriodSetCollection:
    """Тесты коллекционного API"""

    def test_empty(self):
        periods = PeriodSet()
        assert len(periods) == 0
        assert periods.first() is None
        assert periods.last() is None
        assert periods.all() == []

    def test_insertion_order_preserved(self):
        periods = PeriodSet.of(period(5, 6), period(1, 2), period(3, 4))
        assert periods.all() == [period(5, 6), period(1, 2), period(3, 4)]
        assert periods.first() == period(5, 6)
        assert periods.last() == period(3, 4)
        assert periods[1] == period(1, 2)

    def test_add_concatenates_without_dedup(self):
        periods = PeriodSet.of(period(1, 2)).add(period(1, 2), period(1, 3))
        assert len(periods) == 3

    def test_merge_all_concatenates(self):
        a = PeriodSet.of(period(1, 2), period(2, 3))
        b = PeriodSet.of(period(1, 3))
        merged = a.merge_all(b)
        assert merged.all() == [period(1, 2), period(2, 3), period(1, 3)]
        # Исходные наборы не изменены
        assert len(a) == 2
        assert len(b) == 1

    def test_filter_and_map(self):
        periods = PeriodSet.of(period(1, 2), period(3, 1), period(4, 8))
        forward = periods.filter(lambda p: p.is_forward())
        assert forward.all() == [period(1, 2), period(4, 8)]
        assert periods.map(lambda p: p.is_backward()) == [False, True, False]


# =============================================================================
# SORTING
# =============================================================================


class TestPeriodSetSort:
    """Тесты сортировки"""

    def test_sort_ascending_by_start(self):
        periods = PeriodSet.of(period(5, 6), period(1, 9), period(3, 4))
        assert periods.sort().all() == [period(1, 9), period(3, 4), period(5, 6)]

    def test_sort_descending_by_start(self):
        periods = PeriodSet.of(period(5, 6), period(1, 9), period(3, 4))
        assert periods.sort_by(PeriodsSort.desc()).all() == [period(5, 6), period(3, 4), period(1, 9)]

    def test_sort_by_end(self):
        periods = PeriodSet.of(period(1, 9), period(5, 6), period(3, 4))
        assert periods.sort_by(PeriodsSort.by_end()).all() == [period(3, 4), period(5, 6), period(1, 9)]
        assert periods.sort_by(PeriodsSort.by_end(SortDirection.DESC)).all() == [
            period(1, 9),
            period(5, 6),
            period(3, 4),
        ]

    @pytest.mark.parametrize(
        "sort",
        [PeriodsSort.asc(), PeriodsSort.desc()],
    )
    def test_sort_is_stable_by_start(self, sort: PeriodsSort):
        first = period(2, 5)
        second = period(2, 9)
        periods = PeriodSet.of(first, period(1, 3), second)

        result = periods.sort_by(sort).all()
        assert result.index(first) < result.index(second)

    @pytest.mark.parametrize(
        "sort",
        [PeriodsSort.by_end(), PeriodsSort.by_end(SortDirection.DESC)],
    )
    def test_sort_is_stable_by_end(self, sort: PeriodsSort):
        first = period(1, 5)
        second = period(3, 5)
        periods = PeriodSet.of(period(6, 9), first, second)

        result = periods.sort_by(sort).all()
        assert result.index(first) < result.index(second)


# =============================================================================
# GAPS
# =============================================================================


class TestPeriodSetGaps:
    """Тесты gaps()"""

    def test_empty_and_single_have_no_gaps(self):
        assert PeriodSet().gaps().all() == []
        assert PeriodSet.of(period(1, 5)).gaps().all() == []

    def test_single_gap(self):
        periods = PeriodSet.of(period(1, 3), period(5, 8))
        assert periods.gaps().all() == [period(3, 5)]

    def test_gaps_unsorted_input(self):
        periods = PeriodSet.of(period(10, 12), period(1, 3), period(5, 8))
        assert periods.gaps().all() == [period(3, 5), period(8, 10)]

    def test_overlapping_and_contiguous_have_no_gaps(self):
        periods = PeriodSet.of(period(1, 5), period(3, 7), period(7, 10), period(2, 4))
        assert periods.gaps().all() == []

    def test_gap_after_merged_coverage(self):
        # [1, 10] покрывает [2, 4]; gap от конца покрытия, а не от [2, 4]
        periods = PeriodSet.of(period(1, 10), period(2, 4), period(12, 14))
        assert periods.gaps().all() == [period(10, 12)]

    def test_backward_periods_are_normalized(self):
        periods = PeriodSet.of(period(3, 1), period(8, 5))
        gaps = periods.gaps()
        assert gaps.all() == [period(3, 5)]
        assert gaps.first().is_forward()

    def test_duplicates(self):
        periods = PeriodSet.of(period(1, 3), period(1, 3), period(4, 6))
        assert periods.gaps().all() == [period(3, 4)]
