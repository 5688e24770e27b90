"""
PeriodSet — упорядоченная коллекция периодов

Immutable Pydantic модель над tuple[Period, ...]:
- порядок вставки сохраняется, пока не вызван sort/sort_by
- дубликаты и пересечения допустимы
- gaps() находит непокрытые промежутки между объединённым покрытием
- add/merge_all — простая конкатенация без coalescing
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from operator import attrgetter
from typing import Any, Callable, Iterator, Optional

from pydantic import BaseModel, Field

from tempora.core.domain.period import Period


# =============================================================================
# SORT
# =============================================================================


class SortKey(str, Enum):
    """По какой границе периода сортировать"""

    START = "start"
    END = "end"


class SortDirection(str, Enum):
    """Направление сортировки"""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PeriodsSort:
    """Параметры сортировки PeriodSet (по умолчанию — по start, по возрастанию)."""

    key: SortKey = SortKey.START
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def asc(cls) -> PeriodsSort:
        return cls(SortKey.START, SortDirection.ASC)

    @classmethod
    def desc(cls) -> PeriodsSort:
        return cls(SortKey.START, SortDirection.DESC)

    @classmethod
    def by_start(cls, direction: SortDirection = SortDirection.ASC) -> PeriodsSort:
        return cls(SortKey.START, direction)

    @classmethod
    def by_end(cls, direction: SortDirection = SortDirection.ASC) -> PeriodsSort:
        return cls(SortKey.END, direction)

    def is_ascending(self) -> bool:
        return self.direction == SortDirection.ASC


# =============================================================================
# PERIOD SET MODEL
# =============================================================================


class PeriodSet(BaseModel):
    """
    Упорядоченная коллекция Period.

    Immutable модель (frozen=True): все операции возвращают новый PeriodSet.
    """

    periods: tuple[Period, ...] = Field(default=(), description="Периоды в порядке вставки")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, *periods: Period) -> PeriodSet:
        return cls(periods=periods)

    # -------------------------------------------------------------------------
    # Collection
    # -------------------------------------------------------------------------

    def all(self) -> list[Period]:
        return list(self.periods)

    def __iter__(self) -> Iterator[Period]:  # type: ignore[override]
        return iter(self.periods)

    def __len__(self) -> int:
        return len(self.periods)

    def __getitem__(self, index: int) -> Period:
        return self.periods[index]

    def first(self) -> Optional[Period]:
        return self.periods[0] if self.periods else None

    def last(self) -> Optional[Period]:
        return self.periods[-1] if self.periods else None

    def filter(self, predicate: Callable[[Period], bool]) -> PeriodSet:
        return PeriodSet(periods=tuple(p for p in self.periods if predicate(p)))

    def map(self, fn: Callable[[Period], Any]) -> list[Any]:
        return [fn(p) for p in self.periods]

    def add(self, *periods: Period) -> PeriodSet:
        return PeriodSet(periods=self.periods + periods)

    def merge_all(self, other: PeriodSet) -> PeriodSet:
        """Конкатенация двух наборов (без dedup и без coalescing)."""
        return PeriodSet(periods=self.periods + other.periods)

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def sort(self) -> PeriodSet:
        return self.sort_by(PeriodsSort.asc())

    def sort_by(self, sort: PeriodsSort) -> PeriodSet:
        """
        Стабильная сортировка по start или end.

        sorted() стабилен и при reverse=True, поэтому периоды с равным
        ключом сохраняют исходный относительный порядок в обоих направлениях.
        """
        key = attrgetter(sort.key.value)

        return PeriodSet(
            periods=tuple(sorted(self.periods, key=key, reverse=not sort.is_ascending()))
        )

    # -------------------------------------------------------------------------
    # Gaps
    # -------------------------------------------------------------------------

    def gaps(self) -> PeriodSet:
        """
        Непокрытые промежутки между периодами.

        Алгоритм:
        1. Нормализация всех периодов к forward
        2. Сортировка по start по возрастанию
        3. Sweep слева направо: пересекающиеся/касающиеся периоды
           сливаются в accumulator, иначе фиксируется gap (acc.end, next.start)

        Returns:
            PeriodSet с forward gap-периодами (пустой для 0 или 1 периода)
        """
        periods = PeriodSet(periods=tuple(p.forward() for p in self.periods)).sort().periods
        if len(periods) < 2:
            return PeriodSet()

        gaps: list[Period] = []
        total = periods[0]

        for period in periods[1:]:
            if total.overlaps(period) or total.abuts(period):
                total = total.merge(period)
            else:
                gaps.append(Period(start=total.end, end=period.start))
                total = period

        return PeriodSet(periods=tuple(gaps))
