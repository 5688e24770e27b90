"""
Period — направленный промежуток между двумя Instant и алгебра периодов

Immutable Pydantic модель (start, end). Backward период (start после end)
является полноценным состоянием, а не ошибкой: distance() знаковая.

Алгебра:
- distance / is_forward / is_backward / revert / forward
- abuts / overlaps / contains / merge
- subdivide_forward / subdivide_backward — ленивые, конечные,
  перезапускаемые последовательности sub-periods

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. overlaps симметричен; abuts => not overlaps
2. revert().revert() == self; distance() == -revert().distance()
3. merge(other) содержит оба исходных периода
4. step <= 0 в subdivision → InvalidArgumentError до начала итерации
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from pydantic import BaseModel, Field

from tempora.core.domain.instant import Duration, Instant
from tempora.core.domain.interval import IntervalBoundary
from tempora.core.exceptions import InvalidArgumentError, InvalidOperationError
from tempora.core.math import join_microseconds

if TYPE_CHECKING:
    from tempora.core.domain.period_set import PeriodSet
    from tempora.leap.table import LeapSecondTable


# =============================================================================
# PERIOD MODEL
# =============================================================================


class Period(BaseModel):
    """
    Направленный промежуток времени.

    Immutable модель (frozen=True). Все операции возвращают новые экземпляры.
    """

    start: Instant = Field(..., description="Начало периода")
    end: Instant = Field(..., description="Конец периода (может быть раньше start)")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Direction
    # -------------------------------------------------------------------------

    def distance(self) -> Duration:
        """
        Расстояние end - start без учёта leap seconds.

        Returns:
            Duration: положительный для forward, отрицательный для backward
        """
        return self.start.distance_to(self.end)

    def is_forward(self) -> bool:
        return self.start.compare(self.end) < 0

    def is_backward(self) -> bool:
        return self.start.compare(self.end) > 0

    def revert(self) -> Period:
        return Period(start=self.end, end=self.start)

    def forward(self) -> Period:
        """Нормализованная (forward) копия периода."""
        return self.revert() if self.is_backward() else self

    # -------------------------------------------------------------------------
    # Relations
    # -------------------------------------------------------------------------

    def abuts(self, other: Period) -> bool:
        """
        Периоды касаются ровно одной границей (без допуска).

        Сравнение выполняется после нормализации обоих периодов.
        """
        this_forward = self.forward()
        other_forward = other.forward()

        if this_forward.end.is_equal(other_forward.start):
            return True

        if this_forward.start.is_equal(other_forward.end):
            return True

        return False

    def overlaps(self, other: Period) -> bool:
        """
        Периоды имеют общую внутреннюю часть.

        Общая граница без пересечения — это abuts, а не overlaps.
        Идентичные периоды и вложенные периоды пересекаются.
        """
        if self.abuts(other):
            return False

        this_forward = self.forward()
        other_forward = other.forward()

        return this_forward.start.is_before(other_forward.end) and other_forward.start.is_before(
            this_forward.end
        )

    def contains(self, other: Period) -> bool:
        """
        Период целиком покрывает other (границы включительно).

        Оба периода нормализуются до сравнения, поэтому направление
        не влияет на результат.
        """
        this_forward = self.forward()
        other_forward = other.forward()

        return this_forward.start.is_before_or_equal(
            other_forward.start
        ) and this_forward.end.is_after_or_equal(other_forward.end)

    def merge(self, other: Period) -> Period:
        """
        Объединение пересекающихся или касающихся периодов.

        Returns:
            Forward период от минимального start до максимального end

        Raises:
            InvalidOperationError: если периоды не пересекаются и не касаются
        """
        if not (self.overlaps(other) or self.abuts(other)):
            raise InvalidOperationError(
                f"Can't merge periods {self!r} and {other!r}: periods do not overlap or abut"
            )

        this_forward = self.forward()
        other_forward = other.forward()

        return Period(
            start=min(this_forward.start, other_forward.start),
            end=max(this_forward.end, other_forward.end),
        )

    # -------------------------------------------------------------------------
    # Subdivision
    # -------------------------------------------------------------------------

    def subdivide_forward(
        self, step: Duration, boundary: IntervalBoundary = IntervalBoundary.CLOSED
    ) -> Subdivision:
        """
        Нарезка на последовательные forward sub-periods длины step.

        Последний sub-period обрезается (не продлевается) до end.

        Raises:
            InvalidArgumentError: если step <= 0
        """
        return Subdivision(self, step, boundary, backward=False)

    def subdivide_backward(
        self, step: Duration, boundary: IntervalBoundary = IntervalBoundary.CLOSED
    ) -> Subdivision:
        """
        Нарезка от end к start: каждый sub-period (cursor, cursor - step).

        Sub-periods выдаются в порядке возрастания (обратно порядку генерации).

        Raises:
            InvalidArgumentError: если step <= 0
        """
        return Subdivision(self, step, boundary, backward=True)

    # -------------------------------------------------------------------------
    # Leap seconds
    # -------------------------------------------------------------------------

    def leap_seconds(self, table: Optional[LeapSecondTable] = None) -> LeapSecondTable:
        """Leap seconds, вступившие в силу внутри периода."""
        if table is None:
            from tempora.leap.table import load_leap_seconds

            table = load_leap_seconds()
        return table.find_all_between(self)


# =============================================================================
# SUBDIVISION
# =============================================================================


class Subdivision:
    """
    Ленивая последовательность sub-periods.

    Вычисляется по (parent, step, boundary) при каждом __iter__, поэтому
    повторная итерация всегда даёт тот же результат. Общего курсора нет.
    Backward родитель нарезается по своему нормализованному промежутку.
    """

    def __init__(
        self,
        period: Period,
        step: Duration,
        boundary: IntervalBoundary,
        backward: bool = False,
    ):
        if not step.is_positive():
            raise InvalidArgumentError(f"Subdivision step must be positive, got {step!r}")

        self.period = period
        self.step = step
        self.boundary = IntervalBoundary(boundary)
        self.backward = backward

    def _bounds(self) -> tuple[int, int]:
        """(start, end) нормализованного родителя в микросекундах, без проверки int64."""
        parent = self.period.forward()
        return join_microseconds(*parent.start.as_pair()), join_microseconds(*parent.end.as_pair())

    def _piece_count(self) -> int:
        """Число sub-periods до применения boundary (последний может быть обрезан)."""
        start, end = self._bounds()
        return -(-(end - start) // self.step.in_microseconds())

    def _kept_range(self) -> range:
        """
        Индексы sub-periods в порядке возрастания, оставшиеся после boundary.

        Индекс 0 касается start родителя, индекс n-1 — end.
        """
        count = self._piece_count()
        first = 0 if self.boundary.includes_start() else 1
        last = count if self.boundary.includes_end() else count - 1
        return range(first, max(first, last))

    def __iter__(self) -> Iterator[Period]:
        if self.backward:
            return self._iter_backward()
        return self._iter_forward()

    def __len__(self) -> int:
        return len(self._kept_range())

    # Концы sub-period обрезаются по родителю до построения Instant

    def _iter_forward(self) -> Iterator[Period]:
        start, end = self._bounds()
        step = self.step.in_microseconds()
        for index in self._kept_range():
            cursor = start + step * index
            yield Period(
                start=Instant.from_microseconds(cursor),
                end=Instant.from_microseconds(min(cursor + step, end)),
            )

    def _iter_backward(self) -> Iterator[Period]:
        start, end = self._bounds()
        step = self.step.in_microseconds()
        count = self._piece_count()
        # Индекс i по возрастанию соответствует шагу генерации k = count - 1 - i от end
        for index in self._kept_range():
            cursor = end - step * (count - 1 - index)
            yield Period(
                start=Instant.from_microseconds(cursor),
                end=Instant.from_microseconds(max(cursor - step, start)),
            )

    def to_period_set(self) -> PeriodSet:
        from tempora.core.domain.period_set import PeriodSet

        return PeriodSet(periods=tuple(self))

    def __repr__(self) -> str:
        direction = "backward" if self.backward else "forward"
        return (
            f"Subdivision({self.period!r}, step={self.step!r}, "
            f"boundary={self.boundary.value}, {direction})"
        )
