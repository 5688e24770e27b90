"""
EpochConverter — Instant → длительность от начала эпохи (UNIX/UTC, GPS, TAI)

ФОРМУЛЫ:
    UNIX/UTC: instant - 1970-01-01                (без leap seconds)
    TAI:      (instant - 1958-01-01) + since(TAI origin).until(instant)
    GPS:      (instant - 1980-01-06) + (until(instant) - until(GPS origin))

GPS не накапливает leap seconds после 1980-01-06, поэтому учитывается только
разница накопленного TAI-UTC между instant и началом эпохи GPS.

Instant раньше начала эпохи → EpochRangeError (проверка до арифметики).
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from tempora.core.domain.epoch import EpochKind, TimeEpoch
from tempora.core.domain.instant import Duration, Instant
from tempora.core.domain.period import Period
from tempora.core.exceptions import EpochRangeError
from tempora.leap.table import LeapSecondTable, load_leap_seconds

logger = logging.getLogger(__name__)


class EpochConverter:
    """
    Конвертер Instant в timestamp заданной эпохи с коррекцией leap seconds.

    Таблица передаётся явно или загружается при первом обращении
    через load_leap_seconds().
    """

    def __init__(self, table: Optional[LeapSecondTable] = None):
        self._table = table

    @property
    def table(self) -> LeapSecondTable:
        if self._table is None:
            self._table = load_leap_seconds()
        return self._table

    def timestamp(self, instant: Instant, epoch: Union[TimeEpoch, EpochKind, str]) -> Duration:
        """
        Длительность от начала эпохи до instant.

        Args:
            instant: точка во времени
            epoch: TimeEpoch или EpochKind

        Returns:
            Duration от origin эпохи (с коррекцией leap seconds для GPS/TAI)

        Raises:
            EpochRangeError: instant раньше начала эпохи
        """
        if not isinstance(epoch, TimeEpoch):
            epoch = TimeEpoch.of(EpochKind(epoch))

        if instant.is_before(epoch.origin):
            raise EpochRangeError(
                f"Epoch {epoch.kind.value} started at {epoch.origin!r} which is after {instant!r}"
            )

        elapsed = epoch.origin.distance_to(instant)

        if epoch.kind == EpochKind.UNIX:
            return elapsed

        if epoch.kind == EpochKind.GPS:
            correction = self.table.until(instant) - self.table.until(epoch.origin)
            return elapsed.add(Duration.from_seconds(correction))

        # TAI
        correction = self.table.since(epoch.origin).until(instant)
        return elapsed.add(Duration.from_seconds(correction))

    def to_atomic_time(self, instant: Instant) -> Instant:
        """Instant, сдвинутый на накопленное TAI-UTC (шкала TAI)."""
        return instant.add(Duration.from_seconds(self.table.until(instant)))

    def to_gps_time(self, instant: Instant) -> Instant:
        """Instant, сдвинутый на leap seconds, вступившие в силу после начала GPS."""
        gps = TimeEpoch.gps()
        return instant.add(Duration.from_seconds(self.table.since(gps.origin).count_until(instant)))

    def leap_seconds_between(self, period: Period) -> int:
        """Число leap second событий внутри периода (границы включительно)."""
        count = self.table.count_between(period)
        logger.debug("Leap seconds between %r and %r: %d", period.start, period.end, count)
        return count
