"""
TimeEpoch — именованные точки отсчёта времени

- UNIX (alias UTC): 1970-01-01T00:00:00Z, без коррекции leap seconds
- GPS: 1980-01-06T00:00:00Z, не накапливает leap seconds после старта
- TAI: 1958-01-01T00:00:00Z, атомное время
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from tempora.core.domain.instant import Duration, Instant

# =============================================================================
# ORIGINS (UNIX seconds)
# =============================================================================

UNIX_EPOCH_ORIGIN: Final[Instant] = Instant(0)

# 1980-01-06T00:00:00Z
GPS_EPOCH_ORIGIN: Final[Instant] = Instant(315_964_800)

# 1958-01-01T00:00:00Z
TAI_EPOCH_ORIGIN: Final[Instant] = Instant(-378_691_200)


class EpochKind(str, Enum):
    """Тип эпохи. UTC — alias для UNIX."""

    UNIX = "UNIX"
    UTC = "UNIX"
    GPS = "GPS"
    TAI = "TAI"

    @classmethod
    def _missing_(cls, value: object) -> "EpochKind | None":
        # "utc", "gps", ... по имени без учёта регистра
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls.__members__[value.upper()]
        return None


_ORIGINS: Final[dict] = {
    EpochKind.UNIX: UNIX_EPOCH_ORIGIN,
    EpochKind.GPS: GPS_EPOCH_ORIGIN,
    EpochKind.TAI: TAI_EPOCH_ORIGIN,
}


@dataclass(frozen=True)
class TimeEpoch:
    """Эпоха: тип и момент начала отсчёта."""

    kind: EpochKind
    origin: Instant

    @classmethod
    def of(cls, kind: EpochKind) -> TimeEpoch:
        kind = EpochKind(kind)
        return cls(kind, _ORIGINS[kind])

    @classmethod
    def unix(cls) -> TimeEpoch:
        return cls.of(EpochKind.UNIX)

    @classmethod
    def utc(cls) -> TimeEpoch:
        return cls.of(EpochKind.UTC)

    @classmethod
    def gps(cls) -> TimeEpoch:
        return cls.of(EpochKind.GPS)

    @classmethod
    def tai(cls) -> TimeEpoch:
        return cls.of(EpochKind.TAI)

    def distance_to(self, other: TimeEpoch) -> Duration:
        """Расстояние между началами эпох (other.origin - self.origin)."""
        return self.origin.distance_to(other.origin)
