"""
Civil calendar — граница с datetime/zoneinfo

Тонкий адаптер к календарю и базе timezone хост-платформы:
- to_instant: civil поля + timezone → Instant
- from_instant: Instant + timezone → aware datetime
- utc_offset: смещение timezone от UTC в секундах на момент Instant

Timezone всегда передаётся явно: никакого глобального состояния
(process-wide default timezone) модуль не читает и не меняет.
"""

from __future__ import annotations

import datetime as dt
from typing import Final, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tempora.core.domain.instant import Instant
from tempora.core.exceptions import InvalidArgumentError
from tempora.core.math.exact import MICROSECONDS_PER_SECOND

TimeZoneLike = Union[str, int, dt.tzinfo]

_UNIX_EPOCH: Final[dt.datetime] = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)


def resolve_timezone(tz: TimeZoneLike) -> dt.tzinfo:
    """
    Приведение timezone к tzinfo.

    Args:
        tz: IANA имя ("Europe/Warsaw", "UTC"), смещение в секундах или tzinfo

    Raises:
        InvalidArgumentError: неизвестное имя или смещение вне (-24h, 24h)
    """
    if isinstance(tz, dt.tzinfo):
        return tz

    if isinstance(tz, bool):
        raise InvalidArgumentError(f"Invalid timezone: {tz!r}")

    if isinstance(tz, int):
        try:
            return dt.timezone(dt.timedelta(seconds=tz))
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid UTC offset {tz} seconds: {e}") from e

    if isinstance(tz, str):
        if tz.upper() in ("UTC", "Z"):
            return dt.timezone.utc
        try:
            return ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidArgumentError(f"Unknown timezone: {tz!r}") from e

    raise InvalidArgumentError(f"Invalid timezone: {tz!r}")


def from_datetime(value: dt.datetime) -> Instant:
    """
    Конверсия aware datetime → Instant.

    Raises:
        InvalidArgumentError: если datetime naive (без tzinfo)
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidArgumentError(f"Naive datetime is ambiguous, timezone required: {value!r}")

    delta = value - _UNIX_EPOCH
    total = (delta.days * 86_400 + delta.seconds) * MICROSECONDS_PER_SECOND + delta.microseconds
    return Instant.from_microseconds(total)


def to_instant(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tz: TimeZoneLike = "UTC",
) -> Instant:
    """
    Civil поля в заданной timezone → Instant.

    Raises:
        InvalidArgumentError: невалидная дата/время или timezone
    """
    tzinfo = resolve_timezone(tz)
    try:
        value = dt.datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tzinfo)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid civil date/time: {e}") from e
    return from_datetime(value)


def from_instant(instant: Instant, tz: TimeZoneLike = "UTC") -> dt.datetime:
    """
    Instant → aware datetime в заданной timezone.

    Raises:
        InvalidArgumentError: instant вне диапазона datetime (годы 1..9999)
    """
    tzinfo = resolve_timezone(tz)
    try:
        utc = _UNIX_EPOCH + dt.timedelta(seconds=instant.seconds, microseconds=instant.microsecond)
    except OverflowError as e:
        raise InvalidArgumentError(f"Instant {instant!r} outside of civil calendar range") from e
    return utc.astimezone(tzinfo)


def utc_offset(tz: TimeZoneLike, instant: Instant) -> int:
    """Смещение timezone от UTC (секунды) на момент instant."""
    offset = from_instant(instant, tz).utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0
