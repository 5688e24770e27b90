"""
LeapSecondTable — упорядоченная таблица leap seconds

Таблица (effective_instant, cumulative TAI-UTC) строго возрастает по
effective. Загружается один раз на источник данных (lazy + memoized),
после построения не изменяется и безопасно разделяется между потоками.

ГРАНИЧНЫЕ ПРАВИЛА:
1. until(x): берётся наибольшая запись с effective <= x — leap second
   считается уже случившимся в момент effective
2. count_between(period): запись на границе периода считается внутри
3. Каждая запись таблицы (включая базовую 1972-01-01, 10s) — событие
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import threading
from bisect import bisect_left, bisect_right
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Union

from pydantic import BaseModel, Field

from tempora.core.civil import from_datetime, to_instant
from tempora.core.config import get_settings
from tempora.core.contracts import leap_second_table_errors
from tempora.core.domain.instant import Instant
from tempora.core.domain.period import Period
from tempora.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


# =============================================================================
# MODELS
# =============================================================================


class LeapSecond(BaseModel):
    """Одна запись таблицы: с момента effective TAI-UTC равно offset_tai."""

    effective: Instant = Field(..., description="Момент вступления в силу (UTC)")
    offset_tai: int = Field(..., ge=0, description="Накопленное TAI-UTC (секунды)")

    model_config = {"frozen": True}


class LeapSecondRecord(BaseModel):
    """Сырая запись JSON файла (после jsonschema валидации)."""

    effective: dt.date
    tai_utc: int = Field(..., ge=0)

    model_config = {"frozen": True}

    def to_leap_second(self) -> LeapSecond:
        return LeapSecond(
            effective=to_instant(self.effective.year, self.effective.month, self.effective.day),
            offset_tai=self.tai_utc,
        )


# =============================================================================
# TABLE
# =============================================================================


class LeapSecondTable:
    """
    Immutable упорядоченная таблица leap seconds.

    Поиск — бинарный (bisect) по tuple effective моментов.
    """

    def __init__(self, entries: Iterable[LeapSecond], expires: Optional[Instant] = None):
        entries = tuple(entries)
        for previous, current in zip(entries, entries[1:]):
            if not previous.effective.is_before(current.effective):
                raise InvalidArgumentError(
                    f"Leap second table must be strictly increasing by effective instant: "
                    f"{previous.effective!r} is not before {current.effective!r}"
                )

        self._entries = entries
        self._effective = tuple(entry.effective for entry in entries)
        self._expires = expires

    @property
    def expires(self) -> Optional[Instant]:
        return self._expires

    def is_expired(self, at: Instant) -> bool:
        return self._expires is not None and at.is_after_or_equal(self._expires)

    # -------------------------------------------------------------------------
    # Collection
    # -------------------------------------------------------------------------

    def all(self) -> list[LeapSecond]:
        return list(self._entries)

    def __iter__(self) -> Iterator[LeapSecond]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def first(self) -> Optional[LeapSecond]:
        return self._entries[0] if self._entries else None

    def last(self) -> Optional[LeapSecond]:
        return self._entries[-1] if self._entries else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LeapSecondTable):
            return NotImplemented
        return self._entries == other._entries and self._expires == other._expires

    def __hash__(self) -> int:
        return hash((self._entries, self._expires))

    def __repr__(self) -> str:
        return f"LeapSecondTable(entries={len(self._entries)}, offset_tai={self.offset_tai()})"

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def offset_tai(self) -> int:
        """Последнее накопленное TAI-UTC (0 для пустой таблицы)."""
        return self._entries[-1].offset_tai if self._entries else 0

    def until(self, instant: Instant) -> int:
        """
        Накопленное TAI-UTC на момент instant.

        Returns:
            offset_tai наибольшей записи с effective <= instant, 0 если instant
            раньше первой записи
        """
        index = bisect_right(self._effective, instant)
        return self._entries[index - 1].offset_tai if index else 0

    def count_until(self, instant: Instant) -> int:
        """Число записей с effective <= instant."""
        return bisect_right(self._effective, instant)

    def since(self, epoch_instant: Instant) -> LeapSecondTable:
        """Под-таблица записей с effective >= epoch_instant."""
        index = bisect_left(self._effective, epoch_instant)
        return LeapSecondTable(self._entries[index:], self._expires)

    def find_all_between(self, period: Period) -> LeapSecondTable:
        """
        Записи, вступившие в силу внутри периода (границы включительно).

        Направление периода не важно: используются min/max концов.
        """
        forward = period.forward()
        low = bisect_left(self._effective, forward.start)
        high = bisect_right(self._effective, forward.end)
        return LeapSecondTable(self._entries[low:high], self._expires)

    def count_between(self, period: Period) -> int:
        return len(self.find_all_between(period))


# =============================================================================
# LOADER
# =============================================================================


def parse_leap_seconds(data: Dict[str, Any]) -> LeapSecondTable:
    """
    Построение таблицы из JSON-совместимого dict.

    Raises:
        InvalidArgumentError: данные не соответствуют схеме или нарушен порядок
    """
    errors = leap_second_table_errors(data)
    if errors:
        raise InvalidArgumentError("Malformed leap second table: " + "; ".join(errors))

    entries = [LeapSecondRecord.model_validate(raw).to_leap_second() for raw in data["entries"]]

    expires = None
    if "expires" in data:
        day = dt.date.fromisoformat(data["expires"])
        expires = to_instant(day.year, day.month, day.day)

    return LeapSecondTable(entries, expires)


def read_leap_seconds(path: Union[str, Path]) -> LeapSecondTable:
    """
    Чтение таблицы из JSON файла (без кэширования).

    Raises:
        FileNotFoundError: файл не найден
        InvalidArgumentError: файл не является валидной таблицей
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(f"Leap second table {path} is not valid JSON: {e}") from e

    return parse_leap_seconds(data)


# Кэш таблиц по resolved пути источника
_TABLES: Dict[Path, LeapSecondTable] = {}
_TABLES_LOCK = threading.Lock()


def load_leap_seconds(path: Union[str, Path, None] = None) -> LeapSecondTable:
    """
    Lazy + memoized загрузка таблицы leap seconds.

    Загрузка выполняется не более одного раза на источник. Конкурентный
    первый доступ сериализуется lock'ом: поздние вызовы видят только
    полностью построенную таблицу.

    Args:
        path: путь к JSON файлу; None — TemporaSettings.leap_seconds_path
              или встроенная таблица
    """
    settings = get_settings()
    source = Path(path).resolve() if path is not None else settings.resolved_leap_seconds_path()

    table = _TABLES.get(source)
    if table is not None:
        return table

    with _TABLES_LOCK:
        table = _TABLES.get(source)
        if table is not None:
            return table

        table = read_leap_seconds(source)
        logger.debug(
            "Loaded leap second table from %s: %d entries, TAI-UTC=%ds",
            source,
            len(table),
            table.offset_tai(),
        )

        if settings.warn_on_expired_leap_table:
            now = from_datetime(dt.datetime.now(dt.timezone.utc))
            if table.is_expired(now):
                logger.warning(
                    "Leap second table %s expired, announced leap seconds may be missing",
                    source,
                )

        _TABLES[source] = table
        return table


def reset_leap_seconds_cache() -> None:
    """Сброс кэша таблиц (для тестов)."""
    with _TABLES_LOCK:
        _TABLES.clear()
