"""
Exact Time Arithmetic — целочисленные примитивы (seconds, microsecond)

Модуль обеспечивает точную арифметику над парами (seconds, microsecond):
- Нормализация: microsecond всегда в [0, 1_000_000), знак несёт seconds
- Carry/borrow через границу микросекунд
- Контроль диапазона signed 64-bit seconds

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой floating point: только int
2. microsecond никогда не отрицательный (-0.5s = (-1, 500000))
3. Переполнение никогда не "заворачивается" — InstantOverflowError
"""

from typing import Final

from tempora.core.exceptions import InstantOverflowError, InvalidArgumentError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MICROSECONDS_PER_SECOND: Final[int] = 1_000_000
MICROSECONDS_PER_MILLISECOND: Final[int] = 1_000

SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 3_600
SECONDS_PER_DAY: Final[int] = 86_400

# Диапазон signed 64-bit seconds
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def ensure_int64(seconds: int) -> int:
    """
    Проверка, что seconds помещается в signed 64-bit.

    Raises:
        InstantOverflowError: если значение вне [INT64_MIN, INT64_MAX]
    """
    if seconds < INT64_MIN or seconds > INT64_MAX:
        raise InstantOverflowError(
            f"Seconds value {seconds} is outside of signed 64-bit range"
        )
    return seconds


def split_microseconds(total_microseconds: int) -> tuple[int, int]:
    """
    Разбиение общего числа микросекунд на (seconds, microsecond).

    divmod округляет к -inf, поэтому остаток всегда неотрицательный.

    Examples:
        >>> split_microseconds(1_500_000)
        (1, 500000)
        >>> split_microseconds(-500_000)
        (-1, 500000)
    """
    seconds, microsecond = divmod(total_microseconds, MICROSECONDS_PER_SECOND)
    return ensure_int64(seconds), microsecond


def join_microseconds(seconds: int, microsecond: int) -> int:
    """Обратная операция к split_microseconds."""
    return seconds * MICROSECONDS_PER_SECOND + microsecond


def validate_pair(seconds: int, microsecond: int) -> None:
    """
    Валидация нормализованной пары.

    Raises:
        InvalidArgumentError: если типы не int или microsecond вне [0, 1_000_000)
        InstantOverflowError: если seconds вне signed 64-bit
    """
    # bool — подкласс int, но как значение времени не допускается
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise InvalidArgumentError(f"seconds must be int, got {type(seconds).__name__}")
    if isinstance(microsecond, bool) or not isinstance(microsecond, int):
        raise InvalidArgumentError(
            f"microsecond must be int, got {type(microsecond).__name__}"
        )
    if not 0 <= microsecond < MICROSECONDS_PER_SECOND:
        raise InvalidArgumentError(
            f"microsecond {microsecond} outside of [0, {MICROSECONDS_PER_SECOND})"
        )
    ensure_int64(seconds)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add_pairs(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    """Сумма двух пар с carry через границу микросекунд."""
    seconds = a[0] + b[0]
    microsecond = a[1] + b[1]
    if microsecond >= MICROSECONDS_PER_SECOND:
        seconds += 1
        microsecond -= MICROSECONDS_PER_SECOND
    return ensure_int64(seconds), microsecond


def sub_pairs(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    """Разность двух пар с borrow через границу микросекунд."""
    seconds = a[0] - b[0]
    microsecond = a[1] - b[1]
    if microsecond < 0:
        seconds -= 1
        microsecond += MICROSECONDS_PER_SECOND
    return ensure_int64(seconds), microsecond


def compare_pairs(a: tuple[int, int], b: tuple[int, int]) -> int:
    """
    Total order над парами.

    Returns:
        -1 если a < b, 0 если равны, 1 если a > b
    """
    if a == b:
        return 0
    return -1 if a < b else 1
