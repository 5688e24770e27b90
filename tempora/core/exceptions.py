"""
Exceptions — виды ошибок tempora.

Все ошибки локальные, синхронные и не требуют retry: они сигнализируют
об ошибке программиста или входных данных, а не о временном сбое.
Операции либо полностью успешны, либо падают без частичного результата.
"""


class TemporaError(Exception):
    """Базовое исключение для всех ошибок tempora."""

    pass


class InvalidArgumentError(TemporaError, ValueError):
    """
    Невалидный аргумент.

    Примеры: нулевой шаг subdivision, нарушение порядка в таблице leap seconds,
    неизвестная timezone.
    """

    pass


class InvalidOperationError(TemporaError):
    """Операция неприменима к данным объектам (merge непересекающихся периодов)."""

    pass


class EpochRangeError(TemporaError, ValueError):
    """Instant предшествует началу запрошенной эпохи."""

    pass


class InstantOverflowError(TemporaError, OverflowError):
    """Результат арифметики вышел за пределы signed 64-bit секунд."""

    pass
