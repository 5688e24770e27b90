"""
Contract Validation Module

Модуль для валидации JSON контрактов tempora (таблица leap seconds).
"""

from .validators import (
    ContractValidator,
    LeapSecondTableValidator,
    SchemaLoader,
    leap_second_table_errors,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LeapSecondTableValidator",
    # Functions
    "leap_second_table_errors",
]
