"""
Контракт JSON таблицы leap seconds

Файл таблицы (встроенный или заданный через TEMPORA_LEAP_SECONDS_PATH)
проверяется по schema/leap_seconds.json до разбора в LeapSecondTable.

- SchemaLoader: чтение схем из contracts/schema/ с meta-validation (Draft 2020-12)
- ContractValidator: проверка данных и сбор ВСЕХ нарушений схемы
- leap_second_table_errors: список нарушений в виде "путь: сообщение"
"""

from pathlib import Path
import json
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и кэширование JSON Schema по имени файла (без .json)."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: файла схемы нет
            ValueError: схема не проходит meta-validation
        """
        schema = self._schemas.get(schema_name)
        if schema is not None:
            return schema

        schema_path = self._schema_dir / f"{schema_name}.json"
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def _error_path(error: jsonschema.ValidationError) -> str:
    """entries/3/tai_utc; корень документа — '<root>'."""
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


class ContractValidator:
    """Проверка JSON-совместимых данных по одной схеме из contracts/schema/."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def errors(self, data: Any) -> List[str]:
        """
        Все нарушения схемы, упорядоченные по пути в документе.

        Returns:
            ["entries/0/tai_utc: -1 is less than the minimum of 0", ...];
            пустой список для валидных данных
        """
        found = sorted(self.validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [f"{_error_path(e)}: {e.message}" for e in found]


class LeapSecondTableValidator(ContractValidator):
    """Валидатор JSON таблицы leap seconds."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("leap_seconds", loader)


def leap_second_table_errors(data: Any) -> List[str]:
    """Нарушения контракта таблицы leap seconds (пусто — данные валидны)."""
    return LeapSecondTableValidator().errors(data)
