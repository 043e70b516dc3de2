"""
JSON Schema Contract Validators

Модуль для валидации plain-dict представлений value-типов согласно
формальным JSON Schema контрактам (Draft 2020-12).
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (лежат рядом с модулем, в schema/):
- bounded_amount.json
- currency_amount.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'bounded_amount')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded contract schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class BoundedAmountValidator(ContractValidator):
    """Валидатор для bounded_amount контракта."""

    def __init__(self):
        super().__init__("bounded_amount")


class CurrencyAmountValidator(ContractValidator):
    """Валидатор для currency_amount контракта."""

    def __init__(self):
        super().__init__("currency_amount")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bounded_amount(data: Dict[str, Any]) -> None:
    """
    Валидация bounded_amount данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    BoundedAmountValidator().validate(data)


def validate_currency_amount(data: Dict[str, Any]) -> None:
    """
    Валидация currency_amount данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    CurrencyAmountValidator().validate(data)
