"""
CurrencyAmount — Денежная сумма с тегом валюты

Immutable Pydantic модель. Знак amount не ограничен; unit — opaque
идентификатор валюты (например, 'JPY'), не нормализуется.

ЗАПРЕЩЕНО складывать суммы в разных валютах: add() поднимает
IncompatibleUnit, конверсии валют в этом модуле нет.
"""

from typing import Any, Dict

from jsonschema import ValidationError as ContractViolation
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..contracts import validate_currency_amount
from .errors import IncompatibleUnit, InvalidArgument
from .validation import CURRENCY_UNIT_MIN_LENGTH, invalid_argument_from, validate_non_empty


class CurrencyAmount(BaseModel):
    """
    Integer сумма в конкретной валюте.

    Immutable модель (frozen=True). Две суммы совместимы, если их unit
    совпадают; add() определён только для совместимых пар.
    """

    amount: int = Field(..., strict=True, description="Сумма в минимальных единицах валюты")
    unit: str = Field(..., strict=True, description="Идентификатор валюты (например, 'JPY')")

    model_config = {"frozen": True}  # Immutable

    @field_validator("unit")
    @classmethod
    def validate_unit(cls, v: str) -> str:
        """Проверка непустого unit."""
        validate_non_empty(v, "unit", CURRENCY_UNIT_MIN_LENGTH)
        return v

    @classmethod
    def create(cls, amount: int, unit: str) -> "CurrencyAmount":
        """
        Создание экземпляра с проверкой инварианта.

        Args:
            amount: Сумма (любой integer)
            unit: Идентификатор валюты (непустая строка)

        Returns:
            Новый CurrencyAmount

        Raises:
            InvalidArgument: Если unit пустой или типы не совпадают
        """
        try:
            return cls(amount=amount, unit=unit)
        except ValidationError as exc:
            raise invalid_argument_from(exc) from exc

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CurrencyAmount":
        """
        Создание из plain dict с проверкой контракта currency_amount.json.

        Raises:
            InvalidArgument: Если payload не соответствует контракту или инварианту
        """
        try:
            validate_currency_amount(data)
        except ContractViolation as exc:
            field = str(exc.path[0]) if exc.path else "payload"
            raise InvalidArgument(field, data, f"currency_amount contract: {exc.message}") from exc

        return cls.create(data["amount"], data["unit"])

    def is_compatible(self, other: "CurrencyAmount") -> bool:
        """Совместимость: unit совпадают."""
        return self.unit == other.unit

    def add(self, other: "CurrencyAmount") -> "CurrencyAmount":
        """
        Сложение двух совместимых сумм.

        Ни один из операндов не изменяется, результат создаётся через create().

        Args:
            other: Вторая сумма в той же валюте

        Returns:
            Новый CurrencyAmount с amount = self.amount + other.amount

        Raises:
            InvalidArgument: Если other не CurrencyAmount
            IncompatibleUnit: Если unit различаются
        """
        if not isinstance(other, CurrencyAmount):
            raise InvalidArgument(
                "other", other, f"other must be a CurrencyAmount, got {type(other).__name__}"
            )

        if not self.is_compatible(other):
            raise IncompatibleUnit(self.unit, other.unit)

        return type(self).create(self.amount + other.amount, self.unit)

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в plain dict (совместим с currency_amount.json)."""
        return self.model_dump()

    def __str__(self) -> str:
        return f"{self.amount} {self.unit}"
