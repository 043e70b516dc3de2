"""
BoundedAmount — Неотрицательная величина с clamp на нуле

Immutable Pydantic модель (health-style значение).
Единственная операция-трансформация reduce() никогда не изменяет
экземпляр, а возвращает новый через create().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value >= BOUNDED_AMOUNT_FLOOR для каждого экземпляра на всё время жизни
2. reduce() никогда не падает на integer-входе: результат clamp'ится к floor
3. Равенство по значению, не по identity
"""

from typing import Any, Dict

from jsonschema import ValidationError as ContractViolation
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..contracts import validate_bounded_amount
from .errors import InvalidArgument
from .validation import (
    BOUNDED_AMOUNT_FLOOR,
    clamp_to_floor,
    invalid_argument_from,
    validate_integer,
    validate_non_negative,
)


class BoundedAmount(BaseModel):
    """
    Неотрицательная integer величина с нижней границей 0.

    Immutable модель (frozen=True). Создание только через create()
    или from_dict(); все изменения возвращают новый экземпляр.

    Examples:
        >>> BoundedAmount.create(10).reduce(3).value
        7
        >>> BoundedAmount.create(5).reduce(9).value
        0
    """

    value: int = Field(..., strict=True, description="Текущее значение (>= 0)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def validate_floor(cls, v: int) -> int:
        """Проверка нижней границы (BOUNDED_AMOUNT_FLOOR)."""
        validate_non_negative(v, "value", BOUNDED_AMOUNT_FLOOR)
        return v

    @classmethod
    def create(cls, value: int) -> "BoundedAmount":
        """
        Создание экземпляра с проверкой инварианта.

        Args:
            value: Исходное значение (integer >= 0)

        Returns:
            Новый BoundedAmount

        Raises:
            InvalidArgument: Если value < 0 или не integer
        """
        try:
            return cls(value=value)
        except ValidationError as exc:
            raise invalid_argument_from(exc) from exc

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoundedAmount":
        """
        Создание из plain dict с проверкой контракта bounded_amount.json.

        Raises:
            InvalidArgument: Если payload не соответствует контракту или инварианту
        """
        try:
            validate_bounded_amount(data)
        except ContractViolation as exc:
            field = str(exc.path[0]) if exc.path else "payload"
            raise InvalidArgument(field, data, f"bounded_amount contract: {exc.message}") from exc

        return cls.create(data["value"])

    def reduce(self, amount: int) -> "BoundedAmount":
        """
        Уменьшение на amount с clamp к нулю.

        next = max(0, value - amount). Отрицательный amount увеличивает
        значение (верхней границы нет), amount=0 даёт равный по значению
        новый экземпляр.

        Args:
            amount: Величина уменьшения (любой integer)

        Returns:
            Новый BoundedAmount

        Raises:
            InvalidArgument: Если amount не integer
        """
        validate_integer(amount, "amount")
        return type(self).create(clamp_to_floor(self.value - amount, BOUNDED_AMOUNT_FLOOR))

    def is_depleted(self) -> bool:
        """Достигнут ли floor."""
        return self.value == BOUNDED_AMOUNT_FLOOR

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в plain dict (совместим с bounded_amount.json)."""
        return self.model_dump()

    def __str__(self) -> str:
        return str(self.value)
