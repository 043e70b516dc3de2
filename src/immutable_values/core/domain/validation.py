"""
Validation — Общие проверки инвариантов при создании

Единственное место, где проверяются сырые значения для value-типов.
После создания экземпляра инвариант гарантирован, повторные проверки
у потребителей не нужны.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая проверка либо молча возвращает управление, либо поднимает InvalidArgument
2. bool не считается integer (True не является суммой)
3. Ошибки pydantic транслируются в InvalidArgument без потери поля и значения
"""

from typing import Final

from pydantic import ValidationError

from .errors import InvalidArgument


# =============================================================================
# ПАРАМЕТРЫ ДОМЕНА
# =============================================================================

# Нижняя граница BoundedAmount (clamp floor)
BOUNDED_AMOUNT_FLOOR: Final[int] = 0

# Минимальная длина идентификатора валюты
CURRENCY_UNIT_MIN_LENGTH: Final[int] = 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def validate_integer(value: object, name: str) -> None:
    """
    Валидация, что значение — integer (но не bool).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(
            name, value, f"{name} must be an integer, got {type(value).__name__}"
        )


def validate_non_negative(value: int, name: str, floor: int = BOUNDED_AMOUNT_FLOOR) -> None:
    """
    Валидация, что значение не ниже floor.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        floor: Нижняя граница (default: BOUNDED_AMOUNT_FLOOR)

    Raises:
        InvalidArgument: Если value < floor
    """
    validate_integer(value, name)

    if value < floor:
        raise InvalidArgument(name, value, f"{name} must be >= {floor}, got {value}")


def validate_non_empty(
    value: str, name: str, min_length: int = CURRENCY_UNIT_MIN_LENGTH
) -> None:
    """
    Валидация непустой строки.

    Строка считается opaque-токеном: пробелы и регистр не нормализуются.

    Raises:
        InvalidArgument: Если value не str или короче min_length
    """
    if not isinstance(value, str):
        raise InvalidArgument(
            name, value, f"{name} must be a string, got {type(value).__name__}"
        )

    if len(value) < min_length:
        raise InvalidArgument(name, value, f"{name} must be non-empty, got {value!r}")


def clamp_to_floor(value: int, floor: int = BOUNDED_AMOUNT_FLOOR) -> int:
    """Ограничение снизу: max(value, floor)."""
    return max(value, floor)


# =============================================================================
# ТРАНСЛЯЦИЯ ОШИБОК PYDANTIC
# =============================================================================


def invalid_argument_from(exc: ValidationError) -> InvalidArgument:
    """
    Конверсия pydantic ValidationError → InvalidArgument.

    Берётся первая ошибка: имя поля из loc, исходное значение из input.
    Если ошибку поднял наш field_validator, сообщение берётся из него
    (без префикса "Value error, ").

    Args:
        exc: Ошибка валидации модели

    Returns:
        InvalidArgument для проброса через `raise ... from exc`
    """
    details = exc.errors()[0]
    loc = details.get("loc") or ("value",)
    field = str(loc[0])

    original = details.get("ctx", {}).get("error")
    if isinstance(original, InvalidArgument):
        return InvalidArgument(original.field, original.value, str(original))

    return InvalidArgument(field, details.get("input"), f"{field}: {details['msg']}")
