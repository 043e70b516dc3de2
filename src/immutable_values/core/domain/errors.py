"""
Errors — Таксономия ошибок value-типов

Две ошибки, обе не ретраятся:
- InvalidArgument: сырое значение нарушает инвариант типа при создании
- IncompatibleUnit: попытка сложить суммы в разных валютах

Ошибки не логируются и не обрабатываются внутри компонентов —
они сразу поднимаются к вызывающему коду.
"""


class ValueObjectError(Exception):
    """Базовый класс для всех ошибок value-типов."""

    pass


class InvalidArgument(ValueObjectError, ValueError):
    """
    Сырое значение нарушает инвариант типа.

    Поднимается только в момент создания экземпляра (отрицательный
    BoundedAmount, пустой unit у CurrencyAmount, не-integer на входе).
    Вызывающий код должен передать исправленное значение.

    Attributes:
        field: Имя поля, не прошедшего проверку
        value: Переданное значение
    """

    def __init__(self, field: str, value: object, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r}")


class IncompatibleUnit(ValueObjectError):
    """
    Попытка комбинировать CurrencyAmount с разными unit.

    Сигнализирует об ошибке выше по стеку: совместимость валют
    должна быть установлена до сложения (см. CurrencyAmount.is_compatible).

    Attributes:
        left_unit: Валюта левого операнда
        right_unit: Валюта правого операнда
    """

    def __init__(self, left_unit: str, right_unit: str):
        self.left_unit = left_unit
        self.right_unit = right_unit
        super().__init__(
            f"Cannot combine amounts in different units: "
            f"{left_unit!r} != {right_unit!r} (incompatible_unit_block)"
        )
