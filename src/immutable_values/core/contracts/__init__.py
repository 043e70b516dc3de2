"""
Contract Validation Module

Модуль для валидации JSON контрактов value-типов.
"""

from .validators import (
    BoundedAmountValidator,
    ContractValidator,
    CurrencyAmountValidator,
    SchemaLoader,
    validate_bounded_amount,
    validate_currency_amount,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BoundedAmountValidator",
    "CurrencyAmountValidator",
    # Functions
    "validate_bounded_amount",
    "validate_currency_amount",
]
