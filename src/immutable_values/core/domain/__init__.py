"""
Domain value objects.

Contains self-validating immutable value types: BoundedAmount, CurrencyAmount.
"""

from .bounded_amount import BoundedAmount
from .currency_amount import CurrencyAmount
from .errors import IncompatibleUnit, InvalidArgument, ValueObjectError
from .validation import (
    BOUNDED_AMOUNT_FLOOR,
    CURRENCY_UNIT_MIN_LENGTH,
    clamp_to_floor,
    validate_integer,
    validate_non_empty,
    validate_non_negative,
)

__all__ = [
    # Validation
    "BOUNDED_AMOUNT_FLOOR",
    "CURRENCY_UNIT_MIN_LENGTH",
    "clamp_to_floor",
    "validate_integer",
    "validate_non_empty",
    "validate_non_negative",
    # Errors
    "ValueObjectError",
    "InvalidArgument",
    "IncompatibleUnit",
    # Value types
    "BoundedAmount",
    "CurrencyAmount",
]
