"""
immutable-values — self-validating immutable value types.
"""

from immutable_values.core.domain import (
    BoundedAmount,
    CurrencyAmount,
    IncompatibleUnit,
    InvalidArgument,
    ValueObjectError,
)

__version__ = "0.1.0"

__all__ = [
    "BoundedAmount",
    "CurrencyAmount",
    "InvalidArgument",
    "IncompatibleUnit",
    "ValueObjectError",
]
