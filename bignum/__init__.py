"""
bignum — arbitrary-precision signed integers over fixed-width limbs.

Sign-magnitude value type with schoolbook arithmetic, truncated division,
magnitude-only bitwise operators and truncating/expanding shifts.
"""

from bignum.core.domain import DEFAULT_LAYOUT, BigIntSnapshot, LimbLayout
from bignum.core.errors import (
    BigIntError,
    BigIntZeroDivisionError,
    LimbLayoutMismatchError,
    NarrowingOverflowError,
    UnsupportedBaseError,
)
from bignum.integer import BigInt

__version__ = "0.1.0"

__all__ = [
    # Value type
    "BigInt",
    # Configuration and canonical form
    "DEFAULT_LAYOUT",
    "LimbLayout",
    "BigIntSnapshot",
    # Errors
    "BigIntError",
    "BigIntZeroDivisionError",
    "LimbLayoutMismatchError",
    "NarrowingOverflowError",
    "UnsupportedBaseError",
]
