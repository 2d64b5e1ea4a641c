"""
Integer — знаковый value-тип BigInt и его строковое представление.
"""

from bignum.integer.bigint import BigInt
from bignum.integer.strings import (
    BINARY_GROUP_SEPARATOR,
    SUPPORTED_BASES,
    to_binary_string,
    to_decimal_string,
    to_string,
)

__all__ = [
    "BigInt",
    "BINARY_GROUP_SEPARATOR",
    "SUPPORTED_BASES",
    "to_binary_string",
    "to_decimal_string",
    "to_string",
]
