"""
String Conversion — Двоичное и десятичное представление BigInt

- Основание 2: каждый limb как группа фиксированной ширины (с ведущими нулями),
  старший limb первым, группы разделены пробелом
- Основание 10: повторное деление на 10 через Division Engine

Другие основания не поддерживаются (UnsupportedBaseError).
"""

from typing import TYPE_CHECKING, Final

from bignum.core.errors import UnsupportedBaseError

if TYPE_CHECKING:
    from bignum.integer.bigint import BigInt

# Поддерживаемые основания
SUPPORTED_BASES: Final[tuple[int, ...]] = (2, 10)

# Разделитель групп limbs в двоичном представлении
BINARY_GROUP_SEPARATOR: Final[str] = " "


def to_binary_string(value: "BigInt") -> str:
    """
    Двоичное представление, сгруппированное по limbs.

    Examples:
        >>> to_binary_string(BigInt(6))[-8:]
        '00000110'
    """
    bits = value.layout.bits
    groups = [format(limb, f"0{bits}b") for limb in reversed(value.limbs)]
    body = BINARY_GROUP_SEPARATOR.join(groups)
    return body if value.sign else f"-{body}"


def to_decimal_string(value: "BigInt") -> str:
    """
    Десятичное представление через повторное деление на 10.

    Examples:
        >>> to_decimal_string(BigInt(255))
        '255'
    """
    if value.is_zero():
        return "0"

    ten = type(value)(10)
    buffer = value.abs()
    digits = []
    while not buffer.is_zero():
        buffer, digit = divmod(buffer, ten)
        digits.append(str(digit.to_native()))

    if not value.sign:
        digits.append("-")
    return "".join(reversed(digits))


def to_string(value: "BigInt", base: int = 10) -> str:
    """
    Строковое представление в поддерживаемом основании.

    Raises:
        UnsupportedBaseError: Если base не 2 и не 10
    """
    if base == 2:
        return to_binary_string(value)
    if base == 10:
        return to_decimal_string(value)
    raise UnsupportedBaseError(
        f"base must be one of {SUPPORTED_BASES}, got {base}"
    )
