"""
Division Engine — Двоичное деление в столбик

Одна процедура обслуживает и частное, и остаток (флаг return_remainder),
чтобы алгоритм не дублировался между / и %.

Алгоритм (над магнитудами):
    для каждого бита делимого от старшего к младшему:
        remainder = remainder << 1        (расширяющий сдвиг)
        remainder.bit[0] = dividend.bit[i]
        если remainder >= divisor:
            remainder -= divisor
            quotient.bit[i] = 1

Число итераций ровно bit_width(dividend) = len(dividend) * bits,
на каждой итерации одно сравнение и не более одного вычитания.

Знаки (truncated division) разбирает BigInt: частное = XOR знаков,
остаток несёт знак делимого.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой делитель → BigIntZeroDivisionError
2. quotient * divisor + remainder == dividend
3. 0 <= remainder < divisor
"""

from bignum.core.errors import BigIntZeroDivisionError
from bignum.core.math.additive import subtract_magnitudes
from bignum.core.math.bitwise import shift_left_expanding
from bignum.core.math.comparison import compare_magnitudes, magnitude_equals_native
from bignum.core.math.limbs import (
    bit_width,
    set_total_bit,
    total_bit_at,
    trim_leading_zeroes,
)


def divmod_magnitudes(
    dividend: list[int],
    divisor: list[int],
    bits: int,
) -> tuple[list[int], list[int]]:
    """
    Частное и остаток двух магнитуд за один проход.

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)
        bits: Ширина limb

    Returns:
        (quotient, remainder), обе магнитуды нормализованы

    Raises:
        BigIntZeroDivisionError: Если делитель равен нулю

    Examples:
        >>> divmod_magnitudes([17], [5], 8)
        ([3], [2])
        >>> divmod_magnitudes([0, 1], [16], 8)
        ([16], [0])
    """
    if magnitude_equals_native(divisor, 0):
        raise BigIntZeroDivisionError("division by zero")

    if magnitude_equals_native(divisor, 1):
        return list(dividend), [0]

    # Целочисленное деление: A / B = 0 для A < B
    if compare_magnitudes(dividend, divisor) < 0:
        return [0], list(dividend)

    total_bits = bit_width(dividend, bits)
    quotient = [0] * len(dividend)
    remainder = [0]

    for i in range(total_bits - 1, -1, -1):
        remainder = shift_left_expanding(remainder, 1, bits)
        if total_bit_at(dividend, i, bits):
            set_total_bit(remainder, 0, True, bits)
        if compare_magnitudes(remainder, divisor) >= 0:
            remainder = subtract_magnitudes(remainder, divisor, bits)
            set_total_bit(quotient, i, True, bits)

    return trim_leading_zeroes(quotient), trim_leading_zeroes(remainder)


def divide_magnitudes(
    dividend: list[int],
    divisor: list[int],
    bits: int,
    return_remainder: bool = False,
) -> list[int]:
    """
    Общая процедура для / и %.

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)
        bits: Ширина limb
        return_remainder: True → остаток, False → частное

    Returns:
        Нормализованная магнитуда частного или остатка

    Raises:
        BigIntZeroDivisionError: Если делитель равен нулю
    """
    quotient, remainder = divmod_magnitudes(dividend, divisor, bits)
    return remainder if return_remainder else quotient
