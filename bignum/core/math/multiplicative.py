"""
Multiplicative Engine — Школьное умножение по битам

Для каждого единичного бита i левого операнда строится промежуточное
значение: правый операнд, сдвинутый на i, выраженный прямой установкой
бит i + j для каждого единичного бита j правого операнда. Промежуточные
значения накапливаются через Additive Engine.

Сложность O(bits_a × bits_b) в худшем случае.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Буфер результата и промежуточных значений: len(a) + len(b) limbs
   (произведение N-limb на M-limb никогда не длиннее N + M)
2. Результат нормализован
"""

from bignum.core.math.additive import add_magnitudes
from bignum.core.math.limbs import (
    is_zero_magnitude,
    iter_set_bits,
    match_size,
    set_total_bit,
    trim_leading_zeroes,
)


def multiply_magnitudes(a: list[int], b: list[int], bits: int) -> list[int]:
    """
    Произведение двух магнитуд.

    Args:
        a: Левый операнд
        b: Правый операнд
        bits: Ширина limb

    Returns:
        Новая нормализованная магнитуда a * b

    Examples:
        >>> multiply_magnitudes([6], [7], 8)
        [42]
        >>> multiply_magnitudes([255], [255], 8)
        [1, 254]
    """
    product_size = len(a) + len(b)
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return [0]

    # Индексы бит правого операнда не зависят от i, считаем один раз
    right_bits = list(iter_set_bits(b, bits))
    solution = [0] * product_size

    for i in iter_set_bits(a, bits):
        intermediate = [0] * product_size
        for j in right_bits:
            set_total_bit(intermediate, i + j, True, bits)
        solution = match_size(add_magnitudes(solution, intermediate, bits), product_size)

    return trim_leading_zeroes(solution)
