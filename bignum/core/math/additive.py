"""
Additive Engine — Сложение и вычитание магнитуд

Единственное место движка, где живёт логика переноса (carry) и займа (borrow).
Знаки здесь не рассматриваются: разбор знаковых случаев выполняет BigInt
и сводит любую операцию к одной из двух функций ниже.

Перенос определяется через расширенное сложение: сумма двух limbs и
входящего переноса вычисляется в int двойной ширины, перенос = sum >> bits.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда нормализован (trim_leading_zeroes)
2. Входные списки не изменяются
3. subtract_magnitudes требует |a| >= |b|
"""

from bignum.core.math.comparison import compare_magnitudes
from bignum.core.math.limbs import match_size, trim_leading_zeroes

# =============================================================================
# ADDITION
# =============================================================================


def add_magnitudes(a: list[int], b: list[int], bits: int) -> list[int]:
    """
    Сложение магнитуд с распространением переноса.

    Алгоритм:
        1. Буфер результата = копия a, расширенная до длины длинного операнда
        2. Поэлементно от младшего limb: s = a_i + b_i + carry
        3. limb = s & mask, carry = s >> bits
        4. Перенос проходит через limbs со значением max (они обнуляются)
           до первого limb, способного его поглотить
        5. Перенос из старшего limb → новый limb со значением 1

    Args:
        a: Первая магнитуда
        b: Вторая магнитуда
        bits: Ширина limb

    Returns:
        Новая нормализованная магнитуда a + b

    Examples:
        >>> add_magnitudes([255], [1], 8)
        [0, 1]
        >>> add_magnitudes([5], [3], 64)
        [8]
    """
    mask = (1 << bits) - 1
    result = match_size(list(a), b)
    carry = 0

    for i in range(len(b)):
        total = result[i] + b[i] + carry
        result[i] = total & mask
        carry = total >> bits

    i = len(b)
    while carry:
        if i == len(result):
            result.append(1)
            break
        if result[i] == mask:
            result[i] = 0
        else:
            result[i] += 1
            carry = 0
        i += 1

    return trim_leading_zeroes(result)


# =============================================================================
# SUBTRACTION
# =============================================================================


def subtract_magnitudes(a: list[int], b: list[int], bits: int) -> list[int]:
    """
    Вычитание магнитуд с распространением займа.

    Args:
        a: Уменьшаемое (|a| >= |b|)
        b: Вычитаемое
        bits: Ширина limb

    Returns:
        Новая нормализованная магнитуда a - b

    Raises:
        ValueError: Если |a| < |b|

    Examples:
        >>> subtract_magnitudes([0, 1], [1], 8)
        [255]
        >>> subtract_magnitudes([7], [7], 8)
        [0]
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("subtract_magnitudes requires |a| >= |b|")

    base = 1 << bits
    result = list(a)
    borrow = 0

    for i in range(len(b)):
        diff = result[i] - b[i] - borrow
        if diff < 0:
            diff += base
            borrow = 1
        else:
            borrow = 0
        result[i] = diff

    # Займ уходит в старшие limbs, нули превращаются в max
    i = len(b)
    while borrow:
        if result[i]:
            result[i] -= 1
            borrow = 0
        else:
            result[i] = base - 1
        i += 1

    return trim_leading_zeroes(result)
