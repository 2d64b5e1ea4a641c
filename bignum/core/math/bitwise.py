"""
Bitwise/Shift Engine — Побитовые операции и сдвиги над магнитудами

Операции выполняются поэлементно над limbs магнитуды, без эмуляции
дополнительного кода (two's complement). Знак результата определяет BigInt.

Сдвиги:
- Усекающий (truncating) сдвиг работает в пределах текущей ширины
  len(limbs) * bits: вышедшие за границу биты отбрасываются,
  освободившиеся заполняются нулями; сдвиг на >= ширины даёт 0.
- Расширяющий (expanding) сдвиг влево растит массив, биты не теряются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные списки не изменяются
2. Результат нормализован
3. Отрицательная величина сдвига → ValueError
"""

from bignum.core.math.limbs import match_size, trim_leading_zeroes

# =============================================================================
# LOGICAL OPERATORS
# =============================================================================


def and_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Поэлементное AND. Старшие limbs длинного операнда обнуляются (x & 0 = 0).

    Examples:
        >>> and_magnitudes([0b1100, 7], [0b1010])
        [8]
    """
    result = match_size(list(a), b)
    common = min(len(a), len(b))
    for i in range(common):
        result[i] &= b[i]
    for i in range(common, len(result)):
        result[i] = 0
    return trim_leading_zeroes(result)


def or_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Поэлементное OR. Старшие limbs длинного операнда проходят без изменений.

    Examples:
        >>> or_magnitudes([0b1100], [0b1010, 1])
        [14, 1]
    """
    result = match_size(list(a), b)
    for i in range(len(b)):
        result[i] |= b[i]
    return trim_leading_zeroes(result)


def xor_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """
    Поэлементное XOR. Старшие limbs длинного операнда проходят без изменений.

    Examples:
        >>> xor_magnitudes([0b1100, 1], [0b1010, 1])
        [6]
    """
    result = match_size(list(a), b)
    for i in range(len(b)):
        result[i] ^= b[i]
    return trim_leading_zeroes(result)


def not_magnitude(a: list[int], bits: int) -> list[int]:
    """
    Инверсия всех бит в пределах текущей ширины массива.

    Examples:
        >>> not_magnitude([0], 8)
        [255]
        >>> not_magnitude([255, 1], 8)
        [0, 254]
    """
    mask = (1 << bits) - 1
    return trim_leading_zeroes([~limb & mask for limb in a])


# =============================================================================
# SHIFTS
# =============================================================================


def _check_shift(count: int) -> None:
    if count < 0:
        raise ValueError(f"shift count must be non-negative, got {count}")


def shift_left_truncating(a: list[int], count: int, bits: int) -> list[int]:
    """
    Сдвиг влево в пределах текущей ширины len(a) * bits.

    Args:
        a: Магнитуда
        count: Величина сдвига (>= 0)
        bits: Ширина limb

    Returns:
        Новая нормализованная магнитуда

    Examples:
        >>> shift_left_truncating([0b11], 1, 8)
        [6]
        >>> shift_left_truncating([0x81], 1, 8)
        [2]
        >>> shift_left_truncating([1], 8, 8)
        [0]
    """
    _check_shift(count)
    width = len(a) * bits
    if count >= width:
        return [0]
    if count == 0:
        return list(a)

    mask = (1 << bits) - 1
    word_shift, bit_shift = divmod(count, bits)
    result = [0] * len(a)

    for i in range(len(a) - 1, word_shift - 1, -1):
        src = i - word_shift
        limb = (a[src] << bit_shift) & mask
        if bit_shift and src > 0:
            limb |= a[src - 1] >> (bits - bit_shift)
        result[i] = limb

    return trim_leading_zeroes(result)


def shift_right_truncating(a: list[int], count: int, bits: int) -> list[int]:
    """
    Сдвиг вправо, младшие биты отбрасываются.

    Examples:
        >>> shift_right_truncating([0, 1], 1, 8)
        [128]
        >>> shift_right_truncating([255, 255], 16, 8)
        [0]
    """
    _check_shift(count)
    width = len(a) * bits
    if count >= width:
        return [0]
    if count == 0:
        return list(a)

    mask = (1 << bits) - 1
    word_shift, bit_shift = divmod(count, bits)
    result = [0] * len(a)

    for i in range(len(a) - word_shift):
        src = i + word_shift
        limb = a[src] >> bit_shift
        if bit_shift and src + 1 < len(a):
            limb |= (a[src + 1] << (bits - bit_shift)) & mask
        result[i] = limb

    return trim_leading_zeroes(result)


def shift_left_expanding(a: list[int], count: int, bits: int) -> list[int]:
    """
    Сдвиг влево с расширением массива: старшие биты не теряются.

    Examples:
        >>> shift_left_expanding([1], 8, 8)
        [0, 1]
        >>> shift_left_expanding([0x81], 1, 8)
        [2, 1]
    """
    _check_shift(count)
    if count == 0:
        return list(a)
    extra = -(-count // bits)
    buffer = match_size(list(a), len(a) + extra)
    return shift_left_truncating(buffer, count, bits)
