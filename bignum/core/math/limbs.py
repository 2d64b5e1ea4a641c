"""
Limbs — Representation, Normalization & Bit Addressing

Базовый слой движка BigInt. Магнитуда хранится как list[int],
little-endian (index 0 = младший limb), каждый limb в [0, 2**bits - 1].

Модуль обеспечивает:
- Нормализацию (удаление старших нулевых limbs)
- Расширение буфера до нужной длины перед побитовыми операциями
- Адресацию отдельного бита как внутри limb, так и по глобальному индексу

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После trim_leading_zeroes список limbs никогда не пустой
2. match_size никогда не уменьшает буфер
3. Глобальный индекс бита i соответствует (i // bits, i % bits)
"""

from collections.abc import Iterator

# =============================================================================
# NORMALIZATION
# =============================================================================


def trim_leading_zeroes(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs (in place).

    Останавливается на первом ненулевом limb или когда остался один limb.
    Пустой список превращается в [0].

    Args:
        limbs: Магнитуда (изменяется на месте)

    Returns:
        Тот же список, для удобства цепочек

    Examples:
        >>> trim_leading_zeroes([5, 0, 0])
        [5]
        >>> trim_leading_zeroes([0, 0, 0])
        [0]
        >>> trim_leading_zeroes([])
        [0]
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def match_size(limbs: list[int], target: "int | list[int]") -> list[int]:
    """
    Расширение буфера нулевыми limbs до длины target (in place).

    Args:
        limbs: Магнитуда (изменяется на месте)
        target: Требуемая длина, либо другой список limbs, длину которого нужно догнать

    Returns:
        Тот же список

    Examples:
        >>> match_size([1], 3)
        [1, 0, 0]
        >>> match_size([1, 2, 3], [7])
        [1, 2, 3]
    """
    target_len = target if isinstance(target, int) else len(target)
    if target_len > len(limbs):
        limbs.extend([0] * (target_len - len(limbs)))
    return limbs


def is_zero_magnitude(limbs: list[int]) -> bool:
    """Нулевая ли магнитуда (допускает ненормализованный буфер)."""
    return not any(limbs)


# =============================================================================
# NATIVE INT CONVERSION
# =============================================================================


def split_native(value: int, bits: int) -> list[int]:
    """
    Разбиение неотрицательного int на limbs.

    Args:
        value: Неотрицательное значение
        bits: Ширина limb

    Returns:
        Нормализованная магнитуда

    Raises:
        ValueError: Если value < 0

    Examples:
        >>> split_native(0, 8)
        [0]
        >>> split_native(0x1FF, 8)
        [255, 1]
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    mask = (1 << bits) - 1
    limbs = []
    while value:
        limbs.append(value & mask)
        value >>= bits
    return trim_leading_zeroes(limbs)


def join_limbs(limbs: list[int], bits: int) -> int:
    """
    Сборка неотрицательного int из limbs.

    Examples:
        >>> join_limbs([255, 1], 8)
        511
    """
    value = 0
    for limb in reversed(limbs):
        value = (value << bits) | limb
    return value


# =============================================================================
# BIT ADDRESSING
# =============================================================================


def bit_at(limb: int, local_index: int) -> bool:
    """
    Значение бита local_index внутри одного limb.

    Examples:
        >>> bit_at(0b100, 2)
        True
        >>> bit_at(0b100, 1)
        False
    """
    return bool((limb >> local_index) & 1)


def set_bit(limb: int, local_index: int, value: bool) -> int:
    """
    Установка бита local_index внутри одного limb.

    Returns:
        Новое значение limb

    Examples:
        >>> set_bit(0, 3, True)
        8
        >>> set_bit(0b1111, 0, False)
        14
    """
    if value:
        return limb | (1 << local_index)
    return limb & ~(1 << local_index)


def total_bit_at(limbs: list[int], global_index: int, bits: int) -> bool:
    """
    Значение бита по глобальному индексу всего массива.

    Биты за пределами массива считаются нулевыми.
    """
    limb_index, local_index = divmod(global_index, bits)
    if limb_index >= len(limbs):
        return False
    return bit_at(limbs[limb_index], local_index)


def set_total_bit(limbs: list[int], global_index: int, value: bool, bits: int) -> None:
    """
    Установка бита по глобальному индексу (in place).

    Raises:
        IndexError: Если индекс за пределами буфера (буфер нужно
            заранее расширить через match_size)
    """
    limb_index, local_index = divmod(global_index, bits)
    if limb_index >= len(limbs):
        raise IndexError(
            f"bit {global_index} is outside a {len(limbs)}-limb buffer of {bits}-bit limbs"
        )
    limbs[limb_index] = set_bit(limbs[limb_index], local_index, value)


def bit_width(limbs: list[int], bits: int) -> int:
    """Полная адресуемая ширина буфера в битах."""
    return len(limbs) * bits


def significant_bits(limbs: list[int], bits: int) -> int:
    """
    Количество значащих бит магнитуды (индекс старшего единичного бита + 1).

    Examples:
        >>> significant_bits([0], 8)
        0
        >>> significant_bits([0, 1], 8)
        9
    """
    for limb_index in range(len(limbs) - 1, -1, -1):
        if limbs[limb_index]:
            return limb_index * bits + limbs[limb_index].bit_length()
    return 0


def iter_set_bits(limbs: list[int], bits: int) -> Iterator[int]:
    """
    Глобальные индексы единичных бит в порядке возрастания.

    Examples:
        >>> list(iter_set_bits([0b101, 1], 8))
        [0, 2, 8]
    """
    for limb_index, limb in enumerate(limbs):
        base = limb_index * bits
        while limb:
            low = limb & -limb
            yield base + low.bit_length() - 1
            limb ^= low
