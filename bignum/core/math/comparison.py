"""
Comparison Engine — Сравнение магнитуд

Полный порядок на нормализованных магнитудах:
1. Больше limbs → больше магнитуда
2. При равной длине — поэлементно от старшего limb, решает первое расхождение

Знаковая часть порядка (любое неотрицательное > любого отрицательного,
инверсия направления для двух отрицательных) реализована в BigInt.
"""


def compare_magnitudes(a: list[int], b: list[int]) -> int:
    """
    Сравнение двух нормализованных магнитуд.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare_magnitudes([1, 1], [255])
        1
        >>> compare_magnitudes([3], [3])
        0
        >>> compare_magnitudes([2, 5], [3, 5])
        -1
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def magnitude_equals_native(limbs: list[int], value: int) -> bool:
    """
    Быстрое сравнение магнитуды с одним limb без построения BigInt.

    Используется для проверок вида "делитель равен 0/1".
    """
    return len(limbs) == 1 and limbs[0] == value
