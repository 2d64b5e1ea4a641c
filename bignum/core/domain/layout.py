"""
LimbLayout — Конфигурация машинного слова (limb)

Описывает ширину одного limb в массиве магнитуды BigInt.
Все алгоритмы core/math параметризуются шириной в битах,
а не жёстко зашитой константой 64.

ИНВАРИАНТЫ:
1. bits — степень двойки, не меньше 8
2. max_value == mask == 2**bits - 1
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Ширина limb по умолчанию (одно 64-битное машинное слово)
DEFAULT_LIMB_BITS: Final[int] = 64

# Минимальная допустимая ширина limb
MIN_LIMB_BITS: Final[int] = 8


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class LimbLayout:
    """Конфигурация limb.

    Узкие layout (8, 16 бит) полезны для тестов: многолимбовые пути
    алгоритмов проверяются на небольших значениях.
    """

    bits: int = DEFAULT_LIMB_BITS

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise ValueError(f"bits must be an int, got {self.bits!r}")
        if self.bits < MIN_LIMB_BITS:
            raise ValueError(f"bits must be >= {MIN_LIMB_BITS}, got {self.bits}")
        if self.bits & (self.bits - 1):
            raise ValueError(f"bits must be a power of two, got {self.bits}")

    @property
    def max_value(self) -> int:
        """Максимальное значение одного limb (2**bits - 1)."""
        return (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        return self.max_value

    def fits(self, value: int) -> bool:
        """Помещается ли неотрицательное значение в один limb."""
        return 0 <= value <= self.max_value


DEFAULT_LAYOUT: Final[LimbLayout] = LimbLayout()
