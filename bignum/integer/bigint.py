"""
BigInt — Знаковое целое произвольной точности

Value-тип в представлении "знак + магнитуда": флаг знака и little-endian
массив limbs фиксированной ширины (LimbLayout). Класс разбирает знаковые
случаи и делегирует всю работу с магнитудами в core/math:
- Additive Engine: +, -, increment/decrement
- Multiplicative Engine: *
- Division Engine: /, //, %, divmod (truncated division)
- Comparison Engine: ==, <, и производные
- Bitwise/Shift Engine: &, |, ^, ~, <<, >>, expanding_left_shift
- String Conversion: to_string(2 | 10)

Операторы без "=" возвращают новый экземпляр. Составные присваивания
(+=, &=, <<= ...) изменяют экземпляр на месте, поэтому BigInt не хэшируется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждой публичной операции):
1. limbs не пустой, ноль хранится как [0]
2. Нет лишних старших нулевых limbs
3. Ноль всегда положительный
"""

import logging
import operator
from typing import ClassVar

from bignum.core.domain.layout import DEFAULT_LAYOUT, LimbLayout
from bignum.core.domain.snapshot import BigIntSnapshot
from bignum.core.errors import (
    BigIntZeroDivisionError,
    LimbLayoutMismatchError,
    NarrowingOverflowError,
)
from bignum.core.math.additive import add_magnitudes, subtract_magnitudes
from bignum.core.math.bitwise import (
    and_magnitudes,
    not_magnitude,
    or_magnitudes,
    shift_left_expanding,
    shift_left_truncating,
    shift_right_truncating,
    xor_magnitudes,
)
from bignum.core.math.comparison import compare_magnitudes, magnitude_equals_native
from bignum.core.math.division import divide_magnitudes, divmod_magnitudes
from bignum.core.math.limbs import (
    bit_width,
    join_limbs,
    significant_bits,
    split_native,
    trim_leading_zeroes,
)
from bignum.core.math.multiplicative import multiply_magnitudes
from bignum.integer.strings import to_string

logger = logging.getLogger(__name__)


class BigInt:
    """
    Знаковое целое произвольной точности.

    Конструктор принимает одно беззнаковое машинное слово и явный знак:
    BigInt(5) == 5, BigInt(5, sign=False) == -5.
    Для произвольных int используется BigInt.from_int().

    Подклассы могут объявить другой LimbLayout:

        class BigInt8(BigInt):
            layout = LimbLayout(bits=8)
    """

    layout: ClassVar[LimbLayout] = DEFAULT_LAYOUT

    __slots__ = ("_sign", "_limbs")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: int = 0, sign: bool = True):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be an int, got {type(value).__name__}")
        if not self.layout.fits(value):
            raise ValueError(
                f"value must fit in one {self.layout.bits}-bit limb "
                f"[0, {self.layout.max_value}], got {value}; use from_int() instead"
            )
        self._limbs = [value]
        self._sign = bool(sign) or value == 0

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def _from_parts(cls, limbs: list[int], sign: bool) -> "BigInt":
        """Сборка экземпляра из готовой магнитуды с нормализацией."""
        instance = cls.__new__(cls)
        instance._limbs = trim_leading_zeroes(limbs)
        instance._sign = sign or instance._limbs == [0]
        return instance

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """
        Построение из произвольного int.

        Examples:
            >>> BigInt.from_int(-(2**64)).limbs
            (0, 1)
        """
        if not isinstance(value, int):
            raise TypeError(f"from_int expects an int, got {type(value).__name__}")
        return cls._from_parts(split_native(abs(value), cls.layout.bits), value >= 0)

    @classmethod
    def from_snapshot(cls, snapshot: BigIntSnapshot) -> "BigInt":
        """
        Построение из валидированного BigIntSnapshot.

        Raises:
            LimbLayoutMismatchError: Если ширина limb снимка отличается от layout класса
        """
        if snapshot.bits != cls.layout.bits:
            raise LimbLayoutMismatchError(
                f"snapshot uses {snapshot.bits}-bit limbs, "
                f"{cls.__name__} uses {cls.layout.bits}-bit limbs"
            )
        return cls._from_parts(list(snapshot.limbs), snapshot.sign)

    def snapshot(self) -> BigIntSnapshot:
        """Каноническая форма значения как frozen Pydantic модель."""
        return BigIntSnapshot(bits=self.layout.bits, limbs=list(self._limbs), sign=self._sign)

    def copy(self) -> "BigInt":
        return self._from_parts(list(self._limbs), self._sign)

    def __copy__(self) -> "BigInt":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return self.copy()

    def _assign(self, other: "BigInt") -> "BigInt":
        """Перенос значения other в self (для составных присваиваний)."""
        self._limbs = list(other._limbs)
        self._sign = other._sign
        return self

    def _coerce(self, other: object) -> "BigInt | None":
        """
        Приведение операнда к BigInt того же layout.

        Returns:
            BigInt, либо None если тип операнда не поддерживается

        Raises:
            LimbLayoutMismatchError: Если операнд BigInt с другим layout
        """
        if isinstance(other, BigInt):
            if other.layout != self.layout:
                logger.debug(
                    "Layout mismatch: %s (%d-bit) vs %s (%d-bit)",
                    type(self).__name__,
                    self.layout.bits,
                    type(other).__name__,
                    other.layout.bits,
                )
                raise LimbLayoutMismatchError(
                    f"cannot combine {self.layout.bits}-bit and "
                    f"{other.layout.bits}-bit limb layouts"
                )
            return other
        if isinstance(other, int):
            return type(self).from_int(other)
        return None

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def sign(self) -> bool:
        """True = неотрицательное, False = отрицательное."""
        return self._sign

    @property
    def limbs(self) -> tuple[int, ...]:
        """Магнитуда, little-endian, только для чтения."""
        return tuple(self._limbs)

    def is_zero(self) -> bool:
        return self._limbs == [0]

    def bit_length(self) -> int:
        """Количество значащих бит магнитуды."""
        return significant_bits(self._limbs, self.layout.bits)

    def bit_width(self) -> int:
        """Полная ширина массива limbs в битах (граница усекающих сдвигов)."""
        return bit_width(self._limbs, self.layout.bits)

    def abs(self) -> "BigInt":
        return self._from_parts(list(self._limbs), True)

    def __abs__(self) -> "BigInt":
        return self.abs()

    def __neg__(self) -> "BigInt":
        return self._from_parts(list(self._limbs), not self._sign)

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __bool__(self) -> bool:
        return not self.is_zero()

    # =========================================================================
    # NARROWING CONVERSION
    # =========================================================================

    def can_narrow(self) -> bool:
        """Помещается ли значение в один неотрицательный limb без потерь."""
        return self._sign and len(self._limbs) == 1

    def to_native(self) -> int:
        """
        Сужение до одного беззнакового limb.

        Raises:
            NarrowingOverflowError: Если can_narrow() == False
        """
        if not self.can_narrow():
            logger.debug(
                "Narrowing refused: sign=%s, %d limbs", self._sign, len(self._limbs)
            )
            raise NarrowingOverflowError(
                f"value does not fit in one unsigned {self.layout.bits}-bit limb"
            )
        return self._limbs[0]

    def __int__(self) -> int:
        magnitude = join_limbs(self._limbs, self.layout.bits)
        return magnitude if self._sign else -magnitude

    __index__ = __int__

    # =========================================================================
    # ADDITIVE ENGINE
    # =========================================================================

    def _add(self, other: "BigInt") -> "BigInt":
        bits = self.layout.bits
        if self._sign != other._sign:
            # A + (-B) = A - |B|;  (-A) + B = B - |A|
            if self._sign:
                return self._sub(other.abs())
            return other._sub(self.abs())
        return self._from_parts(add_magnitudes(self._limbs, other._limbs, bits), self._sign)

    def _sub(self, other: "BigInt") -> "BigInt":
        bits = self.layout.bits
        if self._lt(other):
            return -(other._sub(self))
        # Здесь self >= other, поэтому при разных знаках self >= 0 > other
        if self._sign != other._sign:
            return self._add(other.abs())
        if self._sign:
            return self._from_parts(subtract_magnitudes(self._limbs, other._limbs, bits), True)
        # (-x) - (-y) = y - x, где x <= y
        return self._from_parts(subtract_magnitudes(other._limbs, self._limbs, bits), True)

    def __add__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._add(operand)

    def __radd__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._add(self)

    def __iadd__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._assign(self._add(operand))

    def __sub__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._sub(operand)

    def __rsub__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._sub(self)

    def __isub__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._assign(self._sub(operand))

    def increment(self) -> "BigInt":
        """
        Префиксный инкремент на месте (++x).

        Быстрый путь меняет только младший limb, если изменение магнитуды
        не переходит границу limb и не пересекает ноль.
        """
        limb0 = self._limbs[0]
        if self._sign and limb0 < self.layout.max_value:
            self._limbs[0] = limb0 + 1
        elif not self._sign and limb0 > 0:
            self._limbs[0] = limb0 - 1
            if self._limbs == [0]:
                self._sign = True
        else:
            self += 1
        return self

    def decrement(self) -> "BigInt":
        """Префиксный декремент на месте (--x)."""
        limb0 = self._limbs[0]
        if self._sign and limb0 > 0:
            self._limbs[0] = limb0 - 1
        elif not self._sign and limb0 < self.layout.max_value:
            self._limbs[0] = limb0 + 1
        else:
            self -= 1
        return self

    def post_increment(self) -> "BigInt":
        """Постфиксный инкремент (x++): возвращает значение до изменения."""
        previous = self.copy()
        self.increment()
        return previous

    def post_decrement(self) -> "BigInt":
        """Постфиксный декремент (x--): возвращает значение до изменения."""
        previous = self.copy()
        self.decrement()
        return previous

    # =========================================================================
    # MULTIPLICATIVE ENGINE
    # =========================================================================

    def _mul(self, other: "BigInt") -> "BigInt":
        product = multiply_magnitudes(self._limbs, other._limbs, self.layout.bits)
        return self._from_parts(product, self._sign == other._sign)

    def __mul__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._mul(operand)

    def __rmul__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._mul(self)

    def __imul__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._assign(self._mul(operand))

    # =========================================================================
    # DIVISION ENGINE
    # =========================================================================

    def _divide(self, other: "BigInt", return_remainder: bool) -> "BigInt":
        """
        Truncated division: частное со знаком XOR, остаток со знаком делимого.

        Raises:
            BigIntZeroDivisionError: Если other == 0
        """
        try:
            magnitude = divide_magnitudes(
                self._limbs, other._limbs, self.layout.bits, return_remainder
            )
        except BigIntZeroDivisionError:
            logger.debug("Division by zero: %d-limb dividend", len(self._limbs))
            raise
        if return_remainder:
            return self._from_parts(magnitude, self._sign)
        return self._from_parts(magnitude, self._sign == other._sign)

    def _divmod(self, other: "BigInt") -> tuple["BigInt", "BigInt"]:
        try:
            quotient, remainder = divmod_magnitudes(
                self._limbs, other._limbs, self.layout.bits
            )
        except BigIntZeroDivisionError:
            logger.debug("Division by zero: %d-limb dividend", len(self._limbs))
            raise
        return (
            self._from_parts(quotient, self._sign == other._sign),
            self._from_parts(remainder, self._sign),
        )

    def __truediv__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._divide(operand, return_remainder=False)

    def __rtruediv__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._divide(self, return_remainder=False)

    def __itruediv__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._assign(self._divide(operand, return_remainder=False))

    # // — тот же truncated-алгоритм, что и /: пара (//, %) согласована
    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__
    __ifloordiv__ = __itruediv__

    def __mod__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._divide(operand, return_remainder=True)

    def __rmod__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._divide(self, return_remainder=True)

    def __imod__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._assign(self._divide(operand, return_remainder=True))

    def __divmod__(self, other: object) -> tuple["BigInt", "BigInt"]:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._divmod(operand)

    def __rdivmod__(self, other: object) -> tuple["BigInt", "BigInt"]:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._divmod(self)

    # =========================================================================
    # COMPARISON ENGINE
    # =========================================================================

    def _eq(self, other: "BigInt") -> bool:
        if self is other:
            return True
        return self._sign == other._sign and self._limbs == other._limbs

    def _lt(self, other: "BigInt") -> bool:
        if self is other:
            return False
        # Любое неотрицательное больше любого отрицательного
        if self._sign != other._sign:
            return not self._sign
        order = compare_magnitudes(self._limbs, other._limbs)
        return order < 0 if self._sign else order > 0

    def equals_native(self, value: int) -> bool:
        """
        Быстрое равенство с одним беззнаковым limb без построения BigInt.

        Examples:
            >>> BigInt(1).equals_native(1)
            True
            >>> BigInt(1, sign=False).equals_native(1)
            False
        """
        return self._sign and magnitude_equals_native(self._limbs, value)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, int) and not isinstance(other, bool) and self.layout.fits(other):
            return self.equals_native(other)
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._eq(operand)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._lt(operand)

    def __gt__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self._eq(operand) and not self._lt(operand)

    def __le__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._eq(operand) or self._lt(operand)

    def __ge__(self, other: object) -> bool:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return not self._lt(operand)

    # =========================================================================
    # BITWISE/SHIFT ENGINE
    # =========================================================================
    # Операции над магнитудой, без эмуляции дополнительного кода.
    # Знак результата: отрицательный, если знаки операндов различны.

    def __and__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._from_parts(
            and_magnitudes(self._limbs, operand._limbs), self._sign == operand._sign
        )

    def __or__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._from_parts(
            or_magnitudes(self._limbs, operand._limbs), self._sign == operand._sign
        )

    def __xor__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._from_parts(
            xor_magnitudes(self._limbs, operand._limbs), self._sign == operand._sign
        )

    def __rand__(self, other: object) -> "BigInt":
        return self.__and__(other)

    def __ror__(self, other: object) -> "BigInt":
        return self.__or__(other)

    def __rxor__(self, other: object) -> "BigInt":
        return self.__xor__(other)

    def __iand__(self, other: object) -> "BigInt":
        result = self.__and__(other)
        if result is NotImplemented:
            return result
        return self._assign(result)

    def __ior__(self, other: object) -> "BigInt":
        result = self.__or__(other)
        if result is NotImplemented:
            return result
        return self._assign(result)

    def __ixor__(self, other: object) -> "BigInt":
        result = self.__xor__(other)
        if result is NotImplemented:
            return result
        return self._assign(result)

    def __invert__(self) -> "BigInt":
        """Инверсия всех бит в пределах текущей ширины, знак сохраняется."""
        return self._from_parts(not_magnitude(self._limbs, self.layout.bits), self._sign)

    def __lshift__(self, count: int) -> "BigInt":
        """Усекающий сдвиг влево в пределах текущей ширины массива."""
        shifted = shift_left_truncating(
            self._limbs, operator.index(count), self.layout.bits
        )
        return self._from_parts(shifted, self._sign)

    def __rshift__(self, count: int) -> "BigInt":
        shifted = shift_right_truncating(
            self._limbs, operator.index(count), self.layout.bits
        )
        return self._from_parts(shifted, self._sign)

    def __ilshift__(self, count: int) -> "BigInt":
        return self._assign(self << count)

    def __irshift__(self, count: int) -> "BigInt":
        return self._assign(self >> count)

    def expanding_left_shift(self, count: int) -> "BigInt":
        """
        Сдвиг влево с расширением массива: старшие биты не теряются.

        Examples:
            >>> int(BigInt(1).expanding_left_shift(64))
            18446744073709551616
        """
        shifted = shift_left_expanding(
            self._limbs, operator.index(count), self.layout.bits
        )
        return self._from_parts(shifted, self._sign)

    # =========================================================================
    # STRING CONVERSION
    # =========================================================================

    def to_string(self, base: int = 10) -> str:
        """
        Строковое представление в основании 2 или 10.

        Raises:
            UnsupportedBaseError: Для любого другого основания
        """
        return to_string(self, base)

    def __str__(self) -> str:
        return self.to_string(10)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string(10)})"
