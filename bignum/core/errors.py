"""
Errors — Типизированные ошибки движка BigInt

Все ошибки арифметики относятся к области значений (неверный делитель,
сужение с потерей значения) и никогда не являются транзиентными.
Каждая ошибка наследует и общий BigIntError, и соответствующее
встроенное исключение Python, чтобы вызывающий код мог ловить любое из них.
"""


class BigIntError(Exception):
    """Базовая ошибка движка BigInt."""

    pass


class BigIntZeroDivisionError(BigIntError, ZeroDivisionError):
    """
    Деление или взятие остатка по нулевому делителю.

    Явная ошибка вместо молчаливого возврата нуля.
    """

    pass


class NarrowingOverflowError(BigIntError, OverflowError):
    """
    Значение не помещается в один неотрицательный limb.

    Перед сужением следует проверять BigInt.can_narrow().
    """

    pass


class UnsupportedBaseError(BigIntError, ValueError):
    """Строковое представление поддерживает только основания 2 и 10."""

    pass


class LimbLayoutMismatchError(BigIntError, TypeError):
    """Операнды построены на разных LimbLayout."""

    pass
