"""
Core math modules для bignum

Алгоритмы над магнитудами: list[int] limbs, little-endian.
Знаки здесь не рассматриваются.
"""

# Representation, Normalization & Bit Addressing
from bignum.core.math.limbs import (
    bit_at,
    bit_width,
    is_zero_magnitude,
    iter_set_bits,
    join_limbs,
    match_size,
    set_bit,
    set_total_bit,
    significant_bits,
    split_native,
    total_bit_at,
    trim_leading_zeroes,
)

# Comparison Engine
from bignum.core.math.comparison import (
    compare_magnitudes,
    magnitude_equals_native,
)

# Additive Engine
from bignum.core.math.additive import (
    add_magnitudes,
    subtract_magnitudes,
)

# Multiplicative Engine
from bignum.core.math.multiplicative import multiply_magnitudes

# Bitwise/Shift Engine
from bignum.core.math.bitwise import (
    and_magnitudes,
    not_magnitude,
    or_magnitudes,
    shift_left_expanding,
    shift_left_truncating,
    shift_right_truncating,
    xor_magnitudes,
)

# Division Engine
from bignum.core.math.division import (
    divide_magnitudes,
    divmod_magnitudes,
)

__all__ = [
    # Limbs — Normalization
    "match_size",
    "trim_leading_zeroes",
    "is_zero_magnitude",
    # Limbs — Native conversion
    "join_limbs",
    "split_native",
    # Limbs — Bit addressing
    "bit_at",
    "bit_width",
    "iter_set_bits",
    "set_bit",
    "set_total_bit",
    "significant_bits",
    "total_bit_at",
    # Comparison
    "compare_magnitudes",
    "magnitude_equals_native",
    # Additive
    "add_magnitudes",
    "subtract_magnitudes",
    # Multiplicative
    "multiply_magnitudes",
    # Bitwise/Shift
    "and_magnitudes",
    "not_magnitude",
    "or_magnitudes",
    "shift_left_expanding",
    "shift_left_truncating",
    "shift_right_truncating",
    "xor_magnitudes",
    # Division
    "divide_magnitudes",
    "divmod_magnitudes",
]
