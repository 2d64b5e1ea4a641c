"""
Domain models: конфигурация limb и каноническая форма значения.
"""

from bignum.core.domain.layout import (
    DEFAULT_LAYOUT,
    DEFAULT_LIMB_BITS,
    MIN_LIMB_BITS,
    LimbLayout,
)
from bignum.core.domain.snapshot import BigIntSnapshot

__all__ = [
    # Layout
    "DEFAULT_LAYOUT",
    "DEFAULT_LIMB_BITS",
    "MIN_LIMB_BITS",
    "LimbLayout",
    # Snapshot model
    "BigIntSnapshot",
]
