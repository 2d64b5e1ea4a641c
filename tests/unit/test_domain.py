"""
Тесты для доменных моделей: LimbLayout и BigIntSnapshot

Проверяет:
1. Валидацию ширины limb
2. Инварианты канонической формы в снимке
3. Immutability (frozen)
4. JSON сериализацию снимка и восстановление BigInt
"""

import pytest
from pydantic import ValidationError

from bignum import (
    DEFAULT_LAYOUT,
    BigInt,
    BigIntSnapshot,
    LimbLayout,
    LimbLayoutMismatchError,
)


class BigInt8(BigInt):
    layout = LimbLayout(bits=8)


# =============================================================================
# LIMB LAYOUT
# =============================================================================


class TestLimbLayout:
    """Тесты для LimbLayout"""

    def test_default(self) -> None:
        assert DEFAULT_LAYOUT.bits == 64
        assert DEFAULT_LAYOUT.max_value == 2**64 - 1
        assert DEFAULT_LAYOUT.mask == DEFAULT_LAYOUT.max_value

    @pytest.mark.parametrize("bits", [8, 16, 32, 64, 128])
    def test_valid_widths(self, bits: int) -> None:
        assert LimbLayout(bits=bits).max_value == 2**bits - 1

    @pytest.mark.parametrize("bits", [0, 4, 12, 24, -8])
    def test_invalid_widths(self, bits: int) -> None:
        with pytest.raises(ValueError):
            LimbLayout(bits=bits)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(ValueError):
            LimbLayout(bits=True)

    def test_fits(self) -> None:
        layout = LimbLayout(bits=8)
        assert layout.fits(0)
        assert layout.fits(255)
        assert not layout.fits(256)
        assert not layout.fits(-1)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_LAYOUT.bits = 32  # type: ignore[misc]


# =============================================================================
# SNAPSHOT
# =============================================================================


class TestBigIntSnapshot:
    """Тесты для BigIntSnapshot"""

    def test_defaults(self) -> None:
        snapshot = BigIntSnapshot(limbs=[0])
        assert snapshot.bits == 64
        assert snapshot.sign is True
        assert snapshot.is_zero()
        assert snapshot.limb_count() == 1

    def test_empty_limbs_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BigIntSnapshot(limbs=[])

    def test_leading_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="redundant leading zero"):
            BigIntSnapshot(limbs=[1, 0])

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="negative zero"):
            BigIntSnapshot(limbs=[0], sign=False)

    def test_limb_out_of_range(self) -> None:
        with pytest.raises(ValidationError, match="out of range"):
            BigIntSnapshot(bits=8, limbs=[256])
        with pytest.raises(ValidationError):
            BigIntSnapshot(bits=8, limbs=[-1])

    def test_invalid_bits(self) -> None:
        with pytest.raises(ValidationError):
            BigIntSnapshot(bits=12, limbs=[1])

    def test_frozen(self) -> None:
        snapshot = BigIntSnapshot(limbs=[1])
        with pytest.raises(ValidationError):
            snapshot.sign = False  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        snapshot = BigInt.from_int(-(2**70)).snapshot()
        restored = BigIntSnapshot.model_validate_json(snapshot.model_dump_json())
        assert restored == snapshot
        assert int(BigInt.from_snapshot(restored)) == -(2**70)


class TestBigIntSnapshotConversion:
    """Тесты для BigInt.snapshot / BigInt.from_snapshot"""

    def test_snapshot_reflects_representation(self) -> None:
        snapshot = BigInt8.from_int(-0x1FF).snapshot()
        assert snapshot.bits == 8
        assert snapshot.limbs == [0xFF, 0x01]
        assert snapshot.sign is False

    def test_from_snapshot(self) -> None:
        value = BigInt8.from_snapshot(BigIntSnapshot(bits=8, limbs=[44, 1]))
        assert type(value) is BigInt8
        assert int(value) == 300

    def test_layout_mismatch(self) -> None:
        snapshot = BigIntSnapshot(bits=8, limbs=[1])
        with pytest.raises(LimbLayoutMismatchError):
            BigInt.from_snapshot(snapshot)

    def test_value_independent_of_snapshot(self) -> None:
        snapshot = BigIntSnapshot(limbs=[5])
        value = BigInt.from_snapshot(snapshot)
        value += 1
        assert snapshot.limbs == [5]
        assert value == 6
