"""
BigIntSnapshot — Каноническая форма значения BigInt

Immutable Pydantic модель, фиксирующая представление BigInt:
знак + little-endian массив limbs + ширина limb.

Модель валидирует инварианты представления:
1. limbs не пустой, ноль хранится как [0]
2. Нет лишних старших нулевых limbs
3. Нет отрицательного нуля
4. Каждый limb в диапазоне [0, 2**bits - 1]
"""

from pydantic import BaseModel, Field, field_validator

from bignum.core.domain.layout import DEFAULT_LIMB_BITS, LimbLayout


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class BigIntSnapshot(BaseModel):
    """
    Снимок значения BigInt в канонической форме.

    Поля объявлены в порядке bits → limbs → sign: валидаторы
    последующих полей опираются на уже проверенные предыдущие.
    """

    bits: int = Field(DEFAULT_LIMB_BITS, description="Ширина limb в битах")
    limbs: list[int] = Field(
        ..., min_length=1, description="Магнитуда, little-endian (index 0 = младший limb)"
    )
    sign: bool = Field(True, description="True = неотрицательное, False = отрицательное")

    model_config = {"frozen": True}

    @field_validator("bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        """Ширина limb должна быть допустимой для LimbLayout"""
        LimbLayout(bits=v)
        return v

    @field_validator("limbs")
    @classmethod
    def validate_limbs(cls, v: list[int], info) -> list[int]:
        """
        Проверка диапазона limbs и отсутствия старших нулей.
        """
        if "bits" in info.data:
            max_value = LimbLayout(bits=info.data["bits"]).max_value
            for index, limb in enumerate(v):
                if limb < 0 or limb > max_value:
                    raise ValueError(
                        f"limb[{index}]={limb} out of range [0, {max_value}]"
                    )
        if len(v) > 1 and v[-1] == 0:
            raise ValueError(
                f"redundant leading zero limb: {len(v)} limbs, top limb is 0"
            )
        return v

    @field_validator("sign")
    @classmethod
    def validate_sign(cls, v: bool, info) -> bool:
        """Ноль всегда положительный"""
        if not v and info.data.get("limbs") == [0]:
            raise ValueError("negative zero is not a canonical value")
        return v

    def is_zero(self) -> bool:
        return self.limbs == [0]

    def limb_count(self) -> int:
        return len(self.limbs)
