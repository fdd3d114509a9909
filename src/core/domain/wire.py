"""
Wire Models — модели сериализованной формы UBI/SBI

Immutable Pydantic модели, представляющие wire-формат.
Полная совместимость с JSON Schema (contracts/schema/ubi_wire.json,
contracts/schema/sbi_wire.json).

Формат зафиксирован навсегда и не зависит от внутреннего представления:
- UBI: последовательность 32-битных слов, младшее первым, ноль = []
- SBI: пара [sign, magnitude], sign ∈ {-1, 0, 1}
"""

from typing import Annotated, Any

from pydantic import BaseModel, Field, StrictInt

from src.core.bigint.config import DIGIT_MASK
from src.core.bigint.sbi import SBI, Sign
from src.core.bigint.ubi import UBI

Word = Annotated[StrictInt, Field(ge=0, le=DIGIT_MASK)]
SignByte = Annotated[StrictInt, Field(ge=-1, le=1)]


# =============================================================================
# UBI
# =============================================================================


class UBIWire(BaseModel):
    """
    Wire-форма беззнакового значения.

    Старшие нулевые слова допустимы на входе и удаляются при сборке UBI.
    """

    digits: tuple[Word, ...] = Field(
        default=(), description="32-битные слова магнитуды, младшее первым"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_value(cls, value: UBI) -> "UBIWire":
        return cls(digits=value.digits)

    def to_value(self) -> UBI:
        return UBI(self.digits)

    def to_wire(self) -> list[int]:
        return list(self.digits)


# =============================================================================
# SBI
# =============================================================================


class SBIWire(BaseModel):
    """
    Wire-форма знакового значения.

    Несогласованные знак и магнитуда нормализуются при сборке SBI:
    нулевая магнитуда или sign == 0 дают ноль.
    """

    sign: SignByte = Field(..., description="Знак: -1, 0 или 1")
    magnitude: UBIWire = Field(default_factory=UBIWire, description="Магнитуда")

    model_config = {"frozen": True}

    @classmethod
    def from_value(cls, value: SBI) -> "SBIWire":
        return cls(sign=value.sign.value, magnitude=UBIWire.from_value(value.magnitude))

    @classmethod
    def from_pair(cls, pair: Any) -> "SBIWire":
        # pair уже прошёл проверку формы по JSON Schema
        sign, digits = pair
        return cls(sign=sign, magnitude=UBIWire(digits=digits))

    def to_value(self) -> SBI:
        return SBI(Sign(self.sign), self.magnitude.to_value())

    def to_wire(self) -> list[Any]:
        return [self.sign, self.magnitude.to_wire()]
