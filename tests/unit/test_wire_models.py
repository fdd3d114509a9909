"""
Tests for Pydantic Wire Models

Комплексное тестирование Pydantic V2 моделей wire-формы:
- UBIWire
- SBIWire

Покрывает:
- Создание и валидация моделей
- Strict-типы слов и знака
- Нормализацию при сборке значения
- Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.core.bigint import SBI, UBI, Sign
from src.core.domain import SBIWire, UBIWire


# =============================================================================
# UBIWire
# =============================================================================


class TestUBIWire:
    """Тесты UBIWire"""

    def test_default_is_zero(self) -> None:
        wire = UBIWire()
        assert wire.digits == ()
        assert wire.to_value() == UBI.zero()

    def test_from_value(self) -> None:
        wire = UBIWire.from_value(UBI.from_int(2**32 + 5))
        assert wire.digits == (5, 1)
        assert wire.to_wire() == [5, 1]

    def test_non_canonical_normalized_on_build(self) -> None:
        wire = UBIWire(digits=[7, 0, 0])
        assert wire.digits == (7, 0, 0)
        assert wire.to_value().digits == (7,)

    @pytest.mark.parametrize("word", [-1, 2**32, 1.0, "1", True])
    def test_invalid_word_rejected(self, word) -> None:
        """Слово вне диапазона или не strict int"""
        with pytest.raises(ValidationError):
            UBIWire(digits=[word])

    def test_frozen(self) -> None:
        wire = UBIWire(digits=[1])
        with pytest.raises(ValidationError):
            wire.digits = (2,)  # type: ignore[misc]

    def test_json_dump(self) -> None:
        assert UBIWire(digits=[1, 2]).model_dump() == {"digits": (1, 2)}


# =============================================================================
# SBIWire
# =============================================================================


class TestSBIWire:
    """Тесты SBIWire"""

    @pytest.mark.parametrize("value", [0, 1, -1, 2**40, -(3**80)])
    def test_value_roundtrip(self, value: int) -> None:
        wire = SBIWire.from_value(SBI.from_int(value))
        assert wire.to_value().to_int() == value

    def test_to_wire_shape(self) -> None:
        wire = SBIWire.from_value(SBI.from_int(-(2**32 + 5)))
        assert wire.to_wire() == [-1, [5, 1]]

    def test_from_pair(self) -> None:
        wire = SBIWire.from_pair([-1, [3]])
        assert wire.sign == -1
        assert wire.magnitude.digits == (3,)

    def test_inconsistent_sign_normalized_on_build(self) -> None:
        """sign == 0 или пустая магнитуда дают ноль"""
        assert SBIWire(sign=1).to_value().sign is Sign.ZERO
        assert SBIWire(sign=0, magnitude=UBIWire(digits=[9])).to_value().is_zero()

    @pytest.mark.parametrize("sign", [2, -2, 1.0, "1", True])
    def test_invalid_sign_rejected(self, sign) -> None:
        with pytest.raises(ValidationError):
            SBIWire(sign=sign)

    def test_sign_required(self) -> None:
        with pytest.raises(ValidationError):
            SBIWire()  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        wire = SBIWire(sign=1, magnitude=UBIWire(digits=[1]))
        with pytest.raises(ValidationError):
            wire.sign = -1  # type: ignore[misc]

    def test_equality(self) -> None:
        a = SBIWire.from_value(SBI.from_int(-7))
        b = SBIWire(sign=-1, magnitude=UBIWire(digits=[7]))
        assert a == b
