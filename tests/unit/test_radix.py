"""
Тесты для Radix Codec

Проверяет:
1. Форматирование во всех основаниях 2..36 против эталона на int
2. Разбор: регистронезависимость, ведущие нули
3. Ошибки разбора EMPTY / INVALID_DIGIT и их атрибуты
4. Валидацию основания
5. Конфигурацию регистра букв
"""

import pytest

from src.core.bigint import (
    UBI,
    ArithmeticConfig,
    ContractViolation,
    DecodingError,
    ParseBigIntError,
    ParseErrorKind,
)
from src.core.bigint.radix import DIGITS_LOWER, format_digits, parse_digits

VALUES = [0, 1, 35, 36, 2**32 - 1, 2**32, 2**64 + 3, 3**150, 10**100]


def to_base(value: int, radix: int) -> str:
    """Эталонное форматирование int."""
    if value == 0:
        return "0"
    out = []
    while value:
        value, rem = divmod(value, radix)
        out.append(DIGITS_LOWER[rem])
    return "".join(reversed(out))


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


class TestFormat:
    """Тесты форматирования"""

    @pytest.mark.parametrize("radix", range(2, 37))
    def test_matches_reference_all_radices(self, radix: int) -> None:
        for value in VALUES:
            assert UBI.from_int(value).to_str_radix(radix) == to_base(value, radix)

    def test_zero_is_single_digit(self) -> None:
        assert format_digits([], 16) == "0"
        assert UBI.zero().to_str_radix(2) == "0"

    def test_no_leading_zeros(self) -> None:
        """Внутренние чанки дополняются нулями, старший — нет"""
        assert UBI.from_int(10**18).to_str_radix(10) == "1" + "0" * 18
        assert format_digits([0, 1], 16) == "100000000"

    def test_lowercase_by_default(self) -> None:
        assert UBI.from_int(0xABCDEF).to_str_radix(16) == "abcdef"

    def test_uppercase_config(self) -> None:
        config = ArithmeticConfig(uppercase_radix_digits=True)
        assert UBI.from_int(0xABCDEF).to_str_radix(16, config) == "ABCDEF"
        assert UBI.from_int(35).to_str_radix(36, config) == "Z"

    def test_str_is_decimal(self) -> None:
        assert str(UBI.from_int(10**100)) == str(10**100)


# =============================================================================
# РАЗБОР
# =============================================================================


class TestParse:
    """Тесты разбора"""

    @pytest.mark.parametrize("radix", range(2, 37))
    def test_roundtrip_all_radices(self, radix: int) -> None:
        for value in VALUES:
            text = to_base(value, radix)
            assert UBI.from_str_radix(text, radix).to_int() == value

    def test_case_insensitive(self) -> None:
        assert parse_digits("FF", 16) == [255]
        assert parse_digits("fF", 16) == [255]
        assert UBI.from_str_radix("Zz", 36) == 35 * 36 + 35

    def test_leading_zeros_accepted(self) -> None:
        assert UBI.from_str_radix("000123") == 123
        assert UBI.from_str_radix("0000") == 0

    def test_crosses_word_boundary(self) -> None:
        assert parse_digits("100000000", 16) == [0, 1]
        assert parse_digits("1" + "0" * 32, 2) == [0, 1]

    def test_octal_bits_straddle_words(self) -> None:
        """3-битные цифры не выровнены по 32-битным словам"""
        value = 8**40 - 1
        assert UBI.from_str_radix("7" * 40, 8).to_int() == value


class TestParseErrors:
    """Тесты ошибок разбора"""

    def test_empty(self) -> None:
        with pytest.raises(ParseBigIntError) as exc_info:
            UBI.from_str_radix("", 10)
        assert exc_info.value.kind is ParseErrorKind.EMPTY
        assert exc_info.value.radix == 10

    @pytest.mark.parametrize(
        "text, radix",
        [("12a", 10), ("2", 2), ("g", 16), (" 1", 10), ("1_000", 10), ("+1", 10), ("-1", 10)],
    )
    def test_invalid_digit(self, text: str, radix: int) -> None:
        """Пробелы, разделители и знак недопустимы для UBI"""
        with pytest.raises(ParseBigIntError) as exc_info:
            UBI.from_str_radix(text, radix)
        assert exc_info.value.kind is ParseErrorKind.INVALID_DIGIT
        assert exc_info.value.text == text

    def test_parse_error_is_decoding_error(self) -> None:
        with pytest.raises(DecodingError):
            UBI.from_str_radix("x")
        with pytest.raises(ValueError):
            UBI.from_str_radix("x")

    @pytest.mark.parametrize("radix", [0, 1, 37, -16])
    def test_invalid_radix(self, radix: int) -> None:
        with pytest.raises(ContractViolation):
            UBI.from_str_radix("1", radix)
        with pytest.raises(ContractViolation):
            UBI.one().to_str_radix(radix)
