"""
Radix Codec — разбор и форматирование магнитуд в системах счисления 2..36

Работает на уровне DigitVector; UBI/SBI добавляют знак поверх.

- Разбор: регистронезависимый, без разделителей и пробелов; пустая строка
  цифр → ParseBigIntError(EMPTY), символ вне алфавита → INVALID_DIGIT
- Форматирование: каноническая строка без ведущих нулей, ноль → "0"
- Для оснований-степеней двойки биты упаковываются напрямую, для остальных
  используется чанкинг по наибольшей степени основания, помещающейся в слово

ИНВАРИАНТ: parse_digits(format_digits(x, r), r) == x для всех r в [2, 36].
"""

from typing import Final

from src.core.bigint.config import (
    DEFAULT_ARITHMETIC_CONFIG,
    DIGIT_BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    MAX_RADIX,
    MIN_RADIX,
    ArithmeticConfig,
)
from src.core.bigint.digits import Digits, divrem_digit, mul_digit, normalize
from src.core.bigint.errors import ContractViolation, ParseBigIntError, ParseErrorKind

# =============================================================================
# АЛФАВИТ
# =============================================================================

DIGITS_LOWER: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"
DIGITS_UPPER: Final[str] = DIGITS_LOWER.upper()

_DIGIT_VALUES: Final[dict[str, int]] = {
    **{ch: value for value, ch in enumerate(DIGITS_LOWER)},
    **{ch: value for value, ch in enumerate(DIGITS_UPPER)},
}


def _chunk_params(radix: int) -> tuple[int, int]:
    """(big_base, chunk) — наибольшая степень radix, строго меньшая DIGIT_BASE."""
    big_base = radix
    chunk = 1
    while big_base * radix < DIGIT_BASE:
        big_base *= radix
        chunk += 1
    return big_base, chunk


_CHUNK_PARAMS: Final[dict[int, tuple[int, int]]] = {
    radix: _chunk_params(radix) for radix in range(MIN_RADIX, MAX_RADIX + 1)
}


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_radix(radix: int) -> None:
    """
    Raises:
        ContractViolation: Если radix вне [MIN_RADIX, MAX_RADIX]
    """
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise ContractViolation(
            f"radix must be in [{MIN_RADIX}, {MAX_RADIX}], got {radix}"
        )


def _is_power_of_two(radix: int) -> bool:
    return radix & (radix - 1) == 0


def _digit_values(text: str, radix: int) -> list[int]:
    values = []
    for ch in text:
        value = _DIGIT_VALUES.get(ch)
        if value is None or value >= radix:
            raise ParseBigIntError(ParseErrorKind.INVALID_DIGIT, text, radix)
        values.append(value)
    return values


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_digits(text: str, radix: int) -> list[int]:
    """
    Разбор строки цифр (без знака) в нормализованный вектор слов.

    Args:
        text: Строка цифр, регистр не важен
        radix: Основание в [2, 36]

    Returns:
        Нормализованный вектор слов

    Raises:
        ContractViolation: Если radix вне [2, 36]
        ParseBigIntError: EMPTY для пустой строки, INVALID_DIGIT для
            символа вне алфавита основания

    Examples:
        >>> parse_digits("ff", 16)
        [255]
        >>> parse_digits("100000000", 16)
        [0, 1]
    """
    validate_radix(radix)
    if not text:
        raise ParseBigIntError(ParseErrorKind.EMPTY, text, radix)

    values = _digit_values(text, radix)

    if _is_power_of_two(radix):
        return _parse_power_of_two(values, radix)
    return _parse_chunked(values, radix)


def _parse_power_of_two(values: list[int], radix: int) -> list[int]:
    bits = radix.bit_length() - 1
    digits = []
    acc = 0
    acc_bits = 0
    for value in reversed(values):
        acc |= value << acc_bits
        acc_bits += bits
        if acc_bits >= DIGIT_BITS:
            digits.append(acc & DIGIT_MASK)
            acc >>= DIGIT_BITS
            acc_bits -= DIGIT_BITS
    if acc:
        digits.append(acc)
    return normalize(digits)


def _parse_chunked(values: list[int], radix: int) -> list[int]:
    _, chunk = _CHUNK_PARAMS[radix]
    digits: list[int] = []

    # первый чанк короче, остальные ровно по chunk цифр
    head = len(values) % chunk or chunk
    start = 0
    end = head
    while start < len(values):
        piece = 0
        for value in values[start:end]:
            piece = piece * radix + value
        digits = mul_digit(digits, radix ** (end - start), piece)
        start = end
        end += chunk
    return digits


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_digits(
    digits: Digits,
    radix: int,
    config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
) -> str:
    """
    Каноническая строка цифр магнитуды (без знака).

    Examples:
        >>> format_digits([], 10)
        '0'
        >>> format_digits([0, 1], 16)
        '100000000'
    """
    validate_radix(radix)
    if not digits:
        return "0"

    alphabet = DIGITS_UPPER if config.uppercase_radix_digits else DIGITS_LOWER

    if _is_power_of_two(radix):
        out = _format_power_of_two(digits, radix, alphabet)
    else:
        out = _format_chunked(digits, radix, alphabet)

    # out: от младшей цифры к старшей
    while len(out) > 1 and out[-1] == "0":
        out.pop()
    return "".join(reversed(out))


def _format_power_of_two(digits: Digits, radix: int, alphabet: str) -> list[str]:
    bits = radix.bit_length() - 1
    mask = radix - 1
    out = []
    acc = 0
    acc_bits = 0
    for word in digits:
        acc |= word << acc_bits
        acc_bits += DIGIT_BITS
        while acc_bits >= bits:
            out.append(alphabet[acc & mask])
            acc >>= bits
            acc_bits -= bits
    if acc:
        out.append(alphabet[acc])
    return out


def _format_chunked(digits: Digits, radix: int, alphabet: str) -> list[str]:
    big_base, chunk = _CHUNK_PARAMS[radix]
    out = []
    current = list(digits)
    while current:
        current, piece = divrem_digit(current, big_base)
        # каждый чанк дополняется нулями до chunk цифр; лишние старшие нули
        # последнего чанка срезаются в format_digits
        for _ in range(chunk):
            piece, value = divmod(piece, radix)
            out.append(alphabet[value])
    return out
