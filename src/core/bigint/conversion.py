"""
Conversion — конверсия в/из fixed-width целых и float

- to_u8 .. to_u128, to_usize: беззнаковые fixed-width; None при переполнении
  или отрицательном значении
- to_i8 .. to_i128, to_isize: знаковые fixed-width (two's complement
  диапазон); None при переполнении
- to_float: ближайший double (round-half-to-even); inf при переполнении
- ubi_from_float / sbi_from_float: усечение к нулю; None для NaN/±inf
  и для отрицательных значений в беззнаковый тип

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение fixed-width — штатный исход (None), не исключение
2. Для значений, пришедших из fixed-width int, to_float совпадает с
   нативным float(int) бит-в-бит (корректное округление)
"""

import math
from typing import Final, Optional, Union

from src.core.bigint.digits import (
    Digits,
    bit_length_digits,
    digits_from_int,
    digits_to_int,
    shl_digits,
    shr_digits,
    trailing_zeros_digits,
)
from src.core.bigint.sbi import SBI, Sign
from src.core.bigint.ubi import UBI

# =============================================================================
# IEEE 754 binary64
# =============================================================================

DBL_MANT_DIG: Final[int] = 53
DBL_MAX_EXP: Final[int] = 1024

# Ширина usize/isize фиксирована на 64 битах
POINTER_WIDTH: Final[int] = 64

BigInteger = Union[UBI, SBI]


def _split_sign(value: BigInteger) -> tuple[Sign, UBI]:
    if isinstance(value, SBI):
        return value.sign, value.magnitude
    if isinstance(value, UBI):
        return (Sign.ZERO if value.is_zero() else Sign.POSITIVE), value
    raise TypeError(f"expected UBI or SBI, got {type(value).__name__}")


# =============================================================================
# FIXED-WIDTH
# =============================================================================


def to_unsigned(value: BigInteger, bits: int) -> Optional[int]:
    """
    Конверсия в беззнаковое целое ширины bits.

    Returns:
        int в [0, 2**bits) или None, если значение не помещается

    Examples:
        >>> to_unsigned(UBI.from_int(255), 8)
        255
        >>> to_unsigned(UBI.from_int(256), 8) is None
        True
    """
    sign, magnitude = _split_sign(value)
    if sign is Sign.NEGATIVE:
        return None
    if magnitude.bit_length() > bits:
        return None
    return magnitude.to_int()


def to_signed(value: BigInteger, bits: int) -> Optional[int]:
    """
    Конверсия в знаковое целое ширины bits (диапазон [-2**(bits-1), 2**(bits-1))).

    Returns:
        int или None при переполнении

    Examples:
        >>> to_signed(SBI.from_int(-128), 8)
        -128
        >>> to_signed(SBI.from_int(128), 8) is None
        True
    """
    sign, magnitude = _split_sign(value)
    length = magnitude.bit_length()
    if length < bits:
        return sign.value * magnitude.to_int()
    # единственный случай длины bits: отрицательный минимум -2**(bits-1)
    if sign is Sign.NEGATIVE and length == bits and magnitude.trailing_zeros() == bits - 1:
        return -magnitude.to_int()
    return None


def to_u8(value: BigInteger) -> Optional[int]:
    return to_unsigned(value, 8)


def to_u16(value: BigInteger) -> Optional[int]:
    return to_unsigned(value, 16)


def to_u32(value: BigInteger) -> Optional[int]:
    return to_unsigned(value, 32)


def to_u64(value: BigInteger) -> Optional[int]:
    return to_unsigned(value, 64)


def to_u128(value: BigInteger) -> Optional[int]:
    return to_unsigned(value, 128)


def to_usize(value: BigInteger) -> Optional[int]:
    return to_unsigned(value, POINTER_WIDTH)


def to_i8(value: BigInteger) -> Optional[int]:
    return to_signed(value, 8)


def to_i16(value: BigInteger) -> Optional[int]:
    return to_signed(value, 16)


def to_i32(value: BigInteger) -> Optional[int]:
    return to_signed(value, 32)


def to_i64(value: BigInteger) -> Optional[int]:
    return to_signed(value, 64)


def to_i128(value: BigInteger) -> Optional[int]:
    return to_signed(value, 128)


def to_isize(value: BigInteger) -> Optional[int]:
    return to_signed(value, POINTER_WIDTH)


def ubi_from_int(value: int) -> Optional[UBI]:
    """UBI из int; None для отрицательных значений."""
    if value < 0:
        return None
    return UBI.from_int(value)


def sbi_from_int(value: int) -> SBI:
    return SBI.from_int(value)


# =============================================================================
# FLOAT
# =============================================================================


def digits_to_float(digits: Digits) -> float:
    """
    Корректно округлённый double из магнитуды.

    Берутся старшие DBL_MANT_DIG + 2 бита со "sticky" младшим битом
    (1, если хоть один отброшенный бит ненулевой), затем два лишних бита
    убираются округлением half-to-even.

    Returns:
        Ближайший float; math.inf, если значение вне диапазона double
    """
    exp = bit_length_digits(digits)
    if exp == 0:
        return 0.0

    shift = DBL_MANT_DIG + 2 - exp
    if shift >= 0:
        q = digits_to_int(digits) << shift
    else:
        q = digits_to_int(shr_digits(digits, -shift))
        if trailing_zeros_digits(digits) < -shift:
            q |= 1

    q = (q >> 2) + (1 if (q & 2) and (q & 5) else 0)

    if exp > DBL_MAX_EXP or (exp == DBL_MAX_EXP and q == 1 << DBL_MANT_DIG):
        return math.inf
    return math.ldexp(float(q), exp - DBL_MANT_DIG)


def to_float(value: BigInteger) -> float:
    """Ближайший float со знаком исходного значения."""
    sign, magnitude = _split_sign(value)
    result = digits_to_float(magnitude.digits)
    return -result if sign is Sign.NEGATIVE else result


def _truncated_magnitude(value: float) -> Optional[list[int]]:
    if not math.isfinite(value):
        return None
    mantissa, exponent = math.frexp(abs(value))
    # mantissa в [0.5, 1): ровно DBL_MANT_DIG значащих битов
    integral = digits_from_int(int(mantissa * (1 << DBL_MANT_DIG)))
    shift = exponent - DBL_MANT_DIG
    if shift >= 0:
        return shl_digits(integral, shift)
    return shr_digits(integral, -shift)


def ubi_from_float(value: float) -> Optional[UBI]:
    """
    UBI из float с усечением к нулю.

    Returns:
        None для NaN/±inf и для значений <= -1
    """
    magnitude = _truncated_magnitude(value)
    if magnitude is None:
        return None
    if value < 0 and magnitude:
        return None
    return UBI(magnitude)


def sbi_from_float(value: float) -> Optional[SBI]:
    """
    SBI из float с усечением к нулю.

    Returns:
        None для NaN/±inf
    """
    magnitude = _truncated_magnitude(value)
    if magnitude is None:
        return None
    sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
    return SBI(sign, UBI(magnitude))
