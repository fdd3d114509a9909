"""
Modular Arithmetic — НОД, модульное возведение в степень, обратный по модулю

- gcd: алгоритм Евклида над магнитудами; результат всегда >= 0
- extended_gcd: (g, x, y) с a*x + b*y == g
- lcm: |a*b| / gcd(a, b); lcm с нулём равен нулю
- mod_pow: square-and-multiply по битам показателя от младшего к старшему,
  floor-редукция после каждого умножения
- mod_inverse: расширенный Евклид; отсутствие обратного → None

Тип результата: если хотя бы один операнд SBI, вычисление знаковое и
результат SBI; иначе UBI.

КАНОНИЧЕСКИЙ ДИАПАЗОН РЕЗУЛЬТАТА (по знаку модуля m):
- m > 0: [0, m)
- m < 0: (m, 0]
"""

from typing import Callable, Optional, TypeVar, Union

from src.core.bigint.sbi import SBI
from src.core.bigint.ubi import UBI
from src.core.math.numeric_traits import (
    is_negative,
    magnitude,
    validate_non_negative,
    validate_nonzero,
)

BigInteger = Union[UBI, SBI]
IntegerLike = Union[UBI, SBI, int]

T = TypeVar("T", UBI, SBI)


def _is_signed(*values: IntegerLike) -> bool:
    return any(isinstance(v, SBI) or (isinstance(v, int) and v < 0) for v in values)


def _as_sbi(value: IntegerLike) -> SBI:
    if isinstance(value, SBI):
        return value
    if isinstance(value, UBI):
        return SBI.from_ubi(value)
    return SBI.from_int(value)


def _as_ubi(value: IntegerLike) -> UBI:
    if isinstance(value, UBI):
        return value
    return UBI.from_int(value)


# =============================================================================
# НОД / НОК
# =============================================================================


def _gcd_magnitude(a: UBI, b: UBI) -> UBI:
    while not b.is_zero():
        a, b = b, a % b
    return a


def gcd(a: IntegerLike, b: IntegerLike) -> BigInteger:
    """
    Наибольший общий делитель; gcd(0, 0) == 0.

    Returns:
        UBI для беззнаковых операндов, неотрицательный SBI иначе

    Examples:
        >>> gcd(UBI.from_int(12), UBI.from_int(18))
        UBI(6)
        >>> gcd(SBI.from_int(-12), SBI.from_int(18))
        SBI(6)
    """
    result = _gcd_magnitude(magnitude(a), magnitude(b))
    if _is_signed(a, b):
        return SBI.from_ubi(result)
    return result


def lcm(a: IntegerLike, b: IntegerLike) -> BigInteger:
    """Наименьшее общее кратное, всегда >= 0."""
    mag_a = magnitude(a)
    mag_b = magnitude(b)
    if mag_a.is_zero() or mag_b.is_zero():
        result = UBI.zero()
    else:
        result = mag_a // _gcd_magnitude(mag_a, mag_b) * mag_b
    if _is_signed(a, b):
        return SBI.from_ubi(result)
    return result


def extended_gcd(a: IntegerLike, b: IntegerLike) -> tuple[SBI, SBI, SBI]:
    """
    Расширенный алгоритм Евклида.

    Returns:
        (g, x, y): g == gcd(a, b) >= 0 и a*x + b*y == g
    """
    a = _as_sbi(a)
    b = _as_sbi(b)

    old_r, r = a, b
    old_x, x = SBI.one(), SBI.zero()
    old_y, y = SBI.zero(), SBI.one()
    while not r.is_zero():
        quotient = old_r.div_floor(r)
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y

    if old_r.is_negative():
        return -old_r, -old_x, -old_y
    return old_r, old_x, old_y


# =============================================================================
# MODULAR EXPONENTIATION
# =============================================================================


def _square_and_multiply(
    base: T,
    exponent: UBI,
    modulus: T,
    reduce: Callable[[T, T], T],
    one_value: T,
) -> T:
    result = reduce(one_value, modulus)
    base = reduce(base, modulus)
    total_bits = exponent.bit_length()
    for position in range(total_bits):
        if exponent.bit(position):
            result = reduce(result * base, modulus)
        if position + 1 < total_bits:
            base = reduce(base * base, modulus)
    return result


def mod_pow(base: IntegerLike, exponent: IntegerLike, modulus: IntegerLike) -> BigInteger:
    """
    base ** exponent по модулю modulus.

    Args:
        base: Основание (любого знака для SBI)
        exponent: Неотрицательный показатель
        modulus: Ненулевой модуль

    Returns:
        Значение в каноническом диапазоне для знака modulus;
        exponent == 0 даёт 1 mod modulus (0 для |modulus| == 1)

    Raises:
        ContractViolation: Если exponent < 0
        DivisionByZero: Если modulus == 0

    Examples:
        >>> mod_pow(UBI.from_int(4), 13, 497)
        UBI(445)
        >>> mod_pow(SBI.from_int(-2), 3, 5)
        SBI(2)
        >>> mod_pow(SBI.from_int(2), 3, -5)
        SBI(-2)
    """
    validate_non_negative(exponent, "exponent")
    validate_nonzero(modulus, "modulus")
    power = magnitude(exponent)

    if _is_signed(base, modulus):
        return _square_and_multiply(
            _as_sbi(base), power, _as_sbi(modulus), SBI.mod_floor, SBI.one()
        )
    return _square_and_multiply(
        _as_ubi(base), power, _as_ubi(modulus), UBI.mod_floor, UBI.one()
    )


# =============================================================================
# MODULAR INVERSE
# =============================================================================


def _inverse_magnitude(value: UBI, modulus: UBI) -> Optional[UBI]:
    """Обратный к value по модулю modulus > 0, в [0, modulus); None если нет."""
    if modulus.is_one():
        return UBI.zero()

    residue = value % modulus
    if residue.is_zero():
        return None

    old_r, r = modulus, residue
    old_t, t = SBI.zero(), SBI.one()
    while not r.is_zero():
        quotient, remainder = old_r.div_rem(r)
        old_r, r = r, remainder
        old_t, t = t, old_t - SBI.from_ubi(quotient) * t

    if not old_r.is_one():
        return None
    return old_t.mod_floor(SBI.from_ubi(modulus)).magnitude


def mod_inverse(value: IntegerLike, modulus: IntegerLike) -> Optional[BigInteger]:
    """
    Обратный элемент value по модулю modulus.

    Returns:
        inv с value * inv ≡ 1 (mod modulus) в каноническом диапазоне для
        знака modulus, либо None, если gcd(value, modulus) != 1

    Raises:
        DivisionByZero: Если modulus == 0

    Examples:
        >>> mod_inverse(UBI.from_int(3), UBI.from_int(11))
        UBI(4)
        >>> mod_inverse(UBI.from_int(2), UBI.from_int(4)) is None
        True
    """
    validate_nonzero(modulus, "modulus")
    modulus_magnitude = magnitude(modulus)

    inverse = _inverse_magnitude(magnitude(value), modulus_magnitude)
    if inverse is None:
        return None
    if not _is_signed(value, modulus):
        return inverse

    # обратный к -v равен -inv, приводим к [0, |m|)
    if is_negative(value) and not inverse.is_zero():
        inverse = modulus_magnitude - inverse
    result = SBI.from_ubi(inverse)
    # для отрицательного модуля переносим в (m, 0]
    if is_negative(modulus) and not result.is_zero():
        result = result - SBI.from_ubi(modulus_magnitude)
    return result
