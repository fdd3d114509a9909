"""
Root Extraction — целочисленные корни методом Ньютона

- isqrt: floor(sqrt(x)), r*r <= x < (r+1)*(r+1)
- icbrt: floor(cbrt(|x|)) со знаком x (cbrt — нечётная функция)
- nth_root: floor(x ** (1/n)) для n >= 1; для SBI нечётные n сохраняют знак,
  чётные n от отрицательного значения — ContractViolation

АЛГОРИТМ:
    Начальная оценка s0 = 2**ceil(bits(x) / n) >= корня (зависит только от
    битовой длины). Итерация Ньютона
        s_{k+1} = ((n - 1) * s_k + x // s_k**(n-1)) // n
    из оценки сверху монотонно убывает до floor-корня. Остановка на первом
    шаге без строгого улучшения (s_{k+1} >= s_k): вблизи корня
    целочисленный Ньютон может осциллировать, поэтому сходимость к
    неподвижной точке не используется.

ИНВАРИАНТ ЗАВЕРШЕНИЯ: последовательность оценок — строго убывающие
положительные целые, поэтому число итераций конечно.
"""

import logging
from typing import Callable, Union

from src.core.bigint.errors import ContractViolation
from src.core.bigint.sbi import SBI
from src.core.bigint.ubi import UBI

logger = logging.getLogger(__name__)

BigInteger = Union[UBI, SBI]


# =============================================================================
# NEWTON DESCENT
# =============================================================================


def _newton_descent(x: UBI, n: int, step: Callable[[UBI], UBI]) -> UBI:
    """
    Итерация Ньютона сверху вниз до первого неулучшающего шага.

    Args:
        x: Подкоренное значение (x >= 2**n)
        n: Степень корня
        step: Один шаг Ньютона s -> s'
    """
    bits = x.bit_length()
    current = UBI.one() << (-(-bits // n))

    iterations = 0
    while True:
        candidate = step(current)
        iterations += 1
        if candidate >= current:
            break
        current = candidate

    logger.debug("root n=%d of %d-bit value: %d Newton steps", n, bits, iterations)
    return current


def _root_magnitude(x: UBI, n: int) -> UBI:
    if n == 1 or x.is_zero() or x.is_one():
        return x
    if x.bit_length() <= n:
        # 2 <= x < 2**n → корень равен 1
        return UBI.one()

    if n == 2:
        return _newton_descent(x, 2, lambda s: (s + x // s) >> 1)
    if n == 3:
        return _newton_descent(x, 3, lambda s: (s * 2 + x // (s * s)) // 3)

    n_minus_1 = n - 1
    return _newton_descent(
        x, n, lambda s: (s * n_minus_1 + x // s.pow(n_minus_1)) // n
    )


# =============================================================================
# PUBLIC API
# =============================================================================


def nth_root(x: BigInteger, n: int) -> BigInteger:
    """
    Целочисленный корень степени n (усечение к нулю).

    Raises:
        ContractViolation: n < 1, либо чётное n для отрицательного x

    Examples:
        >>> nth_root(UBI.from_int(1000), 3)
        UBI(10)
        >>> nth_root(SBI.from_int(-1000), 3)
        SBI(-10)
    """
    if n < 1:
        raise ContractViolation(f"root degree must be >= 1, got {n}")
    if isinstance(x, SBI):
        if x.is_negative() and n % 2 == 0:
            raise ContractViolation(f"even root (n={n}) of a negative value: {x}")
        return SBI(x.sign, _root_magnitude(x.magnitude, n))
    if isinstance(x, UBI):
        return _root_magnitude(x, n)
    raise TypeError(f"expected UBI or SBI, got {type(x).__name__}")


def isqrt(x: BigInteger) -> BigInteger:
    """
    floor(sqrt(x)).

    Raises:
        ContractViolation: Если x — отрицательный SBI

    Examples:
        >>> isqrt(UBI.from_int(99))
        UBI(9)
    """
    return nth_root(x, 2)


def icbrt(x: BigInteger) -> BigInteger:
    """
    Кубический корень с сохранением знака: icbrt(-x) == -icbrt(x).

    Examples:
        >>> icbrt(SBI.from_int(-27))
        SBI(-3)
        >>> icbrt(UBI.from_int(26))
        UBI(2)
    """
    return nth_root(x, 3)


def is_perfect_power(x: BigInteger, n: int) -> bool:
    """True, если x == r**n для целого r."""
    return nth_root(x, n).pow(n) == x
