"""
SBI — знаковое целое произвольной точности (sign-magnitude)

Пара (sign, magnitude): sign ∈ {NEGATIVE, ZERO, POSITIVE}, magnitude — UBI.
Вся логика комбинирования знаков живёт здесь; беззнаковый слой о знаке
ничего не знает.

Деление:
- //, %, divmod и div_rem — TRUNCATING (округление к нулю, остаток со
  знаком делимого); это деление по умолчанию
- div_floor, mod_floor, div_mod_floor — FLOOR (округление к -inf, остаток
  со знаком делителя); используется модульной арифметикой

Сдвиг вправо — арифметический: x >> k == floor(x / 2**k), как у
fixed-width знаковых целых.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sign == ZERO тогда и только тогда, когда magnitude == 0
2. Значения immutable; каждая операция возвращает новое SBI
3. Деление на ноль → DivisionByZero в обоих режимах
"""

from enum import Enum
from typing import Optional, Union

from src.core.bigint.config import DEFAULT_ARITHMETIC_CONFIG, ArithmeticConfig
from src.core.bigint.digits import compare_digits
from src.core.bigint.errors import ContractViolation, ParseBigIntError
from src.core.bigint.ubi import UBI


# =============================================================================
# SIGN
# =============================================================================


class Sign(int, Enum):
    """Знак SBI; значение совпадает с wire-байтом знака."""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    def __neg__(self) -> "Sign":
        return Sign(-self.value)

    def __mul__(self, other: "Sign") -> "Sign":
        return Sign(self.value * int(other))


SBIOperand = Union["SBI", UBI, int]


# =============================================================================
# SBI
# =============================================================================


class SBI:
    """
    Signed big integer.

    Examples:
        >>> SBI.from_int(-7) // 2
        SBI(-3)
        >>> SBI.from_int(-7).div_floor(2)
        SBI(-4)
        >>> SBI.from_int(-7) >> 1
        SBI(-4)
    """

    __slots__ = ("_sign", "_magnitude")

    def __init__(self, sign: Sign, magnitude: UBI):
        """
        Args:
            sign: Знак; ZERO при ненулевой магнитуде даёт ноль
            magnitude: Абсолютное значение

        Нулевая магнитуда всегда даёт sign == ZERO.
        """
        sign = Sign(sign)
        if not isinstance(magnitude, UBI):
            raise TypeError(f"magnitude must be UBI, got {type(magnitude).__name__}")
        if sign is Sign.ZERO or magnitude.is_zero():
            sign = Sign.ZERO
            magnitude = UBI.zero()
        self._sign: Sign = sign
        self._magnitude: UBI = magnitude

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "SBI":
        return cls(Sign.ZERO, UBI.zero())

    @classmethod
    def one(cls) -> "SBI":
        return cls(Sign.POSITIVE, UBI.one())

    @classmethod
    def from_int(cls, value: int) -> "SBI":
        if value < 0:
            return cls(Sign.NEGATIVE, UBI.from_int(-value))
        return cls(Sign.POSITIVE, UBI.from_int(value))

    @classmethod
    def from_ubi(cls, magnitude: UBI) -> "SBI":
        return cls(Sign.POSITIVE, magnitude)

    @classmethod
    def from_str_radix(cls, text: str, radix: int = 10) -> "SBI":
        """
        Разбор строки с необязательным знаком '+' или '-'.

        Raises:
            ParseBigIntError: Пустая строка цифр или недопустимая цифра
        """
        sign = Sign.POSITIVE
        body = text
        if text[:1] == "-":
            sign = Sign.NEGATIVE
            body = text[1:]
        elif text[:1] == "+":
            body = text[1:]
        try:
            magnitude = UBI.from_str_radix(body, radix)
        except ParseBigIntError as e:
            raise ParseBigIntError(e.kind, text, radix) from e
        return cls(sign, magnitude)

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def magnitude(self) -> UBI:
        return self._magnitude

    def to_int(self) -> int:
        return self._sign.value * self._magnitude.to_int()

    def to_ubi(self) -> Optional[UBI]:
        """Магнитуда для неотрицательных значений, None для отрицательных."""
        if self._sign is Sign.NEGATIVE:
            return None
        return self._magnitude

    def to_str_radix(
        self, radix: int = 10, config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG
    ) -> str:
        text = self._magnitude.to_str_radix(radix, config)
        return "-" + text if self._sign is Sign.NEGATIVE else text

    def to_float(self) -> float:
        value = self._magnitude.to_float()
        return -value if self._sign is Sign.NEGATIVE else value

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    def is_zero(self) -> bool:
        return self._sign is Sign.ZERO

    def is_one(self) -> bool:
        return self._sign is Sign.POSITIVE and self._magnitude.is_one()

    def is_positive(self) -> bool:
        return self._sign is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self._sign is Sign.NEGATIVE

    def is_even(self) -> bool:
        return self._magnitude.is_even()

    def is_odd(self) -> bool:
        return self._magnitude.is_odd()

    def signum(self) -> "SBI":
        """-1, 0 или 1 как SBI."""
        return SBI(self._sign, UBI.one())

    def bit_length(self) -> int:
        """Длина магнитуды в битах (как int.bit_length)."""
        return self._magnitude.bit_length()

    def trailing_zeros(self) -> Optional[int]:
        return self._magnitude.trailing_zeros()

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    @staticmethod
    def _coerce(other: object) -> Optional["SBI"]:
        if isinstance(other, SBI):
            return other
        if isinstance(other, UBI):
            return SBI.from_ubi(other)
        if isinstance(other, int):
            return SBI.from_int(other)
        return None

    def _compare(self, other: object) -> Optional[int]:
        rhs = self._coerce(other)
        if rhs is None:
            return None
        if self._sign != rhs._sign:
            return -1 if self._sign < rhs._sign else 1
        result = compare_digits(self._magnitude.digits, rhs._magnitude.digits)
        # для отрицательных большая магнитуда означает меньшее значение
        return -result if self._sign is Sign.NEGATIVE else result

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result >= 0

    def __hash__(self) -> int:
        return hash(self.to_int())

    def __bool__(self) -> bool:
        return self._sign is not Sign.ZERO

    # =========================================================================
    # СЛОЖЕНИЕ / ВЫЧИТАНИЕ / УМНОЖЕНИЕ
    # =========================================================================

    @staticmethod
    def _add_parts(sign_a: Sign, mag_a: UBI, sign_b: Sign, mag_b: UBI) -> "SBI":
        if sign_b is Sign.ZERO:
            return SBI(sign_a, mag_a)
        if sign_a is Sign.ZERO:
            return SBI(sign_b, mag_b)
        if sign_a is sign_b:
            return SBI(sign_a, mag_a + mag_b)

        # разные знаки: меньшая магнитуда вычитается из большей
        order = compare_digits(mag_a.digits, mag_b.digits)
        if order == 0:
            return SBI.zero()
        if order > 0:
            return SBI(sign_a, mag_a - mag_b)
        return SBI(sign_b, mag_b - mag_a)

    def __add__(self, other: SBIOperand) -> "SBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add_parts(self._sign, self._magnitude, rhs._sign, rhs._magnitude)

    __radd__ = __add__

    def __sub__(self, other: SBIOperand) -> "SBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add_parts(self._sign, self._magnitude, -rhs._sign, rhs._magnitude)

    def __rsub__(self, other: SBIOperand) -> "SBI":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._add_parts(lhs._sign, lhs._magnitude, -self._sign, self._magnitude)

    def __mul__(self, other: SBIOperand) -> "SBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return SBI(self._sign * rhs._sign, self._magnitude * rhs._magnitude)

    __rmul__ = __mul__

    def __neg__(self) -> "SBI":
        return SBI(-self._sign, self._magnitude)

    def __pos__(self) -> "SBI":
        return self

    def __abs__(self) -> "SBI":
        return SBI.from_ubi(self._magnitude)

    def __invert__(self) -> "SBI":
        # ~x == -(x + 1)
        return -(self + 1)

    # =========================================================================
    # ДЕЛЕНИЕ
    # =========================================================================

    def div_rem(self, other: SBIOperand) -> tuple["SBI", "SBI"]:
        """
        Truncating деление: частное округляется к нулю, остаток имеет знак
        делимого; self == q * other + r, |r| < |other|.

        Raises:
            DivisionByZero: Если other == 0
        """
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"unsupported divisor type: {type(other).__name__}")
        quotient, remainder = self._magnitude.div_rem(rhs._magnitude)
        return (
            SBI(self._sign * rhs._sign, quotient),
            SBI(self._sign, remainder),
        )

    def div_mod_floor(self, other: SBIOperand) -> tuple["SBI", "SBI"]:
        """
        Floor деление: частное округляется к -inf, ненулевой остаток имеет
        знак делителя; self == q * other + r.

        Raises:
            DivisionByZero: Если other == 0
        """
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"unsupported divisor type: {type(other).__name__}")
        quotient, remainder = self.div_rem(rhs)
        if not remainder.is_zero() and remainder._sign is not rhs._sign:
            quotient = quotient - 1
            remainder = remainder + rhs
        return quotient, remainder

    def div_floor(self, other: SBIOperand) -> "SBI":
        return self.div_mod_floor(other)[0]

    def mod_floor(self, other: SBIOperand) -> "SBI":
        return self.div_mod_floor(other)[1]

    def __divmod__(self, other: SBIOperand) -> tuple["SBI", "SBI"]:
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_rem(other)

    def __rdivmod__(self, other: SBIOperand) -> tuple["SBI", "SBI"]:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.div_rem(self)

    def __floordiv__(self, other: SBIOperand) -> "SBI":
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_rem(other)[0]

    def __rfloordiv__(self, other: SBIOperand) -> "SBI":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.div_rem(self)[0]

    def __mod__(self, other: SBIOperand) -> "SBI":
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_rem(other)[1]

    def __rmod__(self, other: SBIOperand) -> "SBI":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.div_rem(self)[1]

    # =========================================================================
    # СТЕПЕНЬ И СДВИГИ
    # =========================================================================

    def pow(self, exponent: Union[UBI, int]) -> "SBI":
        """
        Raises:
            ContractViolation: Если exponent < 0
        """
        if isinstance(exponent, SBI):
            if exponent.is_negative():
                raise ContractViolation(f"exponent must be non-negative, got {exponent}")
            exponent = exponent.magnitude
        power = exponent if isinstance(exponent, UBI) else UBI.from_int(exponent)
        sign = self._sign
        if sign is Sign.NEGATIVE and power.is_even():
            sign = Sign.POSITIVE
        if power.is_zero():
            return SBI.one()
        return SBI(sign, self._magnitude.pow(power))

    def __pow__(self, exponent: Union[UBI, int], modulus: Optional[SBIOperand] = None) -> "SBI":
        if not isinstance(exponent, (SBI, UBI, int)):
            return NotImplemented
        if modulus is not None:
            return self.mod_pow(exponent, modulus)
        return self.pow(exponent)

    def __lshift__(self, bits: int) -> "SBI":
        if not isinstance(bits, int):
            return NotImplemented
        return SBI(self._sign, self._magnitude << bits)

    def __rshift__(self, bits: int) -> "SBI":
        """Арифметический сдвиг: floor(self / 2**bits)."""
        if not isinstance(bits, int):
            return NotImplemented
        shifted = self._magnitude >> bits
        if self._sign is Sign.NEGATIVE:
            # отброшенные единичные биты округляют отрицательное значение вниз
            if self._magnitude.trailing_zeros() < bits:
                shifted = shifted + 1
            return SBI(Sign.NEGATIVE, shifted)
        return SBI(self._sign, shifted)

    # =========================================================================
    # КОРНИ И МОДУЛЬНАЯ АРИФМЕТИКА
    # =========================================================================

    def sqrt(self) -> "SBI":
        from src.core.math.roots import isqrt

        return isqrt(self)

    def cbrt(self) -> "SBI":
        from src.core.math.roots import icbrt

        return icbrt(self)

    def nth_root(self, n: int) -> "SBI":
        from src.core.math.roots import nth_root

        return nth_root(self, n)

    def gcd(self, other: SBIOperand) -> "SBI":
        from src.core.math.modular import gcd

        return gcd(self, self._coerce(other))

    def lcm(self, other: SBIOperand) -> "SBI":
        from src.core.math.modular import lcm

        return lcm(self, self._coerce(other))

    def extended_gcd(self, other: SBIOperand) -> tuple["SBI", "SBI", "SBI"]:
        from src.core.math.modular import extended_gcd

        return extended_gcd(self, self._coerce(other))

    def mod_pow(self, exponent: SBIOperand, modulus: SBIOperand) -> "SBI":
        from src.core.math.modular import mod_pow

        return mod_pow(self, exponent, self._coerce(modulus))

    def mod_inverse(self, modulus: SBIOperand) -> Optional["SBI"]:
        from src.core.math.modular import mod_inverse

        return mod_inverse(self, self._coerce(modulus))

    # =========================================================================
    # ПРОТОКОЛ ЧИСЕЛ PYTHON
    # =========================================================================

    def __int__(self) -> int:
        return self.to_int()

    __index__ = __int__

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return self.to_str_radix(10)

    def __repr__(self) -> str:
        return f"SBI({self})"

    def __copy__(self) -> "SBI":
        return self

    def __deepcopy__(self, memo: dict) -> "SBI":
        return self
