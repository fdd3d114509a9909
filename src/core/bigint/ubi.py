"""
UBI — беззнаковое целое произвольной точности

Immutable value-тип поверх DigitVector. Каждая операция возвращает новое
значение; вектор слов хранится как tuple и не может быть изменён извне.

Поддерживает протокол чисел Python: + - * // % divmod ** << >> & | ^,
сравнения, hash (совпадает с hash равного int), int(), float(), str().
Операнд-int принимается с любой стороны, если он неотрицателен.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. _digits всегда нормализован (ноль = пустой tuple)
2. a - b при a < b → ContractViolation (не отрицательный результат)
3. Деление/остаток по нулю → DivisionByZero
"""

from typing import Iterable, Optional, Union

from src.core.bigint.config import DEFAULT_ARITHMETIC_CONFIG, DIGIT_MASK, ArithmeticConfig
from src.core.bigint.digits import (
    add_digits,
    and_digits,
    bit_at_digits,
    bit_length_digits,
    compare_digits,
    count_ones_digits,
    digits_from_int,
    digits_to_int,
    divrem_digits,
    mul_digits,
    normalize,
    or_digits,
    pow_digits,
    shl_digits,
    shr_digits,
    sub_digits,
    trailing_zeros_digits,
    xor_digits,
)
from src.core.bigint.errors import ContractViolation
from src.core.bigint.radix import format_digits, parse_digits


class UBI:
    """
    Unsigned big integer.

    Examples:
        >>> UBI.from_int(2**64) + 1
        UBI(18446744073709551617)
        >>> UBI([0, 1]).to_int()
        4294967296
    """

    __slots__ = ("_digits",)

    def __init__(self, digits: Iterable[int] = ()):
        """
        Args:
            digits: 32-битные слова, младшее первым; старшие нули допустимы

        Raises:
            ContractViolation: Если слово вне [0, 2**32)
        """
        words = list(digits)
        for word in words:
            if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= DIGIT_MASK:
                raise ContractViolation(f"digit word must be in [0, 2**32), got {word!r}")
        self._digits: tuple[int, ...] = tuple(normalize(words))

    @classmethod
    def _wrap(cls, digits: list[int]) -> "UBI":
        # digits уже нормализован примитивом DigitVector
        obj = cls.__new__(cls)
        obj._digits = tuple(digits)
        return obj

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "UBI":
        return cls._wrap([])

    @classmethod
    def one(cls) -> "UBI":
        return cls._wrap([1])

    @classmethod
    def from_int(cls, value: int) -> "UBI":
        """
        Raises:
            ContractViolation: Если value < 0
        """
        return cls._wrap(digits_from_int(value))

    @classmethod
    def from_str_radix(cls, text: str, radix: int = 10) -> "UBI":
        """
        Разбор строки цифр. Знак не допускается.

        Raises:
            ParseBigIntError: Пустая строка или недопустимая цифра
        """
        return cls._wrap(parse_digits(text, radix))

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    @property
    def digits(self) -> tuple[int, ...]:
        """Нормализованные 32-битные слова, младшее первым."""
        return self._digits

    def to_int(self) -> int:
        return digits_to_int(self._digits)

    def to_str_radix(
        self, radix: int = 10, config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG
    ) -> str:
        return format_digits(self._digits, radix, config)

    def to_float(self) -> float:
        from src.core.bigint.conversion import digits_to_float

        return digits_to_float(self._digits)

    # =========================================================================
    # ПРЕДИКАТЫ И БИТЫ
    # =========================================================================

    def is_zero(self) -> bool:
        return not self._digits

    def is_one(self) -> bool:
        return self._digits == (1,)

    def is_even(self) -> bool:
        return not self._digits or self._digits[0] & 1 == 0

    def is_odd(self) -> bool:
        return not self.is_even()

    def bit_length(self) -> int:
        return bit_length_digits(self._digits)

    def trailing_zeros(self) -> Optional[int]:
        """Количество младших нулевых битов; None для нуля."""
        return trailing_zeros_digits(self._digits)

    def count_ones(self) -> int:
        return count_ones_digits(self._digits)

    def bit(self, position: int) -> bool:
        return bit_at_digits(self._digits, position)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def _compare(self, other: object) -> Optional[int]:
        if isinstance(other, UBI):
            return compare_digits(self._digits, other._digits)
        if isinstance(other, int):
            if other < 0:
                return 1
            return compare_digits(self._digits, digits_from_int(other))
        return None

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
        return bool(self._digits)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    @staticmethod
    def _coerce(other: object) -> Optional["UBI"]:
        if isinstance(other, UBI):
            return other
        if isinstance(other, int):
            return UBI.from_int(other)
        return None

    def __add__(self, other: Union["UBI", int]) -> "UBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return UBI._wrap(add_digits(self._digits, rhs._digits))

    __radd__ = __add__

    def __sub__(self, other: Union["UBI", int]) -> "UBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return UBI._wrap(sub_digits(self._digits, rhs._digits))

    def __rsub__(self, other: int) -> "UBI":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return UBI._wrap(sub_digits(lhs._digits, self._digits))

    def __mul__(self, other: Union["UBI", int]) -> "UBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return UBI._wrap(mul_digits(self._digits, rhs._digits))

    __rmul__ = __mul__

    def mul(self, other: "UBI", config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG) -> "UBI":
        """Умножение с явной конфигурацией алгоритма."""
        return UBI._wrap(mul_digits(self._digits, other._digits, config))

    def div_rem(self, other: Union["UBI", int]) -> tuple["UBI", "UBI"]:
        """
        Деление с остатком: self = q * other + r, 0 <= r < other.

        Raises:
            DivisionByZero: Если other == 0
        """
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"unsupported divisor type: {type(other).__name__}")
        quotient, remainder = divrem_digits(self._digits, rhs._digits)
        return UBI._wrap(quotient), UBI._wrap(remainder)

    def __divmod__(self, other: Union["UBI", int]) -> tuple["UBI", "UBI"]:
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_rem(other)

    def __rdivmod__(self, other: int) -> tuple["UBI", "UBI"]:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.div_rem(self)

    def __floordiv__(self, other: Union["UBI", int]) -> "UBI":
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_rem(other)[0]

    def __rfloordiv__(self, other: int) -> "UBI":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.div_rem(self)[0]

    def __mod__(self, other: Union["UBI", int]) -> "UBI":
        if self._coerce(other) is None:
            return NotImplemented
        return self.div_rem(other)[1]

    def __rmod__(self, other: int) -> "UBI":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.div_rem(self)[1]

    # Для беззнакового типа floor- и truncating-деление совпадают
    def div_floor(self, other: Union["UBI", int]) -> "UBI":
        return self.div_rem(other)[0]

    def mod_floor(self, other: Union["UBI", int]) -> "UBI":
        return self.div_rem(other)[1]

    def div_mod_floor(self, other: Union["UBI", int]) -> tuple["UBI", "UBI"]:
        return self.div_rem(other)

    def pow(self, exponent: Union["UBI", int]) -> "UBI":
        """
        Возведение в степень; exponent == 0 даёт 1 (включая 0 ** 0).

        Raises:
            ContractViolation: Если exponent < 0
        """
        power = self._coerce(exponent)
        if power is None:
            raise TypeError(f"unsupported exponent type: {type(exponent).__name__}")
        return UBI._wrap(pow_digits(self._digits, power._digits))

    def __pow__(self, exponent: Union["UBI", int], modulus: Union["UBI", int, None] = None) -> "UBI":
        if self._coerce(exponent) is None:
            return NotImplemented
        if modulus is not None:
            return self.mod_pow(exponent, modulus)
        return self.pow(exponent)

    def __rpow__(self, base: int) -> "UBI":
        lhs = self._coerce(base)
        if lhs is None:
            return NotImplemented
        return lhs.pow(self)

    # =========================================================================
    # СДВИГИ И ПОБИТОВЫЕ ОПЕРАЦИИ
    # =========================================================================

    def __lshift__(self, bits: int) -> "UBI":
        if not isinstance(bits, int):
            return NotImplemented
        return UBI._wrap(shl_digits(self._digits, bits))

    def __rshift__(self, bits: int) -> "UBI":
        if not isinstance(bits, int):
            return NotImplemented
        return UBI._wrap(shr_digits(self._digits, bits))

    def __and__(self, other: Union["UBI", int]) -> "UBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return UBI._wrap(and_digits(self._digits, rhs._digits))

    __rand__ = __and__

    def __or__(self, other: Union["UBI", int]) -> "UBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return UBI._wrap(or_digits(self._digits, rhs._digits))

    __ror__ = __or__

    def __xor__(self, other: Union["UBI", int]) -> "UBI":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return UBI._wrap(xor_digits(self._digits, rhs._digits))

    __rxor__ = __xor__

    # =========================================================================
    # КОРНИ И МОДУЛЬНАЯ АРИФМЕТИКА
    # =========================================================================

    def sqrt(self) -> "UBI":
        from src.core.math.roots import isqrt

        return isqrt(self)

    def cbrt(self) -> "UBI":
        from src.core.math.roots import icbrt

        return icbrt(self)

    def nth_root(self, n: int) -> "UBI":
        from src.core.math.roots import nth_root

        return nth_root(self, n)

    def gcd(self, other: "UBI") -> "UBI":
        from src.core.math.modular import gcd

        return gcd(self, other)

    def lcm(self, other: "UBI") -> "UBI":
        from src.core.math.modular import lcm

        return lcm(self, other)

    def mod_pow(self, exponent: Union["UBI", int], modulus: Union["UBI", int]) -> "UBI":
        from src.core.math.modular import mod_pow

        return mod_pow(self, exponent, modulus)

    def mod_inverse(self, modulus: Union["UBI", int]) -> Optional["UBI"]:
        from src.core.math.modular import mod_inverse

        return mod_inverse(self, modulus)

    # =========================================================================
    # ПРОТОКОЛ ЧИСЕЛ PYTHON
    # =========================================================================

    def __int__(self) -> int:
        return self.to_int()

    __index__ = __int__

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        return format_digits(self._digits, 10)

    def __repr__(self) -> str:
        return f"UBI({self})"

    def __copy__(self) -> "UBI":
        return self

    def __deepcopy__(self, memo: dict) -> "UBI":
        return self
