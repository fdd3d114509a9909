"""
Numeric Traits — минимальный полиморфный фасад над UBI/SBI/int

Функции, через которые обобщённый код работает с любым целым типом
библиотеки, не зная конкретного класса:
- zero/one: нейтральные элементы заданного типа
- is_zero/is_one/is_positive/is_negative/signum: предикаты знака
- magnitude: беззнаковое абсолютное значение
- validate_non_negative/validate_nonzero: проверки предусловий с
  единообразными сообщениями об ошибках

Ни одна функция не меняет аргументы.
"""

from typing import Type, TypeVar, Union

from src.core.bigint.errors import ContractViolation, DivisionByZero
from src.core.bigint.sbi import SBI
from src.core.bigint.ubi import UBI

BigInteger = Union[UBI, SBI]
IntegerLike = Union[UBI, SBI, int]

T = TypeVar("T", UBI, SBI)


# =============================================================================
# НЕЙТРАЛЬНЫЕ ЭЛЕМЕНТЫ
# =============================================================================


def zero(kind: Type[T]) -> T:
    """
    Аддитивный нейтральный элемент типа kind.

    Examples:
        >>> zero(UBI)
        UBI(0)
    """
    return kind.zero()


def one(kind: Type[T]) -> T:
    """Мультипликативный нейтральный элемент типа kind."""
    return kind.one()


# =============================================================================
# ПРЕДИКАТЫ ЗНАКА
# =============================================================================


def is_zero(value: IntegerLike) -> bool:
    if isinstance(value, (UBI, SBI)):
        return value.is_zero()
    return value == 0


def is_one(value: IntegerLike) -> bool:
    if isinstance(value, (UBI, SBI)):
        return value.is_one()
    return value == 1


def is_positive(value: IntegerLike) -> bool:
    """True для значений > 0."""
    if isinstance(value, UBI):
        return not value.is_zero()
    if isinstance(value, SBI):
        return value.is_positive()
    return value > 0


def is_negative(value: IntegerLike) -> bool:
    """True для значений < 0; UBI никогда не отрицателен."""
    if isinstance(value, UBI):
        return False
    if isinstance(value, SBI):
        return value.is_negative()
    return value < 0


def signum(value: IntegerLike) -> int:
    """
    Знак значения как int.

    Returns:
        -1, 0 или +1
    """
    if is_negative(value):
        return -1
    if is_zero(value):
        return 0
    return 1


def magnitude(value: IntegerLike) -> UBI:
    """Абсолютное значение как UBI."""
    if isinstance(value, UBI):
        return value
    if isinstance(value, SBI):
        return value.magnitude
    return UBI.from_int(abs(value))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: IntegerLike, name: str) -> None:
    """
    Raises:
        ContractViolation: Если value < 0
    """
    if is_negative(value):
        raise ContractViolation(f"{name} must be non-negative, got {value}")


def validate_nonzero(value: IntegerLike, name: str) -> None:
    """
    Raises:
        DivisionByZero: Если value == 0
    """
    if is_zero(value):
        raise DivisionByZero(f"{name} must be nonzero")
