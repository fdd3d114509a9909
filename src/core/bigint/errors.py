"""
Big Integer Errors — таксономия ошибок арифметического ядра

Четыре класса исходов для частичных операций:
- ContractViolation: вызов примитива вне его предусловия (ошибка программиста)
- DivisionByZero: нулевой делитель или модуль (восстановимая ошибка)
- DecodingError: невалидный вход кодека (radix-строка или wire-формат)
- Отсутствие результата (нет обратного по модулю, переполнение fixed-width)
  НЕ является исключением и возвращается как None

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. DecodingError никогда не мутирует целевое значение (значения immutable)
2. ContractViolation не перехватывается внутри библиотеки
"""

from enum import Enum


# =============================================================================
# BASE
# =============================================================================


class BigIntError(Exception):
    """Базовый класс всех ошибок big-integer библиотеки."""

    pass


# =============================================================================
# CONTRACT / ARITHMETIC
# =============================================================================


class ContractViolation(BigIntError, ArithmeticError):
    """
    Нарушение предусловия примитива.

    Примеры:
    - беззнаковое вычитание при minuend < subtrahend
    - отрицательный показатель в модульном возведении в степень
    - квадратный корень из отрицательного значения
    - основание системы счисления вне [2, 36]

    Это ошибка программиста: библиотека не пытается восстановиться.
    """

    pass


class DivisionByZero(BigIntError, ZeroDivisionError):
    """
    Деление или взятие остатка по нулевому делителю/модулю.

    Наследует ZeroDivisionError, поэтому совместим с обычным
    `except ZeroDivisionError` на стороне вызывающего кода.
    """

    pass


# =============================================================================
# DECODING
# =============================================================================


class DecodingError(BigIntError, ValueError):
    """
    Невалидный сериализованный вход.

    Неверная структура wire-формата, слово вне диапазона, лишние или
    недостающие токены. Исходная причина (jsonschema/pydantic) доступна
    через __cause__.
    """

    pass


class ParseErrorKind(str, Enum):
    """Причина ошибки разбора radix-строки."""

    EMPTY = "EMPTY"
    INVALID_DIGIT = "INVALID_DIGIT"


class ParseBigIntError(DecodingError):
    """
    Ошибка разбора строки цифр в заданной системе счисления.

    Attributes:
        kind: EMPTY (нет ни одной цифры) или INVALID_DIGIT
        text: Исходная строка
        radix: Основание системы счисления
    """

    def __init__(self, kind: ParseErrorKind, text: str, radix: int):
        self.kind = kind
        self.text = text
        self.radix = radix
        if kind is ParseErrorKind.EMPTY:
            message = f"cannot parse integer from empty string (radix {radix})"
        else:
            message = f"invalid digit found in string {text!r} (radix {radix})"
        super().__init__(message)
