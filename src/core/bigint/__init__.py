"""
Arbitrary-precision integers: UBI (беззнаковые) и SBI (знаковые).

Значения неизменяемы; магнитуда хранится как нормализованный вектор
32-битных слов, младшее слово первым.
"""

from src.core.bigint.config import (
    DEFAULT_ARITHMETIC_CONFIG,
    DIGIT_BITS,
    MAX_RADIX,
    MIN_RADIX,
    ArithmeticConfig,
)
from src.core.bigint.errors import (
    BigIntError,
    ContractViolation,
    DecodingError,
    DivisionByZero,
    ParseBigIntError,
    ParseErrorKind,
)
from src.core.bigint.ubi import UBI
from src.core.bigint.sbi import SBI, Sign

__all__ = [
    # Config
    "DEFAULT_ARITHMETIC_CONFIG",
    "DIGIT_BITS",
    "MAX_RADIX",
    "MIN_RADIX",
    "ArithmeticConfig",
    # Errors
    "BigIntError",
    "ContractViolation",
    "DecodingError",
    "DivisionByZero",
    "ParseBigIntError",
    "ParseErrorKind",
    # Types
    "UBI",
    "SBI",
    "Sign",
]
