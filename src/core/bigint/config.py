"""
Arithmetic configuration — константы представления и настройки алгоритмов

Конфигурация задаётся в коде: Final-константы формата слова и frozen
dataclass с настройками, которые влияют только на производительность
(точка переключения на Karatsuba) или на внешний вид (регистр букв radix).
Результаты арифметики НЕ зависят от конфигурации.
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# ФОРМАТ СЛОВА (DigitVector)
# =============================================================================

# Ширина слова магнитуды. Wire-формат фиксирован на 32-битных словах,
# поэтому внутреннее представление совпадает с ним.
DIGIT_BITS: Final[int] = 32
DIGIT_BASE: Final[int] = 1 << DIGIT_BITS
DIGIT_MASK: Final[int] = DIGIT_BASE - 1

# =============================================================================
# RADIX
# =============================================================================

MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36

# =============================================================================
# ALGORITHM TUNING
# =============================================================================

# Минимальная длина (в словах) меньшего множителя для Karatsuba
KARATSUBA_CUTOFF_DEFAULT: Final[int] = 40


@dataclass(frozen=True)
class ArithmeticConfig:
    """Настройки алгоритмов ядра.

    - karatsuba_cutoff: длина меньшего операнда (в словах), начиная с которой
      умножение переходит со schoolbook на Karatsuba
    - uppercase_radix_digits: регистр букв при форматировании в radix > 10
    """

    karatsuba_cutoff: int = KARATSUBA_CUTOFF_DEFAULT
    uppercase_radix_digits: bool = False

    def __post_init__(self) -> None:
        # Karatsuba делит операнды пополам; меньше 2 слов делить нечего
        if self.karatsuba_cutoff < 2:
            raise ValueError(
                f"karatsuba_cutoff must be >= 2, got {self.karatsuba_cutoff}"
            )


DEFAULT_ARITHMETIC_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()
