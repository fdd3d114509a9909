"""
Core math modules для UBI/SBI

Числовые трейты, модульная арифметика и целочисленные корни.
"""

# Numeric traits
from src.core.math.numeric_traits import (
    is_negative,
    is_one,
    is_positive,
    is_zero,
    magnitude,
    one,
    signum,
    validate_non_negative,
    validate_nonzero,
    zero,
)

# Modular arithmetic
from src.core.math.modular import (
    extended_gcd,
    gcd,
    lcm,
    mod_inverse,
    mod_pow,
)

# Roots
from src.core.math.roots import (
    icbrt,
    is_perfect_power,
    isqrt,
    nth_root,
)

__all__ = [
    # Numeric traits
    "is_negative",
    "is_one",
    "is_positive",
    "is_zero",
    "magnitude",
    "one",
    "signum",
    "validate_non_negative",
    "validate_nonzero",
    "zero",
    # Modular arithmetic
    "extended_gcd",
    "gcd",
    "lcm",
    "mod_inverse",
    "mod_pow",
    # Roots
    "icbrt",
    "is_perfect_power",
    "isqrt",
    "nth_root",
]
