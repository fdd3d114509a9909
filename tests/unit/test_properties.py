"""
Property-based тесты (hypothesis) против встроенного int

Проверяет:
1. Кольцевые операции UBI/SBI совпадают с int
2. Тождества деления (truncating и floor)
3. Сдвиги совпадают с int (арифметический >> для отрицательных)
4. mod_pow совпадает с наивным square-and-multiply на mod_floor
5. mod_inverse: диапазон и None ровно при gcd != 1
6. Корни: (a*a).sqrt() == a, (a**3).cbrt() == a
7. Radix и wire-кодеки восстанавливают значение
"""

import math

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from src.core.bigint import SBI, UBI, ArithmeticConfig
from src.core.bigint.conversion import sbi_from_float
from src.core.contracts.serialization import (
    deserialize_sbi,
    deserialize_ubi,
    sbi_from_wire,
    serialize_sbi,
    serialize_ubi,
    to_wire,
    ubi_from_wire,
)
from src.core.math.modular import mod_inverse, mod_pow

naturals = st.integers(min_value=0, max_value=2**600)
integers = st.integers(min_value=-(2**600), max_value=2**600)
nonzero = integers.filter(lambda x: x != 0)
radices = st.integers(min_value=2, max_value=36)
shift_counts = st.integers(min_value=0, max_value=200)


def naive_mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Эталон: square-and-multiply с floor-редукцией."""
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


class TestRingProperties:
    """Кольцевые операции против int"""

    @given(naturals, naturals)
    def test_ubi_add_mul(self, a: int, b: int) -> None:
        x, y = UBI.from_int(a), UBI.from_int(b)
        assert (x + y).to_int() == a + b
        assert (x * y).to_int() == a * b

    @given(naturals, naturals)
    def test_ubi_sub(self, a: int, b: int) -> None:
        big, small = max(a, b), min(a, b)
        assert (UBI.from_int(big) - UBI.from_int(small)).to_int() == big - small

    @given(integers, integers)
    def test_sbi_ring(self, a: int, b: int) -> None:
        x, y = SBI.from_int(a), SBI.from_int(b)
        assert (x + y).to_int() == a + b
        assert (x - y).to_int() == a - b
        assert (x * y).to_int() == a * b

    @settings(max_examples=25, deadline=None)
    @given(
        st.integers(min_value=0, max_value=2**6000),
        st.integers(min_value=0, max_value=2**6000),
        st.integers(min_value=2, max_value=64),
    )
    def test_mul_independent_of_cutoff(self, a: int, b: int, cutoff: int) -> None:
        config = ArithmeticConfig(karatsuba_cutoff=cutoff)
        assert UBI.from_int(a).mul(UBI.from_int(b), config).to_int() == a * b


class TestDivisionProperties:
    """Тождества деления"""

    @given(naturals, naturals.filter(lambda x: x != 0))
    def test_ubi_div_rem(self, a: int, b: int) -> None:
        quotient, remainder = UBI.from_int(a).div_rem(UBI.from_int(b))
        assert (quotient.to_int(), remainder.to_int()) == divmod(a, b)

    @given(integers, nonzero)
    def test_sbi_truncating_identity(self, a: int, b: int) -> None:
        quotient, remainder = SBI.from_int(a).div_rem(SBI.from_int(b))
        q, r = quotient.to_int(), remainder.to_int()
        assert q * b + r == a
        assert abs(r) < abs(b)
        assert r == 0 or (r < 0) == (a < 0)

    @given(integers, nonzero)
    def test_sbi_floor_matches_python(self, a: int, b: int) -> None:
        quotient, remainder = SBI.from_int(a).div_mod_floor(SBI.from_int(b))
        assert (quotient.to_int(), remainder.to_int()) == divmod(a, b)


class TestShiftProperties:
    """Сдвиги против int"""

    @given(integers, shift_counts)
    def test_shifts_match_int(self, a: int, bits: int) -> None:
        value = SBI.from_int(a)
        assert (value << bits).to_int() == a << bits
        assert (value >> bits).to_int() == a >> bits

    @given(st.integers(min_value=-(2**63), max_value=2**63 - 1), st.integers(0, 63))
    def test_i64_shift_right(self, a: int, bits: int) -> None:
        assert (SBI.from_int(a) >> bits).to_int() == a >> bits

    @given(st.integers(min_value=0, max_value=2**64 - 1), st.integers(0, 63))
    def test_u64_shift_right(self, a: int, bits: int) -> None:
        assert (UBI.from_int(a) >> bits).to_int() == a >> bits


class TestModularProperties:
    """Модульная арифметика"""

    @settings(deadline=None)
    @given(integers, st.integers(min_value=0, max_value=2**80), nonzero)
    def test_mod_pow_matches_naive(self, base: int, exponent: int, modulus: int) -> None:
        result = mod_pow(SBI.from_int(base), exponent, SBI.from_int(modulus))
        assert result.to_int() == naive_mod_pow(base, exponent, modulus)

    @given(integers, nonzero)
    def test_mod_inverse(self, value: int, modulus: int) -> None:
        inverse = mod_inverse(SBI.from_int(value), SBI.from_int(modulus))
        if math.gcd(value, modulus) != 1:
            assert inverse is None
            return
        inv = inverse.to_int()
        assert (value * inv - 1) % modulus == 0
        if modulus > 0:
            assert 0 <= inv < modulus
        else:
            assert modulus < inv <= 0

    @given(naturals, naturals)
    def test_gcd_divides_both(self, a: int, b: int) -> None:
        assume(a or b)
        g = UBI.from_int(a).gcd(UBI.from_int(b)).to_int()
        assert g == math.gcd(a, b)


class TestRootProperties:
    """Корни"""

    @settings(deadline=None)
    @given(naturals)
    def test_sqrt_of_square(self, a: int) -> None:
        assert (UBI.from_int(a) * UBI.from_int(a)).sqrt().to_int() == a

    @settings(deadline=None)
    @given(integers)
    def test_cbrt_of_cube(self, a: int) -> None:
        value = SBI.from_int(a)
        assert value.pow(3).cbrt() == value

    @given(naturals)
    def test_sqrt_floor(self, a: int) -> None:
        assert UBI.from_int(a).sqrt().to_int() == math.isqrt(a)


class TestCodecProperties:
    """Кодеки восстанавливают значение"""

    @given(integers, radices)
    def test_radix_roundtrip(self, a: int, radix: int) -> None:
        value = SBI.from_int(a)
        text = value.to_str_radix(radix)
        assert SBI.from_str_radix(text, radix) == value
        assert int(text, radix) == a

    @given(naturals)
    def test_ubi_tokens_and_wire(self, a: int) -> None:
        value = UBI.from_int(a)
        assert deserialize_ubi(serialize_ubi(value)) == value
        assert ubi_from_wire(to_wire(value)) == value

    @given(integers)
    def test_sbi_tokens_and_wire(self, a: int) -> None:
        value = SBI.from_int(a)
        assert deserialize_sbi(serialize_sbi(value)) == value
        assert sbi_from_wire(to_wire(value)) == value

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_float_truncation(self, x: float) -> None:
        assert sbi_from_float(x).to_int() == int(x)

    @given(integers)
    def test_to_float_matches_builtin(self, a: int) -> None:
        assert SBI.from_int(a).to_float() == float(a)
