"""
DigitVector — каноническое хранение беззнаковых магнитуд

Магнитуда хранится как последовательность 32-битных слов, младшее слово
первым. Модуль содержит все примитивы над векторами слов, которые используют
UBI и SBI:
- Нормализация (удаление старших нулевых слов)
- Сложение/вычитание с переносом/заёмом
- Умножение (schoolbook + Karatsuba)
- Деление с остатком (однословное и Knuth, Algorithm D)
- Битовые сдвиги, побитовые операции, счётчики битов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат каждой функции нормализован: нет старших нулевых слов,
   ноль = пустой вектор
2. Каждое слово в [0, DIGIT_BASE)
3. Входные векторы никогда не мутируются; in-place helper _add_into
   работает только со списками, созданными внутри этого модуля
4. Длина нормализованного вектора монотонна по величине, поэтому
   compare_digits сравнивает сначала длины
"""

from typing import Sequence

from src.core.bigint.config import (
    DEFAULT_ARITHMETIC_CONFIG,
    DIGIT_BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    ArithmeticConfig,
)
from src.core.bigint.errors import ContractViolation, DivisionByZero

Digits = Sequence[int]


# =============================================================================
# НОРМАЛИЗАЦИЯ И КОНВЕРСИЯ
# =============================================================================


def normalize(digits: list[int]) -> list[int]:
    """
    Удаление старших (хвостовых) нулевых слов.

    Мутирует и возвращает переданный список. Вызывается только для списков,
    которыми владеет вызывающий код.

    Examples:
        >>> normalize([1, 2, 0, 0])
        [1, 2]
        >>> normalize([0, 0])
        []
    """
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def digits_from_int(value: int) -> list[int]:
    """
    Разложение неотрицательного int на 32-битные слова.

    Raises:
        ContractViolation: Если value < 0
    """
    if value < 0:
        raise ContractViolation(f"magnitude must be non-negative, got {value}")
    digits = []
    while value:
        digits.append(value & DIGIT_MASK)
        value >>= DIGIT_BITS
    return digits


def digits_to_int(digits: Digits) -> int:
    """Сборка int из слов (младшее первым)."""
    value = 0
    for word in reversed(digits):
        value = (value << DIGIT_BITS) | word
    return value


def compare_digits(a: Digits, b: Digits) -> int:
    """
    Сравнение двух нормализованных векторов.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_digits(a: Digits, b: Digits) -> list[int]:
    """
    Сложение магнитуд с распространением переноса.

    Длина результата не больше max(len(a), len(b)) + 1.
    """
    if len(a) < len(b):
        a, b = b, a
    size_a = len(a)
    size_b = len(b)

    z = [0] * (size_a + 1)
    carry = 0
    i = 0
    while i < size_b:
        carry += a[i] + b[i]
        z[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
        i += 1
    while i < size_a:
        carry += a[i]
        z[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
        i += 1
    z[i] = carry
    return normalize(z)


def sub_digits(a: Digits, b: Digits) -> list[int]:
    """
    Вычитание магнитуд a - b с распространением заёма.

    Предусловие a >= b обеспечивает вызывающий (знаковый слой
    упорядочивает операнды). Нарушение обнаруживается по остаточному заёму.

    Raises:
        ContractViolation: Если a < b
    """
    size_a = len(a)
    size_b = len(b)
    if size_b > size_a:
        raise ContractViolation("cannot subtract a larger magnitude from a smaller one")

    z = [0] * size_a
    borrow = 0
    i = 0
    while i < size_b:
        diff = a[i] - b[i] - borrow
        z[i] = diff & DIGIT_MASK
        borrow = 1 if diff < 0 else 0
        i += 1
    while i < size_a:
        diff = a[i] - borrow
        z[i] = diff & DIGIT_MASK
        borrow = 1 if diff < 0 else 0
        i += 1

    if borrow:
        raise ContractViolation("cannot subtract a larger magnitude from a smaller one")
    return normalize(z)


def _add_into(z: list[int], offset: int, x: Digits) -> None:
    """In-place z[offset:] += x. z принадлежит вызывающему и имеет запас слов."""
    carry = 0
    i = 0
    size_x = len(x)
    k = offset
    while i < size_x:
        carry += z[k] + x[i]
        z[k] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
        i += 1
        k += 1
    while carry:
        carry += z[k]
        z[k] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
        k += 1


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul_digit(a: Digits, multiplier: int, addend: int = 0) -> list[int]:
    """
    a * multiplier + addend для однословных multiplier и addend.

    Используется radix-парсером (накопление чанков) и умножением на слово.
    """
    z = [0] * (len(a) + 1)
    carry = addend
    for i, word in enumerate(a):
        carry += word * multiplier
        z[i] = carry & DIGIT_MASK
        carry >>= DIGIT_BITS
    z[len(a)] = carry
    return normalize(z)


def _schoolbook_mul(a: Digits, b: Digits) -> list[int]:
    """Умножение столбиком, O(len(a) * len(b))."""
    size_b = len(b)
    z = [0] * (len(a) + size_b)
    for i, ai in enumerate(a):
        if ai == 0:
            continue
        carry = 0
        k = i
        for bj in b:
            carry += z[k] + ai * bj
            z[k] = carry & DIGIT_MASK
            carry >>= DIGIT_BITS
            k += 1
        # позиция i + size_b ещё не заполнена предыдущими строками
        z[k] = carry
    return normalize(z)


def _split(digits: Digits, size: int) -> tuple[list[int], list[int]]:
    """digits == hi * BASE**size + lo; обе части нормализованы."""
    lo = normalize(list(digits[:size]))
    hi = normalize(list(digits[size:]))
    return hi, lo


def _karatsuba_mul(a: Digits, b: Digits, config: ArithmeticConfig) -> list[int]:
    """
    Karatsuba: три умножения половинного размера вместо четырёх.

    (ah*X + al)(bh*X + bl) = ah*bh*X^2 + ((ah+al)(bh+bl) - ah*bh - al*bl)*X + al*bl

    Требует len(a) <= len(b).
    """
    size_a = len(a)
    size_b = len(b)

    if size_a < config.karatsuba_cutoff:
        return _schoolbook_mul(a, b)

    if 2 * size_a <= size_b:
        return _lopsided_mul(a, b, config)

    shift = size_b >> 1
    ah, al = _split(a, shift)
    bh, bl = _split(b, shift)

    high = mul_digits(ah, bh, config)
    low = mul_digits(al, bl, config)
    middle = mul_digits(add_digits(ah, al), add_digits(bh, bl), config)
    middle = sub_digits(sub_digits(middle, high), low)

    z = [0] * (size_a + size_b + 1)
    _add_into(z, 0, low)
    _add_into(z, shift, middle)
    _add_into(z, 2 * shift, high)
    return normalize(z)


def _lopsided_mul(a: Digits, b: Digits, config: ArithmeticConfig) -> list[int]:
    """b как минимум вдвое длиннее a: режем b на куски длины len(a)."""
    size_a = len(a)
    z = [0] * (size_a + len(b) + 1)
    for start in range(0, len(b), size_a):
        chunk = normalize(list(b[start:start + size_a]))
        if chunk:
            _add_into(z, start, mul_digits(a, chunk, config))
    return normalize(z)


def mul_digits(
    a: Digits,
    b: Digits,
    config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
) -> list[int]:
    """
    Точное произведение магнитуд.

    Выбор алгоритма (schoolbook / Karatsuba) зависит только от размеров и
    config.karatsuba_cutoff; результат бит-в-бит одинаков.
    """
    if not a or not b:
        return []
    if len(a) > len(b):
        a, b = b, a
    if len(a) == 1:
        return mul_digit(b, a[0])
    if len(a) < config.karatsuba_cutoff:
        return _schoolbook_mul(a, b)
    return _karatsuba_mul(a, b, config)


def pow_digits(
    base: Digits,
    exponent: Digits,
    config: ArithmeticConfig = DEFAULT_ARITHMETIC_CONFIG,
) -> list[int]:
    """
    Возведение в степень повторным возведением в квадрат.

    Показатель задан вектором слов; нулевой показатель даёт 1 (в том числе
    для нулевого основания).
    """
    if not exponent:
        return [1]
    if not base:
        return []

    result = [1]
    square = list(base)
    total_bits = bit_length_digits(exponent)
    for position in range(total_bits):
        if (exponent[position // DIGIT_BITS] >> (position % DIGIT_BITS)) & 1:
            result = mul_digits(result, square, config)
        if position + 1 < total_bits:
            square = mul_digits(square, square, config)
    return result


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divrem_digit(a: Digits, divisor: int) -> tuple[list[int], int]:
    """
    Деление магнитуды на одно слово.

    Returns:
        (quotient, remainder), remainder — int в [0, divisor)

    Raises:
        DivisionByZero: Если divisor == 0
    """
    if divisor == 0:
        raise DivisionByZero("division by zero")
    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        current = (remainder << DIGIT_BITS) | a[i]
        quotient[i], remainder = divmod(current, divisor)
    return normalize(quotient), remainder


def _shl_bits_extended(a: Digits, shift: int) -> list[int]:
    """a << shift (0 <= shift < DIGIT_BITS) с ровно одним дополнительным словом."""
    z = [0] * (len(a) + 1)
    carry = 0
    for i, word in enumerate(a):
        value = (word << shift) | carry
        z[i] = value & DIGIT_MASK
        carry = value >> DIGIT_BITS
    z[len(a)] = carry
    return z


def _knuth_divrem(a: Digits, b: Digits) -> tuple[list[int], list[int]]:
    """
    Длинное деление, Knuth Vol. 2, 4.3.1, Algorithm D.

    Требует len(b) >= 2 и a >= b. Делитель сдвигается влево так, чтобы
    старший бит старшего слова был установлен; тогда оценка цифры частного
    по двум старшим словам ошибается не более чем на 2, а после проверки
    по третьему слову — не более чем на 1 (редкая коррекция add-back).
    """
    size_w = len(b)
    shift = DIGIT_BITS - b[-1].bit_length()

    w = _shl_bits_extended(b, shift)[:size_w]
    v = _shl_bits_extended(a, shift)

    k = len(v) - size_w
    quotient = [0] * k

    wm1 = w[size_w - 1]
    wm2 = w[size_w - 2]

    for j in range(k - 1, -1, -1):
        # оценка цифры частного по старшим словам v[j:j+size_w+1]
        vtop = v[j + size_w]
        qhat, rhat = divmod((vtop << DIGIT_BITS) | v[j + size_w - 1], wm1)
        while qhat >= DIGIT_BASE or qhat * wm2 > ((rhat << DIGIT_BITS) | v[j + size_w - 2]):
            qhat -= 1
            rhat += wm1
            if rhat >= DIGIT_BASE:
                break

        # v[j:j+size_w+1] -= qhat * w
        carry = 0
        borrow = 0
        for i in range(size_w):
            product = qhat * w[i] + carry
            carry = product >> DIGIT_BITS
            diff = v[j + i] - (product & DIGIT_MASK) - borrow
            v[j + i] = diff & DIGIT_MASK
            borrow = 1 if diff < 0 else 0
        diff = vtop - carry - borrow
        v[j + size_w] = diff & DIGIT_MASK

        if diff < 0:
            # qhat был на единицу больше: добавляем w обратно
            qhat -= 1
            carry = 0
            for i in range(size_w):
                carry += v[j + i] + w[i]
                v[j + i] = carry & DIGIT_MASK
                carry >>= DIGIT_BITS
            v[j + size_w] = (v[j + size_w] + carry) & DIGIT_MASK

        quotient[j] = qhat

    remainder = shr_digits(normalize(v[:size_w]), shift)
    return normalize(quotient), remainder


def divrem_digits(a: Digits, b: Digits) -> tuple[list[int], list[int]]:
    """
    Деление с остатком: a = q * b + r, 0 <= r < b.

    Raises:
        DivisionByZero: Если b == 0
    """
    if not b:
        raise DivisionByZero("division by zero")
    if compare_digits(a, b) < 0:
        return [], list(a)
    if len(b) == 1:
        quotient, remainder = divrem_digit(a, b[0])
        return quotient, ([remainder] if remainder else [])
    return _knuth_divrem(a, b)


# =============================================================================
# СДВИГИ
# =============================================================================


def shl_digits(a: Digits, bits: int) -> list[int]:
    """a * 2**bits, вектор растёт по необходимости."""
    if bits < 0:
        raise ContractViolation(f"negative shift count: {bits}")
    if not a:
        return []
    words, shift = divmod(bits, DIGIT_BITS)
    if shift == 0:
        return [0] * words + list(a)
    return normalize([0] * words + _shl_bits_extended(a, shift))


def shr_digits(a: Digits, bits: int) -> list[int]:
    """floor(a / 2**bits): младшие биты отбрасываются."""
    if bits < 0:
        raise ContractViolation(f"negative shift count: {bits}")
    words, shift = divmod(bits, DIGIT_BITS)
    if words >= len(a):
        return []
    if shift == 0:
        return list(a[words:])
    size = len(a) - words
    z = [0] * size
    for i in range(size):
        low = a[words + i] >> shift
        high = a[words + i + 1] << (DIGIT_BITS - shift) if words + i + 1 < len(a) else 0
        z[i] = (low | high) & DIGIT_MASK
    return normalize(z)


# =============================================================================
# БИТЫ
# =============================================================================


def bit_length_digits(a: Digits) -> int:
    """Количество значащих битов; 0 для нуля."""
    if not a:
        return 0
    return (len(a) - 1) * DIGIT_BITS + a[-1].bit_length()


def trailing_zeros_digits(a: Digits) -> int | None:
    """Количество младших нулевых битов; None для нуля."""
    for i, word in enumerate(a):
        if word:
            return i * DIGIT_BITS + ((word & -word).bit_length() - 1)
    return None


def count_ones_digits(a: Digits) -> int:
    """Количество единичных битов (popcount)."""
    return sum(word.bit_count() for word in a)


def bit_at_digits(a: Digits, position: int) -> bool:
    """Значение бита в позиции position (0 — младший)."""
    if position < 0:
        raise ContractViolation(f"bit position must be non-negative, got {position}")
    word_index, bit = divmod(position, DIGIT_BITS)
    if word_index >= len(a):
        return False
    return bool((a[word_index] >> bit) & 1)


def and_digits(a: Digits, b: Digits) -> list[int]:
    return normalize([x & y for x, y in zip(a, b)])


def or_digits(a: Digits, b: Digits) -> list[int]:
    if len(a) < len(b):
        a, b = b, a
    z = list(a)
    for i, word in enumerate(b):
        z[i] |= word
    return z


def xor_digits(a: Digits, b: Digits) -> list[int]:
    if len(a) < len(b):
        a, b = b, a
    z = list(a)
    for i, word in enumerate(b):
        z[i] ^= word
    return normalize(z)
