"""
Serialization Codec — стабильный wire-формат UBI/SBI

Два представления одного и того же формата:

1. Поток токенов (модель данных serde):
   UBI: SeqStart(len=n), U32 × n, SeqEnd
   SBI: TupleStart(len=2), I8(sign), <UBI>, TupleEnd

2. JSON-форма:
   UBI: [w0, w1, ...]
   SBI: [sign, [w0, w1, ...]]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Формат зафиксирован навсегда (младшее слово первым, 32-битные слова,
   каноническая форма без старших нулей, ноль = пустая последовательность)
2. Подсказка длины SeqStart.len не используется для выделения памяти и не
   обязана совпадать с фактическим числом слов
3. Любое отклонение формы → DecodingError, без частично построенных значений
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Union

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError as ModelValidationError

from src.core.bigint.config import DIGIT_MASK
from src.core.bigint.errors import DecodingError
from src.core.bigint.sbi import SBI, Sign
from src.core.bigint.ubi import UBI
from src.core.contracts.validators import SBIWireValidator, UBIWireValidator
from src.core.domain.wire import SBIWire, UBIWire

logger = logging.getLogger(__name__)


# =============================================================================
# TOKENS
# =============================================================================


@dataclass(frozen=True)
class SeqStart:
    len: Optional[int]


@dataclass(frozen=True)
class SeqEnd:
    pass


@dataclass(frozen=True)
class TupleStart:
    len: int


@dataclass(frozen=True)
class TupleEnd:
    pass


@dataclass(frozen=True)
class U32:
    value: int


@dataclass(frozen=True)
class I8:
    value: int


Token = Union[SeqStart, SeqEnd, TupleStart, TupleEnd, U32, I8]


# =============================================================================
# TOKEN SERIALIZATION
# =============================================================================


def serialize_ubi(value: UBI) -> list[Token]:
    """
    UBI → поток токенов.

    Examples:
        >>> serialize_ubi(UBI.one())
        [SeqStart(len=1), U32(value=1), SeqEnd()]
    """
    digits = value.digits
    return [SeqStart(len=len(digits)), *(U32(word) for word in digits), SeqEnd()]


def serialize_sbi(value: SBI) -> list[Token]:
    """SBI → поток токенов: кортеж из знака и магнитуды."""
    return [
        TupleStart(len=2),
        I8(value.sign.value),
        *serialize_ubi(value.magnitude),
        TupleEnd(),
    ]


# =============================================================================
# TOKEN DESERIALIZATION
# =============================================================================


class _TokenReader:
    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)

    def next(self, expected: str) -> Token:
        try:
            return next(self._tokens)
        except StopIteration:
            raise DecodingError(f"unexpected end of input, expected {expected}") from None

    def expect(self, kind: type, expected: str) -> Token:
        token = self.next(expected)
        if not isinstance(token, kind):
            raise DecodingError(f"invalid type: {token!r}, expected {expected}")
        return token

    def finish(self) -> None:
        extra = next(self._tokens, None)
        if extra is not None:
            raise DecodingError(f"trailing token after value: {extra!r}")


def _is_plain_int(value: Any) -> bool:
    # bool является подклассом int, но словом не считается
    return isinstance(value, int) and not isinstance(value, bool)


def _read_magnitude(reader: _TokenReader) -> UBI:
    start = reader.expect(SeqStart, "a sequence")

    # подсказка длины только логируется; число слов определяют сами токены
    logger.debug("decoding magnitude: hint=%s", start.len)

    digits: list[int] = []
    while True:
        token = reader.next("u32 or end of sequence")
        if isinstance(token, SeqEnd):
            break
        if not isinstance(token, U32):
            raise DecodingError(f"invalid type: {token!r}, expected u32")
        if not _is_plain_int(token.value):
            raise DecodingError(f"invalid type: {token.value!r}, expected u32")
        if not 0 <= token.value <= DIGIT_MASK:
            raise DecodingError(f"u32 out of range: {token.value}")
        digits.append(token.value)

    return UBI(digits)


def deserialize_ubi(tokens: Iterable[Token]) -> UBI:
    """
    Поток токенов → UBI.

    Принимает корректно завершённую последовательность при любом значении
    подсказки длины.

    Raises:
        DecodingError: Неверная структура, слово не int или вне диапазона,
            лишние токены
    """
    reader = _TokenReader(tokens)
    value = _read_magnitude(reader)
    reader.finish()
    return value


def deserialize_sbi(tokens: Iterable[Token]) -> SBI:
    """
    Поток токенов → SBI.

    Raises:
        DecodingError: Неверная структура, знак не int или вне {-1, 0, 1},
            лишние токены
    """
    reader = _TokenReader(tokens)
    start = reader.expect(TupleStart, "a tuple of size 2")
    if start.len != 2:
        raise DecodingError(f"invalid length {start.len}, expected a tuple of size 2")

    sign_token = reader.expect(I8, "i8 sign")
    if not _is_plain_int(sign_token.value):
        raise DecodingError(f"invalid type: {sign_token.value!r}, expected i8")
    if sign_token.value not in (-1, 0, 1):
        raise DecodingError(f"invalid sign byte: {sign_token.value}")
    magnitude = _read_magnitude(reader)

    reader.expect(TupleEnd, "end of tuple")
    reader.finish()
    return SBI(Sign(sign_token.value), magnitude)


# =============================================================================
# JSON WIRE FORM
# =============================================================================


def to_wire(value: Union[UBI, SBI]) -> list[Any]:
    """
    UBI → [w0, ...]; SBI → [sign, [w0, ...]].

    Examples:
        >>> to_wire(SBI.from_int(-1))
        [-1, [1]]
    """
    if isinstance(value, SBI):
        return SBIWire.from_value(value).to_wire()
    if isinstance(value, UBI):
        return UBIWire.from_value(value).to_wire()
    raise TypeError(f"expected UBI or SBI, got {type(value).__name__}")


def ubi_from_wire(data: Any) -> UBI:
    """
    Raises:
        DecodingError: Если data не соответствует ubi_wire.json
    """
    validator = UBIWireValidator()
    try:
        validator.validate(data)
        wire = UBIWire(digits=data)
    except SchemaValidationError as e:
        logger.debug("rejected UBI wire form: %s", "; ".join(validator.describe_errors(data)))
        raise DecodingError(f"invalid UBI wire form: {e.message}") from e
    except ModelValidationError as e:
        logger.debug("rejected UBI wire form: %s", e)
        raise DecodingError(f"invalid UBI wire form: {data!r}") from e
    return wire.to_value()


def sbi_from_wire(data: Any) -> SBI:
    """
    Raises:
        DecodingError: Если data не соответствует sbi_wire.json
    """
    validator = SBIWireValidator()
    try:
        validator.validate(data)
        wire = SBIWire.from_pair(data)
    except SchemaValidationError as e:
        logger.debug("rejected SBI wire form: %s", "; ".join(validator.describe_errors(data)))
        raise DecodingError(f"invalid SBI wire form: {e.message}") from e
    except ModelValidationError as e:
        logger.debug("rejected SBI wire form: %s", e)
        raise DecodingError(f"invalid SBI wire form: {data!r}") from e
    return wire.to_value()


def to_json(value: Union[UBI, SBI]) -> str:
    return json.dumps(to_wire(value), separators=(",", ":"))


def ubi_from_json(text: str) -> UBI:
    """
    Raises:
        DecodingError: Невалидный JSON или форма
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodingError(f"invalid JSON: {e}") from e
    return ubi_from_wire(data)


def sbi_from_json(text: str) -> SBI:
    """
    Raises:
        DecodingError: Невалидный JSON или форма
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodingError(f"invalid JSON: {e}") from e
    return sbi_from_wire(data)
