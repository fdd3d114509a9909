"""
Contract Validation Module

JSON Schema контракты wire-формы и сериализационный кодек UBI/SBI.
"""

from .serialization import (
    I8,
    U32,
    SeqEnd,
    SeqStart,
    Token,
    TupleEnd,
    TupleStart,
    deserialize_sbi,
    deserialize_ubi,
    sbi_from_json,
    sbi_from_wire,
    serialize_sbi,
    serialize_ubi,
    to_json,
    to_wire,
    ubi_from_json,
    ubi_from_wire,
)
from .validators import (
    ContractValidator,
    SBIWireValidator,
    SchemaLoader,
    UBIWireValidator,
    WireContract,
    validate_sbi_wire,
    validate_ubi_wire,
)

__all__ = [
    # Classes
    "WireContract",
    "SchemaLoader",
    "ContractValidator",
    "UBIWireValidator",
    "SBIWireValidator",
    # Functions
    "validate_ubi_wire",
    "validate_sbi_wire",
    # Tokens
    "Token",
    "SeqStart",
    "SeqEnd",
    "TupleStart",
    "TupleEnd",
    "U32",
    "I8",
    # Codec
    "serialize_ubi",
    "serialize_sbi",
    "deserialize_ubi",
    "deserialize_sbi",
    "to_wire",
    "ubi_from_wire",
    "sbi_from_wire",
    "to_json",
    "ubi_from_json",
    "sbi_from_json",
]
