"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов wire-формы:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений типов
- Детекция нарушений constraints (min/max/enum/длина кортежа)
- Интеграция с Pydantic моделями
"""

import math

import pytest
from jsonschema import ValidationError

from src.core.bigint import SBI, UBI
from src.core.contracts import (
    ContractValidator,
    SBIWireValidator,
    SchemaLoader,
    UBIWireValidator,
    WireContract,
    validate_sbi_wire,
    validate_ubi_wire,
)
from src.core.domain import SBIWire, UBIWire


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_ubi_wire():
    """Валидная wire-форма UBI (2**32 + 5)."""
    return [5, 1]


@pytest.fixture
def valid_sbi_wire():
    """Валидная wire-форма SBI (-(2**32 + 5))."""
    return [-1, [5, 1]]


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_all_schemas():
    """Проверка загрузки всех схем."""
    loader = SchemaLoader()

    ubi_schema = loader.load_schema("ubi_wire")
    sbi_schema = loader.load_schema("sbi_wire")

    assert ubi_schema["type"] == "array"
    assert ubi_schema["items"]["maximum"] == 2**32 - 1
    assert sbi_schema["prefixItems"][0]["enum"] == [-1, 0, 1]


def test_schema_loader_caches_schemas():
    """Проверка кэширования схем."""
    loader = SchemaLoader()

    schema1 = loader.load_schema("ubi_wire")
    schema2 = loader.load_schema("ubi_wire")

    # Должен вернуть тот же объект (кэш)
    assert schema1 is schema2


def test_schema_loader_raises_on_missing_schema():
    """Проверка ошибки при отсутствующей схеме."""
    loader = SchemaLoader()

    with pytest.raises(FileNotFoundError):
        loader.load_schema("non_existent_schema")


def test_schema_loader_rejects_missing_directory(tmp_path):
    """Проверка ошибки при отсутствующей директории схем."""
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "missing")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    """Схема, не проходящая meta-валидацию."""
    (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
    loader = SchemaLoader(tmp_path)

    with pytest.raises(ValueError):
        loader.load_schema("broken")


# =============================================================================
# TESTS - UBI WIRE VALIDATION
# =============================================================================


def test_ubi_wire_validator_accepts_valid_data(valid_ubi_wire):
    """Валидные данные проходят проверку."""
    validator = UBIWireValidator()
    validator.validate(valid_ubi_wire)
    assert validator.is_valid(valid_ubi_wire)


def test_ubi_wire_validate_function(valid_ubi_wire):
    validate_ubi_wire(valid_ubi_wire)


def test_ubi_wire_accepts_zero():
    """Ноль — пустой массив."""
    validate_ubi_wire([])


def test_ubi_wire_accepts_word_bounds():
    validate_ubi_wire([0, 2**32 - 1])


def test_ubi_wire_rejects_word_above_range():
    with pytest.raises(ValidationError):
        validate_ubi_wire([2**32])


def test_ubi_wire_rejects_negative_word():
    with pytest.raises(ValidationError):
        validate_ubi_wire([1, -1])


def test_ubi_wire_rejects_wrong_type():
    with pytest.raises(ValidationError):
        validate_ubi_wire({"digits": [1]})
    with pytest.raises(ValidationError):
        validate_ubi_wire(["1"])


def test_ubi_wire_iter_errors_reports_every_bad_word():
    errors = list(UBIWireValidator().iter_errors([-1, 2**32, 7]))
    assert len(errors) == 2


# =============================================================================
# TESTS - SBI WIRE VALIDATION
# =============================================================================


def test_sbi_wire_validator_accepts_valid_data(valid_sbi_wire):
    validator = SBIWireValidator()
    validator.validate(valid_sbi_wire)
    assert validator.is_valid(valid_sbi_wire)


def test_sbi_wire_validate_function(valid_sbi_wire):
    validate_sbi_wire(valid_sbi_wire)


def test_sbi_wire_accepts_zero():
    validate_sbi_wire([0, []])


def test_sbi_wire_rejects_invalid_sign(valid_sbi_wire):
    data = [2, valid_sbi_wire[1]]
    with pytest.raises(ValidationError):
        validate_sbi_wire(data)


def test_sbi_wire_rejects_missing_magnitude():
    with pytest.raises(ValidationError):
        validate_sbi_wire([1])


def test_sbi_wire_rejects_extra_items(valid_sbi_wire):
    with pytest.raises(ValidationError):
        validate_sbi_wire(valid_sbi_wire + [0])


def test_sbi_wire_rejects_bad_magnitude_word():
    with pytest.raises(ValidationError):
        validate_sbi_wire([1, [2**32]])


# =============================================================================
# TESTS - PYDANTIC INTEGRATION
# =============================================================================


def test_ubi_wire_model_output_passes_schema():
    """Pydantic модель → wire → JSON Schema."""
    wire = UBIWire.from_value(UBI.from_int(math.factorial(50)))
    validate_ubi_wire(wire.to_wire())


def test_sbi_wire_model_output_passes_schema():
    for value in (0, -1, 3**100, -(3**100)):
        wire = SBIWire.from_value(SBI.from_int(value))
        validate_sbi_wire(wire.to_wire())


# =============================================================================
# TESTS - VALIDATOR CACHE AND ERROR REPORTING
# =============================================================================


def test_schema_loader_caches_compiled_validators():
    loader = SchemaLoader()
    assert loader.validator_for("ubi_wire") is loader.validator_for("ubi_wire")


def test_contract_validator_exposes_schema():
    validator = ContractValidator(WireContract.SBI)
    assert validator.contract is WireContract.SBI
    assert validator.schema["maxItems"] == 2


def test_describe_errors_lists_paths_in_order():
    messages = UBIWireValidator().describe_errors([7, 2**32, -1])
    assert len(messages) == 2
    assert messages[0].startswith("$[1]:")
    assert messages[1].startswith("$[2]:")


def test_describe_errors_empty_for_valid_data(valid_sbi_wire):
    assert SBIWireValidator().describe_errors(valid_sbi_wire) == []
