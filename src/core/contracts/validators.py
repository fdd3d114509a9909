"""
JSON Schema Contract Validators

Проверка JSON-формы UBI/SBI по формальным контрактам в contracts/schema/.
Каждая схема проходит meta-валидацию (Draft 2020-12) один раз при первой
загрузке; скомпилированные валидаторы кэшируются на уровне загрузчика.

Контракты:
- ubi_wire.json: массив 32-битных слов, младшее первым
- sbi_wire.json: пара [sign, words], sign ∈ {-1, 0, 1}
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match


class WireContract(str, Enum):
    """Имена контрактов wire-формы (совпадают с именами файлов схем)."""

    UBI = "ubi_wire"
    SBI = "sbi_wire"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema контрактов.

    По умолчанию читает contracts/schema/ в корне проекта; каталог можно
    передать явно.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        # contracts/schema/ лежит на 4 уровня выше src/core/contracts/validators.py
        default_dir = Path(__file__).resolve().parents[3] / "contracts" / "schema"
        self._schema_dir = schema_dir if schema_dir is not None else default_dir
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-валидация схемы.

        Args:
            schema_name: Имя схемы без расширения ('ubi_wire', 'sbi_wire')

        Raises:
            FileNotFoundError: Файл схемы не найден
            ValueError: Схема не проходит meta-валидацию Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Скомпилированный валидатор схемы (кэшируется)."""
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self.load_schema(schema_name))
            self._validators[schema_name] = validator
        return validator


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одного контракта wire-формы."""

    def __init__(self, contract: WireContract, loader: Optional[SchemaLoader] = None):
        self.contract = contract
        self.validator = (loader or _SCHEMA_LOADER).validator_for(contract.value)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Any) -> list[str]:
        """
        Человекочитаемые нарушения: "<путь>: <сообщение>".

        Examples:
            >>> UBIWireValidator().describe_errors([1, -1])
            ['$[1]: -1 is less than the minimum of 0']
        """
        return [
            f"{error.json_path}: {error.message}"
            for error in sorted(self.iter_errors(data), key=lambda e: list(e.path))
        ]


class UBIWireValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(WireContract.UBI, loader)


class SBIWireValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(WireContract.SBI, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_ubi_wire(data: Any) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют ubi_wire.json
    """
    UBIWireValidator().validate(data)


def validate_sbi_wire(data: Any) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют sbi_wire.json
    """
    SBIWireValidator().validate(data)
