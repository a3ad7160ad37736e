"""
JSON Schema Contract Validators

Проверка сериализованных значений BigInt и отчётов о разложении на множители
по JSON Schema контрактам (Draft 2020-12) и сборка доменных объектов из
проверенных данных.

Схемы:
- bigint_value.json (значение BigInt как канонический литерал)
- factorization_report.json (результат разложения на множители)

Схема проверяет форму данных; арифметические свойства (произведение
множителей равно |value|) проверяются при загрузке отчёта.
"""

import json
from pathlib import Path
from typing import Any, Dict, Generic, TypeVar

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.bigint import ONE, BigInt
from src.core.domain.factorization import FactorizationReport
from src.core.math.arithmetic import absolute, less_than

T = TypeVar("T")

# contracts/schema относительно корня репозитория
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema контрактов.

    Каждая схема проходит meta-валидацию один раз; компилированный
    Draft202012Validator кэшируется вместе с ней.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    def available(self) -> list[str]:
        """Имена схем в каталоге (без расширения), по алфавиту."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'bigint_value')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Компилированный валидатор схемы (один экземпляр на имя)."""
        if schema_name not in self._validators:
            self._validators[schema_name] = Draft202012Validator(
                self.load_schema(schema_name)
            )
        return self._validators[schema_name]


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator(Generic[T]):
    """
    Валидатор контракта: схема + сборка доменного объекта.

    Подклассы задают schema_name и _build(); load() сначала проверяет
    данные по схеме, затем строит объект.
    """

    schema_name: str = ""

    def __init__(self, loader: SchemaLoader | None = None):
        self.validator = (loader or _SCHEMA_LOADER).validator_for(self.schema_name)
        self.schema = self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """
        Все нарушения схемы как "путь: сообщение", по порядку путей.

        Examples:
            >>> FactorizationReportValidator().error_messages(
            ...     {"value": "4", "factors": [{"prime": "2", "multiplicity": 0}]})
            ['factors/0/multiplicity: 0 is less than the minimum of 1']
        """
        errors = sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [
            f"{'/'.join(map(str, e.absolute_path)) or '<root>'}: {e.message}"
            for e in errors
        ]

    def load(self, data: Dict[str, Any]) -> T:
        """
        Проверка по схеме и сборка доменного объекта.

        Raises:
            ValidationError: Если данные не соответствуют схеме
            ValueError: Если данные корректны по форме, но не по смыслу
        """
        self.validate(data)
        return self._build(data)

    def _build(self, data: Dict[str, Any]) -> T:
        raise NotImplementedError


class BigIntValueValidator(ContractValidator[BigInt]):
    """bigint_value → BigInt"""

    schema_name = "bigint_value"

    def _build(self, data: Dict[str, Any]) -> BigInt:
        return BigInt.from_string(data["value"])


class FactorizationReportValidator(ContractValidator[FactorizationReport]):
    """factorization_report → FactorizationReport с проверкой произведения"""

    schema_name = "factorization_report"

    def _build(self, data: Dict[str, Any]) -> FactorizationReport:
        report = FactorizationReport(**data)
        magnitude = absolute(report.value_bigint())

        if not less_than(ONE, magnitude):
            if report.factors:
                raise ValueError(
                    f"factorization_report for {report.value} must have no factors"
                )
            return report

        product = report.product()
        if product != magnitude:
            raise ValueError(
                f"factorization_report product mismatch: factors give {product}, "
                f"|value| is {magnitude}"
            )
        return report


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def bigint_to_contract(value: BigInt) -> Dict[str, Any]:
    """
    Examples:
        >>> bigint_to_contract(BigInt.from_int(-42))
        {'value': '-42'}
    """
    return {"value": str(value)}


def bigint_from_contract(data: Dict[str, Any]) -> BigInt:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    return BigIntValueValidator().load(data)


def report_from_contract(data: Dict[str, Any]) -> FactorizationReport:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
        ValueError: Если произведение множителей не равно |value|
    """
    return FactorizationReportValidator().load(data)


def validate_bigint_value(data: Dict[str, Any]) -> None:
    BigIntValueValidator().validate(data)


def validate_factorization_report(data: Dict[str, Any]) -> None:
    FactorizationReportValidator().validate(data)
