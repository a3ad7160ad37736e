"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных значений BigInt.
"""

from .validators import (
    BigIntValueValidator,
    ContractValidator,
    FactorizationReportValidator,
    SchemaLoader,
    bigint_from_contract,
    bigint_to_contract,
    report_from_contract,
    validate_bigint_value,
    validate_factorization_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntValueValidator",
    "FactorizationReportValidator",
    # Functions
    "bigint_to_contract",
    "bigint_from_contract",
    "report_from_contract",
    "validate_bigint_value",
    "validate_factorization_report",
]
