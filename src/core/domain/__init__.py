"""
Domain models and value objects.

Contains the BigInt value type, its error taxonomy and serializable
factorization reports.
"""

from src.core.domain.bigint import (
    ONE,
    TWO,
    ZERO,
    BigInt,
    Operand,
    as_bigint,
    normalize,
)
from src.core.domain.errors import (
    ArithmeticOverflowError,
    ArithmeticUnderflowError,
    BigIntError,
    DivisionByZeroError,
    ErrorKind,
    InvalidInputError,
    OutOfRangeError,
)
from src.core.domain.factorization import (
    CANONICAL_LITERAL_PATTERN,
    FactorizationReport,
    PrimeFactor,
    is_canonical_literal,
)

__all__ = [
    # BigInt value
    "BigInt",
    "Operand",
    "as_bigint",
    "normalize",
    # Named constants
    "ZERO",
    "ONE",
    "TWO",
    # Errors
    "ErrorKind",
    "BigIntError",
    "InvalidInputError",
    "DivisionByZeroError",
    "OutOfRangeError",
    "ArithmeticOverflowError",
    "ArithmeticUnderflowError",
    # Factorization report
    "CANONICAL_LITERAL_PATTERN",
    "PrimeFactor",
    "FactorizationReport",
    "is_canonical_literal",
]
