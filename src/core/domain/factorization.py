"""
FactorizationReport — Сериализуемый результат разложения на множители

Immutable Pydantic модели для экспорта результата prime_factorization.
Полная совместимость с JSON Schema (contracts/schema/factorization_report.json).

Значения хранятся как канонические десятичные литералы (str), чтобы
сериализация в JSON не зависела от разрядности int у потребителя.
"""

import re
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.bigint import BigInt

# Канонический литерал: "0" или опциональный '-' и цифры без ведущих нулей
CANONICAL_LITERAL_PATTERN: Final[str] = r"^(0|-?[1-9][0-9]*)$"

_CANONICAL_LITERAL_RE: Final[re.Pattern[str]] = re.compile(CANONICAL_LITERAL_PATTERN)


# =============================================================================
# PRIME FACTOR
# =============================================================================


class PrimeFactor(BaseModel):
    """
    Простой множитель с кратностью.

    Immutable модель (frozen=True).
    """

    prime: str = Field(
        ..., pattern=r"^[1-9][0-9]*$", description="Простой множитель (канонический литерал)"
    )
    multiplicity: int = Field(..., ge=1, description="Кратность множителя")

    model_config = {"frozen": True}

    @field_validator("prime")
    @classmethod
    def validate_prime_at_least_two(cls, v: str) -> str:
        """Простой множитель не может быть меньше 2."""
        if v == "1":
            raise ValueError("prime must be >= 2, got 1")
        return v

    def prime_value(self) -> BigInt:
        """Множитель как BigInt."""
        return BigInt.from_string(self.prime)


# =============================================================================
# FACTORIZATION REPORT
# =============================================================================


class FactorizationReport(BaseModel):
    """
    Результат разложения |value| на простые множители.

    Immutable модель (frozen=True). Множители упорядочены строго
    по возрастанию prime; для |value| <= 1 список пуст.
    """

    value: str = Field(
        ..., pattern=CANONICAL_LITERAL_PATTERN, description="Исходное значение"
    )
    factors: list[PrimeFactor] = Field(
        default_factory=list, description="Множители по возрастанию"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_ascending_order(self) -> "FactorizationReport":
        """Множители строго возрастают и не повторяются."""
        primes = [f.prime_value() for f in self.factors]
        for previous, current in zip(primes, primes[1:]):
            if not previous < current:
                raise ValueError(
                    f"factors must be strictly ascending, got {previous} before {current}"
                )
        return self

    @classmethod
    def from_value(cls, n: BigInt | int) -> "FactorizationReport":
        """
        Разложение значения и упаковка результата в отчёт.

        Examples:
            >>> FactorizationReport.from_value(360).to_pairs()
            [(BigInt('2'), 3), (BigInt('3'), 2), (BigInt('5'), 1)]
        """
        # number_theory импортирует domain, поэтому импорт отложен
        from src.core.math.number_theory import prime_factorization

        value = n if isinstance(n, BigInt) else BigInt.from_int(n)
        factors = [
            PrimeFactor(prime=str(prime), multiplicity=count)
            for prime, count in prime_factorization(value)
        ]
        return cls(value=str(value), factors=factors)

    def value_bigint(self) -> BigInt:
        return BigInt.from_string(self.value)

    def to_pairs(self) -> list[tuple[BigInt, int]]:
        """Множители в виде [(prime, multiplicity), ...]."""
        return [(f.prime_value(), f.multiplicity) for f in self.factors]

    def product(self) -> BigInt:
        """Произведение prime ** multiplicity (== |value| для |value| >= 1)."""
        result = BigInt.from_int(1)
        for prime, count in self.to_pairs():
            result = result * prime**count
        return result


def is_canonical_literal(text: str) -> bool:
    """Проверка, что строка — канонический литерал BigInt."""
    return _CANONICAL_LITERAL_RE.fullmatch(text) is not None
