"""
BigInt — Знаковое целое произвольной точности

Immutable value object: пара (negative, digits), где digits — десятичные
цифры, младшая первой (least-significant digit first).

Инварианты представления:
- A (каноническая форма): в digits нет незначащих нулей, кроме
  единственного представления нуля (0,)
- B (знаковый ноль): ноль всегда имеет negative=False

Нормализация выполняется в __post_init__, поэтому неканонический экземпляр
наблюдать невозможно. Арифметика вынесена в src.core.math.*; операторы
здесь — только синтаксический сахар поверх именованных функций.
"""

from dataclasses import dataclass
from typing import Final, Sequence, Union

from src.core.domain.errors import InvalidInputError


# =============================================================================
# НОРМАЛИЗАЦИЯ МОДУЛЯ
# =============================================================================


def strip_trailing_zeros(digits: Sequence[int]) -> list[int]:
    """
    Удаление незначащих нулей (в конце LSB-first списка).

    Минимальная длина результата — 1: пустой вход и [0, 0, ...] → [0].

    Examples:
        >>> strip_trailing_zeros([3, 2, 1, 0, 0])
        [3, 2, 1]
        >>> strip_trailing_zeros([0, 0])
        [0]
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return [0]
    return list(digits[:end])


def is_zero_magnitude(digits: Sequence[int]) -> bool:
    """Модуль в канонической форме равен нулю."""
    return len(digits) == 1 and digits[0] == 0


# =============================================================================
# BIGINT VALUE
# =============================================================================


@dataclass(frozen=True, eq=False)
class BigInt:
    """
    Знаковое целое произвольной точности.

    Основные способы создания:
        >>> BigInt.from_string("-120")
        BigInt('-120')
        >>> BigInt.from_int(42)
        BigInt('42')
        >>> BigInt(negative=True, digits=(0, 2, 1))
        BigInt('-120')
    """

    negative: bool = False
    digits: tuple[int, ...] = (0,)

    def __post_init__(self) -> None:
        if not self.digits:
            raise InvalidInputError("Digit sequence cannot be empty")

        for d in self.digits:
            if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 9:
                raise InvalidInputError(f"Invalid digit {d!r}, expected int in 0..9")

        canonical = tuple(strip_trailing_zeros(self.digits))
        object.__setattr__(self, "digits", canonical)
        # Инвариант B: ноль без знака
        object.__setattr__(
            self, "negative", bool(self.negative) and not is_zero_magnitude(canonical)
        )

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> "BigInt":
        """Парсинг текстового литерала (см. conversion.parse)."""
        from src.core.math.conversion import parse

        return parse(text)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Конверсия из Python int (см. conversion.from_int)."""
        from src.core.math.conversion import from_int

        return from_int(value)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return is_zero_magnitude(self.digits)

    @property
    def is_negative(self) -> bool:
        return self.negative and not self.is_zero

    @property
    def is_positive(self) -> bool:
        return not self.negative and not self.is_zero

    @property
    def digit_count(self) -> int:
        """Количество десятичных цифр модуля (у нуля — 1)."""
        return len(self.digits)

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        from src.core.math.conversion import to_string

        return to_string(self)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        from src.core.math.conversion import to_int

        return to_int(self)

    def __bool__(self) -> bool:
        return not self.is_zero

    def __hash__(self) -> int:
        # Согласовано с __eq__ для int-операндов: hash(BigInt(n)) == hash(n)
        value = 0
        for digit in reversed(self.digits):
            value = value * 10 + digit
        return hash(-value if self.negative else value)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        # Корректно благодаря канонической форме
        return self.negative == rhs.negative and self.digits == rhs.digits

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        from src.core.math.arithmetic import less_than

        return less_than(self, rhs)

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self < rhs or self == rhs

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not self <= rhs

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not self < rhs

    # -------------------------------------------------------------------------
    # Унарные операторы
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        from src.core.math.arithmetic import negate

        return negate(self)

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        from src.core.math.arithmetic import absolute

        return absolute(self)

    # -------------------------------------------------------------------------
    # Бинарные операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        from src.core.math.arithmetic import add

        return add(self, rhs)

    def __radd__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        from src.core.math.arithmetic import subtract

        return subtract(self, rhs)

    def __rsub__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        from src.core.math.arithmetic import multiply

        return multiply(self, rhs)

    def __rmul__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> "BigInt":
        """Усечённое деление (частное округляется к нулю)."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        from src.core.math.arithmetic import divide

        return divide(self, rhs)

    def __rtruediv__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __mod__(self, other: object) -> "BigInt":
        """Остаток усечённого деления (знак делимого)."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        from src.core.math.arithmetic import modulo

        return modulo(self, rhs)

    def __rmod__(self, other: object) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs % self

    def __divmod__(self, other: object) -> tuple["BigInt", "BigInt"]:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        from src.core.math.arithmetic import divide_with_remainder

        return divide_with_remainder(self, rhs)

    def __rdivmod__(self, other: object) -> tuple["BigInt", "BigInt"]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return divmod(lhs, self)

    def __pow__(self, exponent: object, modulus: object = None) -> "BigInt":
        exp = _coerce(exponent)
        if exp is None:
            return NotImplemented

        if modulus is None:
            from src.core.math.exponentiation import power

            return power(self, exp)

        mod = _coerce(modulus)
        if mod is None:
            return NotImplemented
        from src.core.math.exponentiation import mod_power

        return mod_power(self, exp, mod)

    def __rpow__(self, base: object) -> "BigInt":
        lhs = _coerce(base)
        if lhs is None:
            return NotImplemented
        return lhs ** self


Operand = Union[BigInt, int]


def _coerce(value: object) -> BigInt | None:
    """Приведение операнда к BigInt (int → BigInt), None для чужих типов."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return None


def as_bigint(value: Operand) -> BigInt:
    """
    Строгое приведение аргумента именованной функции к BigInt.

    Raises:
        InvalidInputError: Если value не BigInt и не int (bool отвергается)
    """
    result = _coerce(value)
    if result is None:
        raise InvalidInputError(
            f"Expected BigInt or int, got {type(value).__name__}"
        )
    return result


def normalize(value: BigInt) -> BigInt:
    """
    Приведение значения к канонической форме.

    Снимает незначащие нули (минимальная длина 1) и сбрасывает знак у нуля.
    Идемпотентна: normalize(normalize(x)) == normalize(x).
    """
    return BigInt(negative=value.negative, digits=value.digits)


# =============================================================================
# ИМЕНОВАННЫЕ КОНСТАНТЫ
# =============================================================================

# Инициализируются один раз при импорте модуля, immutable
ZERO: Final[BigInt] = BigInt(negative=False, digits=(0,))
ONE: Final[BigInt] = BigInt(negative=False, digits=(1,))
TWO: Final[BigInt] = BigInt(negative=False, digits=(2,))
