"""
BigInt Errors — Таксономия ошибок арифметического ядра

Каждое исключение несёт явный код ошибки (ErrorKind), чтобы вызывающий код
мог обрабатывать ошибки на своей границе без разбора текста сообщения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка поднимается в точке обнаружения и пропагирует к вызывающему коду
2. Частичные результаты никогда не возвращаются вместе с ошибкой
3. Ядро никогда не логирует и не печатает (только raise)
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ErrorKind(str, Enum):
    """Код ошибки арифметического ядра"""

    INVALID_INPUT = "INVALID_INPUT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    OVERFLOW = "OVERFLOW"
    UNDERFLOW = "UNDERFLOW"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntError(Exception):
    """
    Базовый класс всех ошибок BigInt.

    Подклассы задают kind и сообщение по умолчанию.
    """

    kind: ErrorKind
    default_message: str = "BigInt error"

    def __init__(self, message: str | None = None):
        super().__init__(message if message is not None else self.default_message)


class InvalidInputError(BigIntError, ValueError):
    """
    Невалидный вход: битый текстовый литерал, отрицательный аргумент
    factorial/fibonacci/catalan/sqrt, отрицательная степень,
    неположительный модуль.
    """

    kind = ErrorKind.INVALID_INPUT
    default_message = "Invalid input"


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    """Делитель (в / или %) равен каноническому нулю."""

    kind = ErrorKind.DIVISION_BY_ZERO
    default_message = "Division by zero"


class OutOfRangeError(BigIntError, ValueError):
    """Модуль значения не помещается в целевой fixed-width тип."""

    kind = ErrorKind.OUT_OF_RANGE
    default_message = "Value out of range"


class ArithmeticOverflowError(BigIntError, OverflowError):
    """
    Зарезервировано: переполнение bounded-width fast path.

    Произвольная точность сама по себе переполниться не может,
    в основном арифметическом пути не используется.
    """

    kind = ErrorKind.OVERFLOW
    default_message = "Arithmetic overflow"


class ArithmeticUnderflowError(BigIntError, ArithmeticError):
    """Зарезервировано: антипереполнение bounded-width fast path."""

    kind = ErrorKind.UNDERFLOW
    default_message = "Arithmetic underflow"
