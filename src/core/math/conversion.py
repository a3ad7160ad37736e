"""
Conversion — Текстовые и fixed-width конверсии BigInt

Формат текстового литерала:
    необязательный '+' / '-', затем одна или более ASCII цифр 0-9;
    без разделителей групп, пробелов и экспоненты.

Канонический вывод:
    '-' только для отрицательных ненулевых значений, цифры от старшей к
    младшей, без ведущих нулей (кроме "0").

Fixed-width конверсия:
    Целевой тип — знаковое 64-битное целое [INT64_MIN, INT64_MAX].
    Выход за диапазон → OutOfRangeError (никакого усечения/wrap-around).
"""

from typing import Final, TextIO

from src.core.domain.bigint import BigInt
from src.core.domain.errors import InvalidInputError, OutOfRangeError

# =============================================================================
# FIXED-WIDTH ГРАНИЦЫ
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_ASCII_DIGITS: Final[str] = "0123456789"


# =============================================================================
# ТЕКСТ → ЗНАЧЕНИЕ
# =============================================================================


def parse(text: str) -> BigInt:
    """
    Парсинг текстового литерала.

    Ведущие нули допускаются и отбрасываются нормализацией;
    "-0" даёт канонический (неотрицательный) ноль.

    Raises:
        InvalidInputError: Пустая строка, только знак, нецифровой символ

    Examples:
        >>> parse("-00120")
        BigInt('-120')
        >>> parse("+7")
        BigInt('7')
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected str, got {type(text).__name__}")

    if not text:
        raise InvalidInputError("Empty string")

    negative = False
    start = 0
    if text[0] == "-":
        negative = True
        start = 1
    elif text[0] == "+":
        start = 1

    if start >= len(text):
        raise InvalidInputError("Invalid number format")

    digits: list[int] = []
    for ch in reversed(text[start:]):
        if ch not in _ASCII_DIGITS:
            raise InvalidInputError(f"Non-digit character in number: {ch!r}")
        digits.append(ord(ch) - ord("0"))

    return BigInt(negative=negative, digits=tuple(digits))


def from_int(value: int) -> BigInt:
    """
    Конверсия из Python int извлечением цифр (value % 10, value // 10).

    Raises:
        InvalidInputError: Если value не int (bool отвергается)

    Examples:
        >>> from_int(-305)
        BigInt('-305')
        >>> from_int(0)
        BigInt('0')
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"Expected int, got {type(value).__name__}")

    if value == 0:
        return BigInt(negative=False, digits=(0,))

    negative = value < 0
    remaining = -value if negative else value

    digits: list[int] = []
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        digits.append(digit)

    return BigInt(negative=negative, digits=tuple(digits))


# =============================================================================
# ЗНАЧЕНИЕ → ТЕКСТ / INT
# =============================================================================


def to_string(value: BigInt) -> str:
    """Канонический текст значения."""
    if value.is_zero:
        return "0"

    body = "".join(_ASCII_DIGITS[d] for d in reversed(value.digits))
    return f"-{body}" if value.negative else body


def to_int(value: BigInt) -> int:
    """
    Конверсия в int с проверкой диапазона INT64.

    Raises:
        OutOfRangeError: Если значение вне [INT64_MIN, INT64_MAX]

    Examples:
        >>> to_int(parse("-9223372036854775808"))
        -9223372036854775808
    """
    # 19 цифр — максимум для INT64; более длинные модули заведомо вне диапазона
    if value.digit_count > 19:
        raise OutOfRangeError("Value too large for int64")

    result = 0
    for digit in reversed(value.digits):
        result = result * 10 + digit

    if value.negative:
        result = -result

    if result < INT64_MIN or result > INT64_MAX:
        raise OutOfRangeError("Value too large for int64")

    return result


# =============================================================================
# STREAM I/O
# =============================================================================


def read_bigint(stream: TextIO) -> BigInt:
    """
    Чтение одного токена, разделённого пробельными символами, и его парсинг.

    Ведущие пробельные символы пропускаются; разделитель после токена
    потребляется из потока.

    Raises:
        InvalidInputError: Поток исчерпан до токена или токен невалиден
    """
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)

    if not ch:
        raise InvalidInputError("Unexpected end of stream")

    token: list[str] = []
    while ch and not ch.isspace():
        token.append(ch)
        ch = stream.read(1)

    return parse("".join(token))


def write_bigint(stream: TextIO, value: BigInt) -> int:
    """
    Запись канонического текста в поток.

    Returns:
        Количество записанных символов
    """
    text = to_string(value)
    stream.write(text)
    return len(text)
