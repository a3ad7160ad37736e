"""
Arithmetic Engine — Знаковая арифметика над BigInt

Модуль реализует знаковые операции поверх примитивов модулей (digits.py):
- Сравнение (знак + модуль)
- Сложение (при разных знаках сводится к вычитанию)
- Вычитание (четыре комбинации знаков, ядро — большее минус меньшее)
- Умножение столбиком (знак = XOR знаков операндов)
- Деление с остатком "уголком" (усечённая семантика)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая операция возвращает новое значение в канонической форме
2. Деление: dividend == divisor * quotient + remainder, |remainder| < |divisor|
3. Частное округляется к нулю, знак остатка совпадает со знаком делимого
4. Деление на ноль → DivisionByZeroError (без частичных результатов)
"""

from src.core.domain.bigint import ONE, ZERO, BigInt, Operand, as_bigint
from src.core.domain.errors import DivisionByZeroError
from src.core.math.digits import (
    add_magnitudes,
    compare_magnitude,
    multiply_magnitudes,
    shift_in_digit,
    subtract_magnitudes,
)

# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def negate(value: Operand) -> BigInt:
    """Смена знака (у нуля знак остаётся положительным)."""
    v = as_bigint(value)
    return BigInt(negative=not v.negative, digits=v.digits)


def absolute(value: Operand) -> BigInt:
    """Модуль значения."""
    v = as_bigint(value)
    return negate(v) if v.is_negative else v


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def less_than(a: Operand, b: Operand) -> bool:
    """
    Строгий порядок a < b.

    - Разные знаки: отрицательное меньше
    - Одинаковые знаки: сравнение модулей, для отрицательных — инвертированное
    """
    x, y = as_bigint(a), as_bigint(b)

    if x.negative != y.negative:
        return x.negative

    if x.negative:
        return compare_magnitude(x.digits, y.digits) > 0
    return compare_magnitude(x.digits, y.digits) < 0


def compare(a: Operand, b: Operand) -> int:
    """
    Трёхзначное сравнение, выведенное из < и ==.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b

    Examples:
        >>> compare(-5, 3)
        -1
        >>> compare(BigInt.from_int(7), 7)
        0
    """
    x, y = as_bigint(a), as_bigint(b)
    if x == y:
        return 0
    return -1 if less_than(x, y) else 1


def minimum(a: Operand, b: Operand) -> BigInt:
    """Меньшее из двух значений."""
    x, y = as_bigint(a), as_bigint(b)
    return x if less_than(x, y) else y


def maximum(a: Operand, b: Operand) -> BigInt:
    """Большее из двух значений."""
    x, y = as_bigint(a), as_bigint(b)
    return x if less_than(y, x) else y


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(a: Operand, b: Operand) -> BigInt:
    """
    Сложение.

    При разных знаках сводится к вычитанию:
        (-x) + y = y - x
        x + (-y) = x - y

    Examples:
        >>> add(999, 1)
        BigInt('1000')
        >>> add(-5, 3)
        BigInt('-2')
    """
    x, y = as_bigint(a), as_bigint(b)

    if x.negative != y.negative:
        if x.negative:
            return subtract(y, negate(x))
        return subtract(x, negate(y))

    return BigInt(negative=x.negative, digits=tuple(add_magnitudes(x.digits, y.digits)))


def subtract(a: Operand, b: Operand) -> BigInt:
    """
    Вычитание.

    Комбинации знаков:
        (-x) - y    = -(x + y)
        x - (-y)    = x + y
        (-x) - (-y) = y - x
        x - y, x < y → -(y - x)

    Ядро вычитания всегда работает как "больший модуль минус меньший".

    Examples:
        >>> subtract(1000, 1)
        BigInt('999')
        >>> subtract(3, 5)
        BigInt('-2')
    """
    x, y = as_bigint(a), as_bigint(b)

    if x.negative != y.negative:
        if x.negative:
            return negate(add(negate(x), y))
        return add(x, negate(y))

    if x.negative:
        return subtract(negate(y), negate(x))

    if less_than(x, y):
        return negate(subtract(y, x))

    return BigInt(negative=False, digits=tuple(subtract_magnitudes(x.digits, y.digits)))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(a: Operand, b: Operand) -> BigInt:
    """
    Умножение столбиком, знак = XOR знаков.

    Ноль любого из операндов сразу даёт ZERO.

    Examples:
        >>> multiply(-12, 12)
        BigInt('-144')
    """
    x, y = as_bigint(a), as_bigint(b)

    if x.is_zero or y.is_zero:
        return ZERO

    digits = multiply_magnitudes(x.digits, y.digits)
    return BigInt(negative=x.negative != y.negative, digits=tuple(digits))


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide_with_remainder(dividend: Operand, divisor: Operand) -> tuple[BigInt, BigInt]:
    """
    Деление с остатком "уголком" (усечённая семантика).

    Алгоритм:
        Цифры |dividend| обрабатываются от старшей к младшей. Очередная цифра
        дописывается к текущему остатку, затем из остатка вычитается |divisor|,
        пока это возможно; число вычитаний — следующая цифра частного.
        На каждом шаге строится новый остаток, ничего не мутируется на месте.

    Знаки:
        quotient  — XOR знаков (округление к нулю)
        remainder — знак делимого

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)

    Returns:
        (quotient, remainder)

    Raises:
        DivisionByZeroError: Если divisor равен нулю

    Examples:
        >>> divide_with_remainder(987654321, 123456789)
        (BigInt('8'), BigInt('9'))
        >>> divide_with_remainder(-7, 2)
        (BigInt('-3'), BigInt('-1'))
    """
    n, d = as_bigint(dividend), as_bigint(divisor)

    if d.is_zero:
        raise DivisionByZeroError()

    if n.is_zero:
        return ZERO, ZERO

    # Быстрый путь: |n| < |d| → частное 0, остаток — само делимое
    if compare_magnitude(n.digits, d.digits) < 0:
        return ZERO, n

    quotient_msb_first: list[int] = []
    remainder: list[int] = [0]

    for i in range(len(n.digits) - 1, -1, -1):
        remainder = shift_in_digit(remainder, n.digits[i])

        count = 0
        while compare_magnitude(remainder, d.digits) >= 0:
            remainder = subtract_magnitudes(remainder, d.digits)
            count += 1

        quotient_msb_first.append(count)

    quotient = BigInt(
        negative=n.negative != d.negative,
        digits=tuple(reversed(quotient_msb_first)),
    )
    return quotient, BigInt(negative=n.negative, digits=tuple(remainder))


def divide(dividend: Operand, divisor: Operand) -> BigInt:
    """
    Усечённое частное.

    Raises:
        DivisionByZeroError: Если divisor равен нулю
    """
    quotient, _ = divide_with_remainder(dividend, divisor)
    return quotient


def modulo(dividend: Operand, divisor: Operand) -> BigInt:
    """
    Остаток усечённого деления (знак делимого).

    Raises:
        DivisionByZeroError: Если divisor равен нулю
    """
    _, remainder = divide_with_remainder(dividend, divisor)
    return remainder


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def is_even(value: Operand) -> bool:
    """Чётность по младшей цифре."""
    return as_bigint(value).digits[0] % 2 == 0


def increment(value: Operand) -> BigInt:
    """value + 1"""
    return add(value, ONE)


def decrement(value: Operand) -> BigInt:
    """value - 1"""
    return subtract(value, ONE)
