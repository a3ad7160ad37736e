"""
Exponentiation — Возведение в степень и модульное возведение в степень

Оба алгоритма — бинарное возведение (square-and-multiply):
- Проверка чётности показателя
- На нечётном шаге домножение аккумулятора на основание
- Возведение основания в квадрат, деление показателя пополам
- Остановка при нулевом показателе

ПОЛИТИКА:
- pow(b, 0) == 1 для любого b, включая 0^0 == 1
- Отрицательный показатель → InvalidInputError
- mod_power: модуль строго положительный, иначе InvalidInputError
"""

from src.core.domain.bigint import ONE, TWO, ZERO, BigInt, Operand, as_bigint
from src.core.domain.errors import InvalidInputError
from src.core.math.arithmetic import divide, is_even, less_than, modulo, multiply


def power(base: Operand, exponent: Operand) -> BigInt:
    """
    Возведение в неотрицательную степень.

    Args:
        base: Основание (любого знака)
        exponent: Показатель (>= 0)

    Returns:
        base ** exponent

    Raises:
        InvalidInputError: Если exponent < 0

    Examples:
        >>> power(2, 10)
        BigInt('1024')
        >>> power(0, 0)
        BigInt('1')
        >>> power(-3, 3)
        BigInt('-27')
    """
    b, e = as_bigint(base), as_bigint(exponent)

    if less_than(e, ZERO):
        raise InvalidInputError("Negative exponent not supported")

    if e.is_zero:
        return ONE

    result = ONE
    while not e.is_zero:
        if not is_even(e):
            result = multiply(result, b)
        b = multiply(b, b)
        e = divide(e, TWO)

    return result


def mod_power(base: Operand, exponent: Operand, modulus: Operand) -> BigInt:
    """
    Модульное возведение в степень: (base ** exponent) % modulus.

    Каждое промежуточное произведение сразу редуцируется по модулю,
    поэтому размер операндов ограничен размером modulus.

    Семантика остатка — усечённая (как у modulo): для отрицательного base
    и нечётного exponent результат может быть отрицательным, что совпадает
    с power(base, exponent) % modulus.

    Args:
        base: Основание
        exponent: Показатель (>= 0)
        modulus: Модуль (> 0)

    Raises:
        InvalidInputError: Если modulus <= 0 или exponent < 0

    Examples:
        >>> mod_power(4, 13, 497)
        BigInt('445')
        >>> mod_power(7, 0, 1)
        BigInt('0')
    """
    b, e, m = as_bigint(base), as_bigint(exponent), as_bigint(modulus)

    if not m.is_positive:
        raise InvalidInputError("Modulus must be positive")

    if less_than(e, ZERO):
        raise InvalidInputError("Negative exponent not supported")

    result = modulo(ONE, m)
    b = modulo(b, m)

    while not e.is_zero:
        if not is_even(e):
            result = modulo(multiply(result, b), m)
        b = modulo(multiply(b, b), m)
        e = divide(e, TWO)

    return result
