"""
Number Theory — Теоретико-числовые функции над BigInt

Модуль содержит:
- НОД (алгоритм Евклида) и НОК
- Целочисленный квадратный корень (бинарный поиск)
- Тест простоты (пробное деление + вероятностная проверка)
- Разложение на простые множители (пробное деление)
- Комбинаторные последовательности: factorial, fibonacci, catalan

ВНИМАНИЕ (тест простоты):
Метод по умолчанию (PrimalityMethod.GCD_SCREEN) демонстрационный:
для n > 100 проверяется только gcd(base, n) == 1 для случайных base из
[2, 100]. Это НЕ криптографический тест: любое составное n без простых
делителей <= 100 (например, 101 * 103) будет признано простым.
Для более сильной проверки используйте PrimalityMethod.MILLER_RABIN.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

from src.core.domain.bigint import ONE, TWO, ZERO, BigInt, Operand, as_bigint
from src.core.domain.errors import InvalidInputError
from src.core.math.arithmetic import (
    absolute,
    add,
    divide,
    divide_with_remainder,
    is_even,
    less_than,
    modulo,
    multiply,
    subtract,
)
from src.core.math.conversion import from_int
from src.core.math.exponentiation import mod_power

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Число раундов вероятностной проверки по умолчанию
PRIMALITY_ROUNDS_DEFAULT: Final[int] = 5

# Модули <= порога проверяются исчерпывающим пробным делением
TRIAL_DIVISION_LIMIT_DEFAULT: Final[int] = 100

# Диапазон случайных оснований (включительно)
PRIMALITY_BASE_MIN_DEFAULT: Final[int] = 2
PRIMALITY_BASE_MAX_DEFAULT: Final[int] = 100

THREE: Final[BigInt] = BigInt(negative=False, digits=(3,))


# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(a: Operand, b: Operand) -> BigInt:
    """
    Наибольший общий делитель (классический алгоритм Евклида).

    (x, y) → (y, x mod y), пока y != 0. Работает с модулями, результат
    всегда неотрицательный; gcd(0, 0) == 0.

    Examples:
        >>> gcd(48, 18)
        BigInt('6')
        >>> gcd(-48, 18)
        BigInt('6')
    """
    x = absolute(a)
    y = absolute(b)

    while not y.is_zero:
        x, y = y, modulo(x, y)

    return x


def lcm(a: Operand, b: Operand) -> BigInt:
    """
    Наименьшее общее кратное: |a * b| / gcd(a, b), ноль если любой аргумент ноль.

    Examples:
        >>> lcm(48, 18)
        BigInt('144')
        >>> lcm(0, 5)
        BigInt('0')
    """
    x, y = as_bigint(a), as_bigint(b)

    if x.is_zero or y.is_zero:
        return ZERO

    return divide(absolute(multiply(x, y)), gcd(x, y))


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЙ КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def isqrt(n: Operand) -> BigInt:
    """
    floor(sqrt(n)) бинарным поиском по диапазону [1, n].

    На каждом шаге середина возводится в квадрат; диапазон сужается к
    наибольшей середине, квадрат которой не превосходит n.
    O(log n) операций арифметического ядра.

    Raises:
        InvalidInputError: Если n < 0

    Examples:
        >>> isqrt(100)
        BigInt('10')
        >>> isqrt(99)
        BigInt('9')
    """
    value = as_bigint(n)

    if value.is_negative:
        raise InvalidInputError("Square root not defined for negative numbers")

    if not less_than(ONE, value):
        # 0 и 1
        return value

    left = ONE
    right = value
    result = ONE

    while not less_than(right, left):
        mid = divide(add(left, right), TWO)
        square = multiply(mid, mid)

        if not less_than(value, square):
            result = mid
            left = add(mid, ONE)
        else:
            right = subtract(mid, ONE)

    return result


# =============================================================================
# ТЕСТ ПРОСТОТЫ
# =============================================================================


class PrimalityMethod(str, Enum):
    """Вероятностная стадия теста простоты (для n > trial_division_limit)"""

    GCD_SCREEN = "gcd_screen"  # демонстрационная проверка gcd(base, n) == 1
    MILLER_RABIN = "miller_rabin"  # witness-тест Миллера-Рабина


@dataclass(frozen=True)
class PrimalityConfig:
    """
    Конфигурация теста простоты.

    - rounds: число раундов со случайным основанием
    - trial_division_limit: модули <= порога проверяются пробным делением
    - base_min / base_max: диапазон случайных оснований (включительно)
    - method: вероятностная стадия (GCD_SCREEN по умолчанию)
    """

    rounds: int = PRIMALITY_ROUNDS_DEFAULT
    trial_division_limit: int = TRIAL_DIVISION_LIMIT_DEFAULT
    base_min: int = PRIMALITY_BASE_MIN_DEFAULT
    base_max: int = PRIMALITY_BASE_MAX_DEFAULT
    method: PrimalityMethod = PrimalityMethod.GCD_SCREEN

    def __post_init__(self) -> None:
        if self.rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {self.rounds}")

        if self.trial_division_limit < 3:
            raise ValueError(
                f"trial_division_limit must be >= 3, got {self.trial_division_limit}"
            )

        if self.base_min < 2:
            raise ValueError(f"base_min must be >= 2, got {self.base_min}")

        if self.base_max < self.base_min:
            raise ValueError(
                f"base_max must be >= base_min, got {self.base_max} < {self.base_min}"
            )

        # gcd(base, n) == 1 различает только n > base_max: иначе основание,
        # кратное простому n, отвергает его
        if (
            self.method == PrimalityMethod.GCD_SCREEN
            and self.base_max > self.trial_division_limit
        ):
            raise ValueError(
                f"base_max must be <= trial_division_limit for GCD_SCREEN, "
                f"got {self.base_max} > {self.trial_division_limit}"
            )


def is_prime(
    n: Operand,
    rng: Optional[random.Random] = None,
    config: Optional[PrimalityConfig] = None,
) -> bool:
    """
    Тест простоты.

    Порядок проверок:
        1. n <= 1 → не простое
        2. n == 2 → простое
        3. чётное n → не простое
        4. n <= trial_division_limit → пробное деление до isqrt(n)
        5. иначе → config.rounds раундов вероятностной проверки

    Источник случайности передаётся явно; без rng создаётся локальный
    random.Random() (глобальное состояние модуля random не используется).

    Args:
        n: Проверяемое значение
        rng: Генератор случайных оснований (для детерминизма тестов)
        config: Параметры теста (default: PrimalityConfig())

    Returns:
        True если n (вероятно) простое

    Examples:
        >>> is_prime(17)
        True
        >>> is_prime(100)
        False
    """
    value = as_bigint(n)
    cfg = config or PrimalityConfig()

    if not less_than(ONE, value):
        return False
    if value == TWO:
        return True
    if is_even(value):
        return False

    if not less_than(from_int(cfg.trial_division_limit), value):
        return _is_prime_trial_division(value)

    generator = rng if rng is not None else random.Random()

    if cfg.method == PrimalityMethod.MILLER_RABIN:
        return _is_probable_prime_miller_rabin(value, generator, cfg)
    return _is_probable_prime_gcd_screen(value, generator, cfg)


def _is_prime_trial_division(n: BigInt) -> bool:
    """Исчерпывающее пробное деление на 2..isqrt(n)."""
    limit = isqrt(n)
    candidate = TWO

    while not less_than(limit, candidate):
        if modulo(n, candidate).is_zero:
            return False
        candidate = add(candidate, ONE)

    return True


def _is_probable_prime_gcd_screen(
    n: BigInt, rng: random.Random, config: PrimalityConfig
) -> bool:
    """
    Демонстрационная проверка: gcd(base, n) != 1 → составное.

    Не является witness-тестом; ложноположительные ответы возможны для
    составных чисел без малых простых делителей.
    """
    for _ in range(config.rounds):
        base = from_int(rng.randint(config.base_min, config.base_max))
        if gcd(base, n) != ONE:
            return False
    return True


def _is_probable_prime_miller_rabin(
    n: BigInt, rng: random.Random, config: PrimalityConfig
) -> bool:
    """
    Тест Миллера-Рабина: n - 1 = d * 2^s, d нечётное.

    Основание a является witness составности, если a^d != 1 (mod n) и
    a^(d * 2^r) != n - 1 для всех 0 <= r < s.
    """
    n_minus_one = subtract(n, ONE)

    d = n_minus_one
    s = 0
    while is_even(d):
        d = divide(d, TWO)
        s += 1

    for _ in range(config.rounds):
        base = from_int(rng.randint(config.base_min, config.base_max))
        # Основание должно лежать в [2, n - 2]
        if not less_than(base, n_minus_one):
            base = add(modulo(base, subtract(n, THREE)), TWO)

        x = mod_power(base, d, n)
        if x == ONE or x == n_minus_one:
            continue

        for _ in range(s - 1):
            x = mod_power(x, TWO, n)
            if x == n_minus_one:
                break
        else:
            return False

    return True


# =============================================================================
# РАЗЛОЖЕНИЕ НА МНОЖИТЕЛИ
# =============================================================================


def prime_factorization(n: Operand) -> list[tuple[BigInt, int]]:
    """
    Разложение |n| на простые множители пробным делением.

    Алгоритм:
        1. Множитель 2 выделяется полностью (с кратностью)
        2. Нечётные кандидаты 3, 5, 7, ... пока кандидат <= isqrt(остатка);
           корень пересчитывается каждый раз, когда остаток уменьшается
        3. Остаток > 1: сам простой множитель кратности 1

    Returns:
        Список (prime, multiplicity) по возрастанию prime; пустой для |n| <= 1

    Examples:
        >>> prime_factorization(360)
        [(BigInt('2'), 3), (BigInt('3'), 2), (BigInt('5'), 1)]
        >>> prime_factorization(1)
        []
    """
    num = absolute(n)
    factors: list[tuple[BigInt, int]] = []

    if not less_than(ONE, num):
        return factors

    count = 0
    while is_even(num):
        num = divide(num, TWO)
        count += 1
    if count > 0:
        factors.append((TWO, count))

    candidate = THREE
    limit = isqrt(num)

    while not less_than(limit, candidate):
        count = 0
        quotient, remainder = divide_with_remainder(num, candidate)
        while remainder.is_zero:
            num = quotient
            count += 1
            quotient, remainder = divide_with_remainder(num, candidate)

        if count > 0:
            factors.append((candidate, count))
            limit = isqrt(num)

        candidate = add(candidate, TWO)

    if less_than(ONE, num):
        factors.append((num, 1))

    return factors


# =============================================================================
# КОМБИНАТОРНЫЕ ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================


def _validate_index(n: int, name: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError(f"{name} index must be int, got {type(n).__name__}")

    if n < 0:
        raise InvalidInputError(f"{name} not defined for negative numbers")


def factorial(n: int) -> BigInt:
    """
    n! как произведение 2 * 3 * ... * n.

    Raises:
        InvalidInputError: Если n < 0

    Examples:
        >>> factorial(0)
        BigInt('1')
        >>> factorial(5)
        BigInt('120')
    """
    _validate_index(n, "Factorial")

    result = ONE
    for i in range(2, n + 1):
        result = multiply(result, from_int(i))
    return result


def fibonacci(n: int) -> BigInt:
    """
    n-е число Фибоначчи (F(0) = 0, F(1) = 1), итеративно.

    Raises:
        InvalidInputError: Если n < 0

    Examples:
        >>> fibonacci(10)
        BigInt('55')
    """
    _validate_index(n, "Fibonacci")

    if n <= 1:
        return from_int(n)

    a, b = ZERO, ONE
    for _ in range(2, n + 1):
        a, b = b, add(a, b)
    return b


def catalan(n: int) -> BigInt:
    """
    n-е число Каталана: (2n)! / ((n + 1)! * n!).

    Raises:
        InvalidInputError: Если n < 0

    Examples:
        >>> catalan(8)
        BigInt('1430')
    """
    _validate_index(n, "Catalan")

    numerator = factorial(2 * n)
    denominator = multiply(factorial(n + 1), factorial(n))
    return divide(numerator, denominator)
