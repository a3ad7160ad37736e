"""
Digits — Примитивы над модулями (magnitude) в десятичном представлении

Модуль работает с "сырыми" последовательностями десятичных цифр
(least-significant digit first) без знака:
- Сравнение модулей (длина, затем цифры от старшей к младшей)
- Сложение с переносом
- Вычитание с заёмом (только большее минус меньшее)
- Умножение столбиком (schoolbook convolution)
- Удаление незначащих нулей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные последовательности не мутируются, всегда строится новый list
2. Результат может содержать незначащие нули (в конце списка) только
   до вызова strip_trailing_zeros
3. Каждая цифра результата лежит в диапазоне 0..9
"""

from typing import Final, Sequence

from src.core.domain.bigint import is_zero_magnitude, strip_trailing_zeros

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
BASE: Final[int] = 10


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение модулей в канонической форме.

    Алгоритм:
        1. Более длинная последовательность больше (ведущих нулей нет)
        2. Иначе сравнение цифр от старшей к младшей, первое различие решает

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|

    Examples:
        >>> compare_magnitude([1, 2], [9])
        1
        >>> compare_magnitude([9, 1], [1, 2])
        -1
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Позиционное сложение с переносом.

    Цикл идёт по длине большего операнда и продолжается, пока перенос
    ненулевой (результат может быть на одну цифру длиннее).

    Examples:
        >>> add_magnitudes([9, 9], [1])
        [0, 0, 1]
    """
    result: list[int] = []
    carry = 0
    max_len = max(len(a), len(b))

    i = 0
    while i < max_len or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % BASE)
        carry = total // BASE
        i += 1

    return result


def subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> list[int]:
    """
    Позиционное вычитание с заёмом: |larger| - |smaller|.

    Вызывающий код гарантирует |larger| >= |smaller|.
    Результат нормализован (после сокращения могут исчезнуть старшие цифры).

    Raises:
        ValueError: Если |larger| < |smaller| (нарушение контракта)

    Examples:
        >>> subtract_magnitudes([0, 0, 1], [1])
        [9, 9]
    """
    if compare_magnitude(larger, smaller) < 0:
        raise ValueError("subtract_magnitudes requires |larger| >= |smaller|")

    result: list[int] = []
    borrow = 0

    for i in range(len(larger)):
        diff = larger[i] - borrow
        if i < len(smaller):
            diff -= smaller[i]

        # Заём из следующего разряда
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0

        result.append(diff)

    return strip_trailing_zeros(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение столбиком (schoolbook convolution), O(len(a) * len(b)).

    Для каждой пары цифр digit_i * digit_j накапливается в позицию i + j,
    перенос протягивается внутри строки. Буфер результата имеет длину
    len(a) + len(b) и нормализуется в конце.

    Examples:
        >>> multiply_magnitudes([2, 1], [2, 1])  # 12 * 12
        [4, 4, 1]
    """
    if is_zero_magnitude(a) or is_zero_magnitude(b):
        return [0]

    result = [0] * (len(a) + len(b))

    for i, digit_a in enumerate(a):
        carry = 0
        j = 0
        while j < len(b) or carry:
            product = result[i + j] + carry
            if j < len(b):
                product += digit_a * b[j]
            result[i + j] = product % BASE
            carry = product // BASE
            j += 1

    return strip_trailing_zeros(result)


def shift_in_digit(digits: Sequence[int], digit: int) -> list[int]:
    """
    Дописывание цифры справа: value * 10 + digit (новый list).

    Используется в делении "уголком" для приёма очередной цифры делимого.
    """
    return strip_trailing_zeros([digit, *digits])
