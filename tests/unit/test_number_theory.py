"""
Тесты для Number Theory

Проверяет:
1. НОД / НОК и тождество gcd * lcm == |a * b|
2. Целочисленный квадратный корень (floor)
3. Тест простоты: пробное деление, GCD_SCREEN, MILLER_RABIN, детерминизм rng
4. Разложение на множители (порядок, кратности, произведение)
5. factorial / fibonacci / catalan и отрицательные аргументы
"""

import math
import random

import pytest

from src.core.domain import ONE, ZERO, BigInt, InvalidInputError
from src.core.math.arithmetic import absolute, multiply
from src.core.math.number_theory import (
    PRIMALITY_ROUNDS_DEFAULT,
    PrimalityConfig,
    PrimalityMethod,
    catalan,
    factorial,
    fibonacci,
    gcd,
    is_prime,
    isqrt,
    lcm,
    prime_factorization,
)


def big(n: int) -> BigInt:
    return BigInt.from_int(n)


# =============================================================================
# ТЕСТЫ: НОД / НОК
# =============================================================================


class TestGcdLcm:
    """gcd / lcm"""

    def test_reference_values(self):
        assert gcd(48, 18) == big(6)
        assert lcm(48, 18) == big(144)

    def test_signs_ignored(self):
        assert gcd(-48, 18) == big(6)
        assert gcd(48, -18) == big(6)
        assert lcm(-4, 6) == big(12)

    def test_zero_inputs(self):
        assert gcd(0, 5) == big(5)
        assert gcd(5, 0) == big(5)
        assert gcd(0, 0) == ZERO
        assert lcm(0, 5) == ZERO
        assert lcm(5, 0) == ZERO

    def test_gcd_lcm_identity(self):
        rng = random.Random(99)
        for _ in range(20):
            a = rng.randint(-10**12, 10**12) or 1
            b = rng.randint(-10**12, 10**12) or 1
            assert multiply(gcd(a, b), lcm(a, b)) == absolute(multiply(a, b))
            assert int(gcd(a, b)) == math.gcd(a, b)


# =============================================================================
# ТЕСТЫ: Квадратный корень
# =============================================================================


class TestIsqrt:
    """isqrt: бинарный поиск"""

    @pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 15, 16, 17, 99, 100, 101, 10**6, 999999])
    def test_matches_math_isqrt(self, n):
        assert int(isqrt(n)) == math.isqrt(n)

    def test_reference_value(self):
        assert isqrt(100) == big(10)

    def test_large_value(self):
        n = 12345678901234567890123456789
        assert str(isqrt(n)) == str(math.isqrt(n))

    def test_negative_rejected(self):
        with pytest.raises(InvalidInputError, match="Square root"):
            isqrt(-1)


# =============================================================================
# ТЕСТЫ: Тест простоты
# =============================================================================


class TestPrimalityConfig:
    """Валидация PrimalityConfig"""

    def test_defaults(self):
        cfg = PrimalityConfig()
        assert cfg.rounds == PRIMALITY_ROUNDS_DEFAULT == 5
        assert cfg.trial_division_limit == 100
        assert (cfg.base_min, cfg.base_max) == (2, 100)
        assert cfg.method == PrimalityMethod.GCD_SCREEN

    def test_invalid_rounds(self):
        with pytest.raises(ValueError, match="rounds"):
            PrimalityConfig(rounds=0)

    def test_invalid_base_range(self):
        with pytest.raises(ValueError, match="base_min"):
            PrimalityConfig(base_min=1)
        with pytest.raises(ValueError, match="base_max"):
            PrimalityConfig(base_min=10, base_max=5)

    def test_invalid_trial_limit(self):
        with pytest.raises(ValueError, match="trial_division_limit"):
            PrimalityConfig(trial_division_limit=2)

    def test_gcd_screen_bases_must_stay_below_tested_values(self):
        with pytest.raises(ValueError, match="base_max must be <= trial_division_limit"):
            PrimalityConfig(trial_division_limit=10)

    def test_miller_rabin_allows_wide_base_range(self):
        cfg = PrimalityConfig(trial_division_limit=10, method=PrimalityMethod.MILLER_RABIN)
        assert cfg.base_max == 100


class TestIsPrime:
    """is_prime: детерминированная и вероятностная стадии."""

    def test_reference_values(self):
        assert is_prime(17) is True
        assert is_prime(100) is False

    @pytest.mark.parametrize("n", [-7, -1, 0, 1])
    def test_at_most_one_not_prime(self, n):
        assert is_prime(n) is False

    def test_two_is_prime_and_evens_are_not(self):
        assert is_prime(2) is True
        assert is_prime(4) is False
        assert is_prime(1000000) is False

    def test_small_range_exact(self):
        expected = [p for p in range(101) if p > 1 and all(p % d for d in range(2, math.isqrt(p) + 1))]
        assert [n for n in range(101) if is_prime(n)] == expected

    @pytest.mark.parametrize("method", list(PrimalityMethod))
    def test_large_primes_accepted(self, method):
        cfg = PrimalityConfig(method=method)
        for p in (101, 7919, 1000000007):
            assert is_prime(p, rng=random.Random(1), config=cfg) is True

    @pytest.mark.parametrize("method", list(PrimalityMethod))
    def test_composite_with_small_factor_rejected(self, method):
        cfg = PrimalityConfig(rounds=200, method=method)
        # 3 * 67, 7 * 1009
        for n in (201, 7063):
            assert is_prime(n, rng=random.Random(3), config=cfg) is False

    def test_gcd_screen_is_not_a_witness_test(self):
        """101 * 103 не имеет делителей <= 100: демонстрационный тест ошибается."""
        n = 101 * 103
        assert is_prime(n, rng=random.Random(0)) is True
        strong = PrimalityConfig(method=PrimalityMethod.MILLER_RABIN)
        assert is_prime(n, rng=random.Random(0), config=strong) is False

    def test_miller_rabin_rejects_carmichael_number(self):
        # 41041 = 7 * 11 * 13 * 41
        strong = PrimalityConfig(method=PrimalityMethod.MILLER_RABIN, rounds=10)
        assert is_prime(41041, rng=random.Random(5), config=strong) is False

    def test_seeded_rng_is_deterministic(self):
        # 3 * 101: с rounds=1 ответ зависит от того, кратно ли основание 3
        cfg = PrimalityConfig(rounds=1)
        n = big(303)
        first = [is_prime(n, rng=random.Random(seed), config=cfg) for seed in range(50)]
        second = [is_prime(n, rng=random.Random(seed), config=cfg) for seed in range(50)]
        assert first == second
        assert True in first and False in first

    def test_narrow_base_range_keeps_primes_above_limit(self):
        cfg = PrimalityConfig(trial_division_limit=10, base_max=10, rounds=50)
        for p in (11, 13, 97):
            assert is_prime(p, rng=random.Random(0), config=cfg) is True

    def test_miller_rabin_wraps_bases_above_small_prime(self):
        cfg = PrimalityConfig(
            trial_division_limit=10, rounds=50, method=PrimalityMethod.MILLER_RABIN
        )
        for p in (11, 13, 97):
            assert is_prime(p, rng=random.Random(0), config=cfg) is True

    def test_rng_draws_rounds_bases(self):
        class CountingRandom(random.Random):
            calls = 0

            def randint(self, a, b):
                CountingRandom.calls += 1
                return super().randint(a, b)

        rng = CountingRandom(11)
        assert is_prime(1000003, rng=rng, config=PrimalityConfig(rounds=7)) is True
        assert CountingRandom.calls == 7


# =============================================================================
# ТЕСТЫ: Разложение на множители
# =============================================================================


class TestPrimeFactorization:
    """prime_factorization"""

    def test_reference_value(self):
        assert prime_factorization(360) == [(big(2), 3), (big(3), 2), (big(5), 1)]

    @pytest.mark.parametrize("n", [-1, 0, 1])
    def test_trivial_inputs_empty(self, n):
        assert prime_factorization(n) == []

    def test_prime_input(self):
        assert prime_factorization(97) == [(big(97), 1)]

    def test_large_leftover_prime(self):
        assert prime_factorization(2 * 1000003) == [(big(2), 1), (big(1000003), 1)]

    def test_negative_uses_magnitude(self):
        assert prime_factorization(-12) == [(big(2), 2), (big(3), 1)]

    @pytest.mark.parametrize("n", [2, 64, 9699690, 123456, 999999, 3 * 3 * 7 * 7 * 7 * 13])
    def test_product_reconstructs_input(self, n):
        factors = prime_factorization(n)
        product = ONE
        for prime, count in factors:
            assert is_prime(prime, rng=random.Random(0))
            product = multiply(product, BigInt.from_int(int(prime) ** count))
        assert product == big(n)
        primes = [p for p, _ in factors]
        assert primes == sorted(primes)


# =============================================================================
# ТЕСТЫ: Комбинаторные последовательности
# =============================================================================


class TestSequences:
    """factorial / fibonacci / catalan"""

    def test_factorial(self):
        assert factorial(0) == ONE
        assert factorial(1) == ONE
        assert factorial(5) == big(120)
        assert str(factorial(50)) == str(math.factorial(50))

    def test_fibonacci(self):
        assert fibonacci(0) == ZERO
        assert fibonacci(1) == ONE
        assert fibonacci(10) == big(55)
        assert fibonacci(30) == big(832040)

    def test_catalan(self):
        assert [int(catalan(n)) for n in range(9)] == [1, 1, 2, 5, 14, 42, 132, 429, 1430]

    @pytest.mark.parametrize("func", [factorial, fibonacci, catalan])
    def test_negative_rejected(self, func):
        with pytest.raises(InvalidInputError, match="negative"):
            func(-1)

    @pytest.mark.parametrize("func", [factorial, fibonacci, catalan])
    def test_non_int_rejected(self, func):
        with pytest.raises(InvalidInputError, match="must be int"):
            func(2.0)
