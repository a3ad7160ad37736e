"""
Demo Runner — Демонстрационная программа BigInt

Прогоняет арифметику, теоретико-числовые функции и замер времени,
печатая результаты в stdout. Ошибки BigIntError перехватываются только
здесь, на верхней границе, и логируются.

Запуск:
    python -m src.demo --log-level INFO --log-format text --seed 42
"""

import argparse
import logging
import random
import sys
from typing import Optional, Sequence, TextIO

from src.core.domain import BigInt, BigIntError, FactorizationReport
from src.core.math import (
    catalan,
    factorial,
    fibonacci,
    gcd,
    is_prime,
    isqrt,
    lcm,
)
from src.demo.logging_setup import LOG_LEVELS, setup_logging, timed_section

logger = logging.getLogger(__name__)

BANNER_WIDTH = 60
FACTORIAL_N_DEFAULT = 50


# =============================================================================
# ВЫВОД
# =============================================================================


def print_header(title: str, out: TextIO) -> None:
    print("", file=out)
    print("=" * BANNER_WIDTH, file=out)
    print(f" {title}", file=out)
    print("=" * BANNER_WIDTH, file=out)


# =============================================================================
# СЕКЦИИ
# =============================================================================


def basic_operations(out: TextIO) -> None:
    print_header("BASIC ARITHMETIC OPERATIONS", out)

    a = BigInt.from_int(123456789)
    b = BigInt.from_int(987654321)

    print(f"a = {a}", file=out)
    print(f"b = {b}", file=out)
    print(f"a + b = {a + b}", file=out)
    print(f"a - b = {a - b}", file=out)
    print(f"a * b = {a * b}", file=out)
    print(f"b / a = {b / a}", file=out)
    print(f"b % a = {b % a}", file=out)


def mathematical_functions(out: TextIO) -> None:
    print_header("MATHEMATICAL FUNCTIONS", out)

    print(f"Factorial of 15 = {factorial(15)}", file=out)
    print(f"Fibonacci(30) = {fibonacci(30)}", file=out)
    print(f"Catalan(8) = {catalan(8)}", file=out)

    a, b = BigInt.from_int(48), BigInt.from_int(18)
    print(f"GCD({a}, {b}) = {gcd(a, b)}", file=out)
    print(f"LCM({a}, {b}) = {lcm(a, b)}", file=out)


def advanced_features(out: TextIO, rng: random.Random) -> None:
    print_header("ADVANCED FEATURES", out)

    num = BigInt.from_int(100)
    print(f"Square root of {num} = {isqrt(num)}", file=out)

    for candidate in (BigInt.from_int(17), BigInt.from_int(100)):
        verdict = "prime" if is_prime(candidate, rng=rng) else "not prime"
        print(f"{candidate} is {verdict}", file=out)

    report = FactorizationReport.from_value(360)
    factors = " * ".join(f"{f.prime}^{f.multiplicity}" for f in report.factors)
    print(f"Factorization of {report.value} = {factors}", file=out)


def performance_demo(out: TextIO, factorial_n: int) -> None:
    print_header("PERFORMANCE DEMONSTRATION", out)

    with timed_section(logger, "factorial") as timing:
        fact = factorial(factorial_n)
        timing.extra["digit_count"] = fact.digit_count

    print(f"Factorial({factorial_n}) calculated in {timing.elapsed_ms:.0f}ms", file=out)
    print(f"Result has {fact.digit_count} digits", file=out)


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Arbitrary-precision integer library demo"
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    parser.add_argument("--log-format", choices=("json", "text"), default="text")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the primality test random source",
    )
    parser.add_argument("--factorial-n", type=int, default=FACTORIAL_N_DEFAULT)
    return parser


def run(out: TextIO, seed: Optional[int] = None, factorial_n: int = FACTORIAL_N_DEFAULT) -> int:
    """
    Прогон всех секций демонстрации.

    Returns:
        0 при успехе, 1 если BigIntError дошла до границы
    """
    rng = random.Random(seed)

    print("Professional BigInt Library Demo", file=out)
    print("================================", file=out)

    try:
        with timed_section(logger, "basic"):
            basic_operations(out)
        with timed_section(logger, "math"):
            mathematical_functions(out)
        with timed_section(logger, "advanced"):
            advanced_features(out, rng)
        with timed_section(logger, "performance"):
            performance_demo(out, factorial_n)
    except BigIntError as e:
        logger.exception("demo failed", extra={"error_kind": e.kind.value})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("", file=out)
    print("=" * BANNER_WIDTH, file=out)
    print(" All operations completed successfully!", file=out)
    print("=" * BANNER_WIDTH, file=out)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, fmt=args.log_format)
    return run(sys.stdout, seed=args.seed, factorial_n=args.factorial_n)


if __name__ == "__main__":
    sys.exit(main())
