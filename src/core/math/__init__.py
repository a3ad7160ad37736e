"""
Core math modules

Арифметическое ядро BigInt и теоретико-числовые функции поверх него.
"""

# Digits (примитивы над модулями)
from src.core.math.digits import (
    BASE,
    add_magnitudes,
    compare_magnitude,
    multiply_magnitudes,
    shift_in_digit,
    subtract_magnitudes,
)

# Arithmetic Engine
from src.core.math.arithmetic import (
    absolute,
    add,
    compare,
    decrement,
    divide,
    divide_with_remainder,
    increment,
    is_even,
    less_than,
    maximum,
    minimum,
    modulo,
    multiply,
    negate,
    subtract,
)

# Exponentiation
from src.core.math.exponentiation import mod_power, power

# Conversion
from src.core.math.conversion import (
    INT64_MAX,
    INT64_MIN,
    from_int,
    parse,
    read_bigint,
    to_int,
    to_string,
    write_bigint,
)

# Number Theory
from src.core.math.number_theory import (
    PRIMALITY_BASE_MAX_DEFAULT,
    PRIMALITY_BASE_MIN_DEFAULT,
    PRIMALITY_ROUNDS_DEFAULT,
    TRIAL_DIVISION_LIMIT_DEFAULT,
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

__all__ = [
    # Digits
    "BASE",
    "add_magnitudes",
    "compare_magnitude",
    "multiply_magnitudes",
    "shift_in_digit",
    "subtract_magnitudes",
    # Arithmetic — Unary
    "negate",
    "absolute",
    # Arithmetic — Comparison
    "less_than",
    "compare",
    "minimum",
    "maximum",
    # Arithmetic — Operations
    "add",
    "subtract",
    "multiply",
    "divide_with_remainder",
    "divide",
    "modulo",
    # Arithmetic — Utilities
    "is_even",
    "increment",
    "decrement",
    # Exponentiation
    "power",
    "mod_power",
    # Conversion — Constants
    "INT64_MIN",
    "INT64_MAX",
    # Conversion — Functions
    "parse",
    "from_int",
    "to_string",
    "to_int",
    "read_bigint",
    "write_bigint",
    # Number Theory — Constants
    "PRIMALITY_ROUNDS_DEFAULT",
    "TRIAL_DIVISION_LIMIT_DEFAULT",
    "PRIMALITY_BASE_MIN_DEFAULT",
    "PRIMALITY_BASE_MAX_DEFAULT",
    # Number Theory — Types
    "PrimalityMethod",
    "PrimalityConfig",
    # Number Theory — Functions
    "gcd",
    "lcm",
    "isqrt",
    "is_prime",
    "prime_factorization",
    "factorial",
    "fibonacci",
    "catalan",
]
