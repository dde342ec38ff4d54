"""
Core math modules для agentmath

Flattening, дисциплины группировки и численные функции actions.
"""

# Numerical Safeguards
from agentmath.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    INT64_MAX,
    INT64_MIN,
    check_int64,
    ieee_fsum,
    ieee_binary,
    ieee_unary,
    is_close,
    is_valid_float,
    validate_int64_input,
    validate_non_empty,
    validate_non_negative,
    validate_non_zero,
    validate_positive,
)

# Flatten
from agentmath.core.math.flatten import count_leaves, flatten, flatten_list

# Grouping
from agentmath.core.math.grouping import (
    PAIR_WINDOW,
    WindowConfig,
    evaluate_aggregate,
    evaluate_elementwise,
    evaluate_parameterized,
    evaluate_windowed,
    split_parameters,
    windowed,
)

# Reductions
from agentmath.core.math.reductions import (
    average,
    geometric_mean,
    harmonic_mean,
    max_index,
    maximum,
    min_index,
    minimum,
    total,
)

# Combinatorics & primes
from agentmath.core.math.combinatorics import binomial, factorial, stirling_s2
from agentmath.core.math.primes import is_prime, next_prime, prime_factors

__all__ = [
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "INT64_MAX",
    "INT64_MIN",
    "check_int64",
    "ieee_fsum",
    "ieee_binary",
    "ieee_unary",
    "is_close",
    "is_valid_float",
    "validate_int64_input",
    "validate_non_empty",
    "validate_non_negative",
    "validate_non_zero",
    "validate_positive",
    # Flatten
    "count_leaves",
    "flatten",
    "flatten_list",
    # Grouping
    "PAIR_WINDOW",
    "WindowConfig",
    "evaluate_aggregate",
    "evaluate_elementwise",
    "evaluate_parameterized",
    "evaluate_windowed",
    "split_parameters",
    "windowed",
    # Reductions
    "average",
    "geometric_mean",
    "harmonic_mean",
    "max_index",
    "maximum",
    "min_index",
    "minimum",
    "total",
    # Combinatorics & primes
    "binomial",
    "factorial",
    "stirling_s2",
    "is_prime",
    "next_prime",
    "prime_factors",
]
