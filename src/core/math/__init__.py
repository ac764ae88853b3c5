"""
Core math modules

Точные числовые примитивы: классификация входа, границы типов, точность.
"""

# Exact Numbers
from src.core.math.exact_numbers import (
    NATIVE_INT_LIMIT,
    NumberKind,
    ParsedNumber,
    ScientificMagnitude,
    classify,
    compare_exact,
    compare_magnitude,
    decimal_exponent,
    decimal_mantissa,
    digit_count,
    is_integral,
    parse_literal,
)

# Numeric Bounds
from src.core.math.numeric_bounds import (
    FloatMagnitude,
    IntegerBounds,
    MoneyBounds,
    binary_float_max_magnitude,
    bounds_for,
    decimal_float_max_magnitude,
    integer_bounds,
    money_bounds,
    significant_digits,
)

# Accuracy
from src.core.math.accuracy import (
    configured_accuracy,
    required_accuracy,
    sufficient_accuracy,
)

__all__ = [
    # Exact Numbers: Constants
    "NATIVE_INT_LIMIT",
    # Exact Numbers: Types
    "NumberKind",
    "ParsedNumber",
    "ScientificMagnitude",
    # Exact Numbers: Functions
    "classify",
    "compare_exact",
    "compare_magnitude",
    "decimal_exponent",
    "decimal_mantissa",
    "digit_count",
    "is_integral",
    "parse_literal",
    # Numeric Bounds: Types
    "FloatMagnitude",
    "IntegerBounds",
    "MoneyBounds",
    # Numeric Bounds: Functions
    "binary_float_max_magnitude",
    "bounds_for",
    "decimal_float_max_magnitude",
    "integer_bounds",
    "money_bounds",
    "significant_digits",
    # Accuracy
    "configured_accuracy",
    "required_accuracy",
    "sufficient_accuracy",
]
