"""
Core math modules для tokenswap

Целочисленная fixed-point арифметика без ошибок float.
"""

# Fixed-point codec
from tokenswap.core.math.fixed_point import (
    # Scales and display constants
    DEFAULT_TOKEN_DECIMALS,
    MAX_INPUT_DECIMALS,
    MAX_INPUT_WHOLE_DIGITS,
    MIN_DISPLAY_EXPONENT,
    MIN_DISPLAY_TEXT,
    PRICE_DECIMALS,
    TOKEN_DISPLAY_DECIMALS,
    USD_DECIMALS,
    # Codec
    float_to_scaled,
    format_units,
    parse_units,
    sanitize_number_input,
)

# Swap arithmetic
from tokenswap.core.math.swap_math import (
    calculate_exchange_rate,
    calculate_token_amount,
    calculate_usd_value,
)

__all__ = [
    # Fixed-point — Constants
    "DEFAULT_TOKEN_DECIMALS",
    "MAX_INPUT_DECIMALS",
    "MAX_INPUT_WHOLE_DIGITS",
    "MIN_DISPLAY_EXPONENT",
    "MIN_DISPLAY_TEXT",
    "PRICE_DECIMALS",
    "TOKEN_DISPLAY_DECIMALS",
    "USD_DECIMALS",
    # Fixed-point — Functions
    "float_to_scaled",
    "format_units",
    "parse_units",
    "sanitize_number_input",
    # Swap arithmetic — Functions
    "calculate_exchange_rate",
    "calculate_token_amount",
    "calculate_usd_value",
]
