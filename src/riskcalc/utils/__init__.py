"""Utility functions"""

from .formatters import (
    format_to_two_decimals,
    format_to_eight_decimals,
    convert_to_decimal,
    is_raw_percentage,
    normalize_percentage
)

from .helpers import (
    normalize_decimal_input,
    is_valid_numeric_input,
    parse_form_value,
    process_form_values,
    risk_percentage_from_amount,
    risk_amount_from_percentage
)

__all__ = [
    'format_to_two_decimals',
    'format_to_eight_decimals',
    'convert_to_decimal',
    'is_raw_percentage',
    'normalize_percentage',
    'normalize_decimal_input',
    'is_valid_numeric_input',
    'parse_form_value',
    'process_form_values',
    'risk_percentage_from_amount',
    'risk_amount_from_percentage'
]
