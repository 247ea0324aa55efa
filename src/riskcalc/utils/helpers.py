"""Helpers turning raw text input into calculator parameters"""

import re
from typing import Callable, Dict, Optional

INPUT_VALIDATION_REGEX = re.compile(r'^(0|[1-9]\d*)([.,]\d*)?$')

OPTIONAL_FIELDS = ('takeProfitPrice', 'take_profit_price')


def normalize_decimal_input(text: str) -> str:
    """Accept a comma as decimal separator"""
    return text.strip().replace(',', '.', 1)


def is_valid_numeric_input(text: str) -> bool:
    """Check that a field holds an unsigned decimal number (or nothing yet)"""
    text = text.strip()
    return text == "" or bool(INPUT_VALIDATION_REGEX.match(text))


def parse_form_value(name: str, text: str) -> Optional[float]:
    """
    Convert a form field to a number.

    Args:
        name (str): Field name
        text (str): Raw value as typed

    Returns:
        Optional[float]: None for an empty take profit, 0 for other empty fields
    """
    text = normalize_decimal_input(text)
    if text == "":
        return None if name in OPTIONAL_FIELDS else 0.0
    return float(text)


def process_form_values(form_values: Dict[str, str],
                        handle_param: Callable[[str, Optional[float]], None]):
    """Parse every form field and pass it to handle_param(name, value)"""
    for name, text in form_values.items():
        handle_param(name, parse_form_value(name, text))


def risk_percentage_from_amount(amount: float, capital: float) -> Optional[float]:
    """Risk percentage matching a fixed money amount, None without capital"""
    if capital <= 0:
        return None
    return (amount / capital) * 100


def risk_amount_from_percentage(percentage: float, capital: float) -> float:
    """Money amount at risk for a percentage of capital"""
    return (capital * percentage) / 100
