"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Iterable, Union

Money = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "RUB": "₽",
}

DEFAULT_CURRENCY = "INR"


def to_decimal(value: Union[Money, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Money) -> Decimal:
    """Round monetary value to two decimal places."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def add(a: Money, b: Money) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def multiply(value: Money, factor: Money) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def sum_money(values: Iterable[Money]) -> Decimal:
    """Sum monetary values; an empty iterable sums to Decimal("0")."""
    result = Decimal("0")
    for value in values:
        result = add(result, value)
    return result


def format_money(value: Money, currency: str = DEFAULT_CURRENCY) -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (INR, USD, EUR, etc.)

    Returns:
        Formatted string, e.g. "₹45,000.00"; unknown codes are suffixed ("10.00 CHF")
    """
    formatted = f"{round_money(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    if symbol is None:
        return f"{formatted} {currency.upper()}"
    return f"{symbol}{formatted}"
