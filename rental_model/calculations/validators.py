"""
Input Validation

Bounded predicates for raw user inputs. None of them raise: a value that
cannot be read as a number is simply invalid.
"""

import math
from typing import Optional, Union

Number = Union[int, float, str]

MAX_PURCHASE_PRICE = 50_000_000
MIN_INTEREST_RATE = 0.1
MAX_INTEREST_RATE = 15.0
MAX_MONTHLY_RENT = 100_000
MAX_GROWTH_RATE = 20


def _to_number(value: Optional[Number]) -> float:
    """Read a number or numeric string; NaN when it cannot be read."""
    if value is None or isinstance(value, bool):
        return math.nan
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def parse_numeric(value: Optional[Number], fallback: float = 0.0) -> float:
    """Parse a numeric input, returning ``fallback`` when it is not a number."""
    number = _to_number(value)
    return fallback if math.isnan(number) else number


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp a value between minimum and maximum."""
    return min(max(value, minimum), maximum)


def validate_purchase_price(value: Number) -> bool:
    number = _to_number(value)
    return 0 < number <= MAX_PURCHASE_PRICE


def validate_down_payment(down_payment: Number, purchase_price: Number) -> bool:
    """Down payment must be between zero and the purchase price."""
    dp = _to_number(down_payment)
    price = _to_number(purchase_price)
    return 0 <= dp <= price


def validate_interest_rate(value: Number) -> bool:
    """Annual interest rate in percent."""
    number = _to_number(value)
    return MIN_INTEREST_RATE <= number <= MAX_INTEREST_RATE


def validate_monthly_rent(value: Number) -> bool:
    number = _to_number(value)
    return 0 < number <= MAX_MONTHLY_RENT


def validate_growth_rate(value: Number) -> bool:
    """Annual growth rate in percent."""
    number = _to_number(value)
    return 0 <= number <= MAX_GROWTH_RATE
