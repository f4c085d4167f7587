"""
Time Value of Money

Loan payment, remaining balance, NPV and IRR primitives.

IRR is solved with the secant method and falls back to bisection when the
secant iteration stalls or diverges. When no root can be bracketed the
result is NaN rather than an exception, so callers must check for
non-finite values before display.
"""

import logging
import math
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100
TOLERANCE = 1e-7
DEFAULT_GUESS = 0.1
SECANT_STEP = 0.05
MIN_DENOMINATOR = 1e-12

BISECTION_LOWER = -0.99
BISECTION_UPPER = 1.0
BISECTION_UPPER_LIMIT = 10.0
BISECTION_EXPANSION_STEP = 0.5


def monthly_payment(principal: float, annual_rate: float, years: float) -> float:
    """
    Calculate the monthly payment of a fixed-rate amortizing loan (PMT).

    Args:
        principal: Loan amount
        annual_rate: Annual interest rate as decimal (e.g., 0.06 for 6%)
        years: Loan term in years

    Returns:
        Monthly payment rounded to the cent. Zero-rate loans are repaid
        straight-line and are not rounded.
    """
    if principal <= 0 or years <= 0:
        return 0.0

    number_of_payments = years * 12

    if annual_rate == 0:
        return principal / number_of_payments

    monthly_rate = annual_rate / 12
    growth = (1 + monthly_rate) ** number_of_payments
    payment = principal * (monthly_rate * growth) / (growth - 1)

    return round(payment, 2)


def remaining_balance(
    principal: float,
    monthly_rate: float,
    total_payments: int,
    payments_made: int,
) -> float:
    """
    Calculate the outstanding balance after a number of payments.

    Args:
        principal: Original loan amount
        monthly_rate: Monthly interest rate as decimal
        total_payments: Number of payments over the full term
        payments_made: Number of payments already made

    Returns:
        Remaining balance (0 once the term is exhausted)
    """
    if principal <= 0 or payments_made >= total_payments:
        return 0.0

    if monthly_rate == 0:
        principal_per_payment = principal / total_payments
        return principal - principal_per_payment * payments_made

    full_growth = (1 + monthly_rate) ** total_payments
    paid_growth = (1 + monthly_rate) ** payments_made

    return principal * (full_growth - paid_growth) / (full_growth - 1)


def present_value(discount_rate: float, cashflows: Sequence[float]) -> float:
    """
    Calculate NPV of periodic cash flows.

    Args:
        discount_rate: Periodic discount rate (e.g., 0.10 for 10%)
        cashflows: Cash flows, index 0 being the initial outlay (undiscounted)

    Returns:
        NPV value (0 for an empty series)
    """
    flows = np.asarray(cashflows, dtype=float)
    if flows.size == 0:
        return 0.0

    periods = np.arange(flows.size)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        discounted = flows / np.power(1 + discount_rate, periods)

    return float(np.sum(discounted))


def _secant(cashflows: Sequence[float], guess: float) -> float:
    """Secant iteration; returns NaN when it fails to converge."""
    rate_prev = guess
    rate = guess + SECANT_STEP
    npv_prev = present_value(rate_prev, cashflows)
    npv = present_value(rate, cashflows)

    for _ in range(MAX_ITERATIONS):
        denominator = npv - npv_prev
        if not math.isfinite(denominator) or abs(denominator) < MIN_DENOMINATOR:
            break

        new_rate = rate - npv * (rate - rate_prev) / denominator
        if not math.isfinite(new_rate) or new_rate <= -1:
            break

        if abs(new_rate - rate) < TOLERANCE:
            return new_rate

        rate_prev, npv_prev = rate, npv
        rate, npv = new_rate, present_value(new_rate, cashflows)

    return math.nan


def _changes_sign(npv_low: float, npv_high: float) -> bool:
    # Long series overflow to +inf near -100%; an infinite endpoint still has a sign.
    if math.isnan(npv_low) or math.isnan(npv_high):
        return False
    return npv_low * npv_high < 0


def _bisection(cashflows: Sequence[float]) -> float:
    """Bisection over an expanding bracket; returns NaN when no root is bracketed."""
    low = BISECTION_LOWER
    high = BISECTION_UPPER
    npv_low = present_value(low, cashflows)
    npv_high = present_value(high, cashflows)

    while not _changes_sign(npv_low, npv_high):
        if high >= BISECTION_UPPER_LIMIT:
            return math.nan
        high += BISECTION_EXPANSION_STEP
        npv_high = present_value(high, cashflows)

    mid = (low + high) / 2
    for _ in range(MAX_ITERATIONS):
        mid = (low + high) / 2
        npv_mid = present_value(mid, cashflows)

        if abs(npv_mid) < TOLERANCE:
            return mid

        if npv_low * npv_mid < 0:
            high = mid
        else:
            low, npv_low = mid, npv_mid

    return mid


def internal_rate_of_return(
    cashflows: Sequence[float], initial_guess: float = DEFAULT_GUESS
) -> float:
    """
    Calculate IRR (the rate at which NPV is zero) of periodic cash flows.

    Args:
        cashflows: Periodic cash flows, index 0 being the initial outlay
        initial_guess: Starting rate for the secant iteration

    Returns:
        Periodic IRR as decimal, or NaN if no real root was found
    """
    rate = _secant(cashflows, initial_guess)
    if math.isfinite(rate):
        return rate

    logger.debug("Secant IRR did not converge, falling back to bisection")
    rate = _bisection(cashflows)
    if math.isnan(rate):
        logger.debug(f"No IRR root found for {len(cashflows)} cash flows")

    return rate
