"""
Loan Amortization Calculations

Builds month-by-month amortization schedules with optional extra principal
and lump-sum payments.
"""

from typing import Dict, Iterator, List, Optional

from rental_model.calculations.models import LoanTerms, PaymentBreakdown
from rental_model.calculations.time_value import monthly_payment

PAID_OFF_THRESHOLD = 0.01


def iter_schedule(
    loan: LoanTerms,
    extra_monthly_principal: float = 0.0,
    lump_sum_payments: Optional[Dict[int, float]] = None,
) -> Iterator[PaymentBreakdown]:
    """
    Yield amortization rows until the loan is retired or the term ends.

    Each row is rounded to cents on its own and the rounded balance is
    carried into the next month.

    Args:
        loan: Loan terms
        extra_monthly_principal: Additional principal paid every month
        lump_sum_payments: One-off principal payments keyed by month number

    Yields:
        PaymentBreakdown rows, month 1 first
    """
    lump_sums = lump_sum_payments or {}
    monthly_rate = loan.monthly_rate
    base_payment = monthly_payment(
        loan.principal, loan.annual_rate_percent / 100, loan.term_years
    )
    balance = round(max(0.0, loan.principal), 2)

    for month in range(1, loan.total_payments + 1):
        if balance <= PAID_OFF_THRESHOLD:
            break

        interest = round(balance * monthly_rate, 2) if monthly_rate else 0.0
        principal = round(base_payment - interest, 2)
        extra = round(extra_monthly_principal + lump_sums.get(month, 0.0), 2)

        if principal + extra > balance:
            # Final payment: never pay past the outstanding balance
            principal = balance
            extra = 0.0
        elif month == loan.total_payments:
            # Last scheduled month absorbs the cents lost to payment rounding
            principal = round(balance - extra, 2)

        balance = round(max(0.0, balance - principal - extra), 2)

        yield PaymentBreakdown(
            month=month,
            payment=round(interest + principal + extra, 2),
            interest=interest,
            principal=principal,
            extra_principal=extra,
            balance=balance,
        )


def build_schedule(
    loan: LoanTerms,
    extra_monthly_principal: float = 0.0,
    lump_sum_payments: Optional[Dict[int, float]] = None,
) -> List[PaymentBreakdown]:
    """Generate a full amortization schedule."""
    return list(iter_schedule(loan, extra_monthly_principal, lump_sum_payments))


def total_interest(schedule: List[PaymentBreakdown]) -> float:
    """Calculate total interest paid over the schedule."""
    return round(sum(row.interest for row in schedule), 2)


def total_principal(schedule: List[PaymentBreakdown]) -> float:
    """Calculate total principal retired, extra payments included."""
    return round(sum(row.principal + row.extra_principal for row in schedule), 2)


def payoff_month(schedule: List[PaymentBreakdown]) -> int:
    """Month in which the loan is retired (0 for an empty schedule)."""
    return schedule[-1].month if schedule else 0
