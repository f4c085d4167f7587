"""
Long-Term Projections

Compounds income, expenses and property value over a 30-year hold and
reconciles them against the loan balance to produce yearly cash flow and
equity snapshots.
"""

from typing import List

from rental_model.calculations.models import ProjectionInputs, ProjectionYear
from rental_model.calculations.time_value import remaining_balance

PROJECTION_YEARS = 30


def apply_growth(value: float, growth_rate_percent: float) -> float:
    """Apply one year of growth given as a percentage."""
    return value * (1 + growth_rate_percent / 100)


def project(inputs: ProjectionInputs, years: int = PROJECTION_YEARS) -> List[ProjectionYear]:
    """
    Generate yearly projections.

    Growth is applied before a year's figures are reported, so year 1 already
    includes one year of growth. Loan balances come from the closed-form
    remaining balance at month ``year * 12``. Debt service only counts the
    payments still due in a year, so once the loan is retired principal,
    interest and debt service all fall to zero.

    Args:
        inputs: Projection inputs
        years: Number of years to project (30 unless overridden)

    Returns:
        List of ProjectionYear records, year 1 first
    """
    projections = []

    annual_income = inputs.monthly_income * 12
    annual_expenses = inputs.monthly_operating_expenses * 12
    property_value = inputs.purchase_price
    previous_balance = inputs.loan_amount

    for year in range(1, years + 1):
        payments_in_year = min(12, max(0, inputs.total_payments - (year - 1) * 12))
        annual_debt_service = inputs.monthly_payment * payments_in_year

        annual_income = apply_growth(annual_income, inputs.income_growth_rate)
        annual_expenses = apply_growth(annual_expenses, inputs.expense_growth_rate)
        previous_value = property_value
        property_value = apply_growth(property_value, inputs.property_value_growth_rate)

        loan_balance = remaining_balance(
            inputs.loan_amount,
            inputs.monthly_rate,
            inputs.total_payments,
            year * 12,
        )
        principal_payment = previous_balance - loan_balance
        interest_payment = annual_debt_service - principal_payment

        projections.append(
            ProjectionYear(
                year=year,
                annual_income=annual_income,
                annual_expenses=annual_expenses,
                annual_cash_flow=annual_income - annual_expenses - annual_debt_service,
                property_value=property_value,
                loan_balance=loan_balance,
                equity=property_value - loan_balance,
                principal_payment=principal_payment,
                interest_payment=interest_payment,
                appreciation=property_value - previous_value,
            )
        )

        previous_balance = loan_balance

    return projections


def projection_cash_flows(
    initial_investment: float, projections: List[ProjectionYear]
) -> List[float]:
    """
    Build a cash flow series for NPV/IRR from a projection.

    The initial investment is the (negative) period-0 outlay; each year
    contributes its cash flow, and the final year also returns its equity
    as sale proceeds.
    """
    cash_flows = [-initial_investment]
    for row in projections:
        cash_flows.append(row.annual_cash_flow)
    if projections:
        cash_flows[-1] += projections[-1].equity
    return cash_flows
