"""
Investment Metrics

Operating and return ratios for a rental property: NOI, cap rate,
cash-on-cash ROI, gross rent multiplier and debt coverage, plus the cost
and expense roll-ups they are computed from.

Cap rate and cash-on-cash ROI raise ZeroDivisionError for a zero base,
since no meaningful ratio exists. GRM and DCR return 0 instead.
"""

from typing import Dict, Optional


def net_operating_income(annual_income: float, annual_operating_expenses: float) -> float:
    """NOI: income minus operating expenses, excluding debt service."""
    return annual_income - annual_operating_expenses


def cap_rate(noi: float, total_cost_of_project: float) -> float:
    """
    Calculate capitalization rate.

    Args:
        noi: Net operating income
        total_cost_of_project: Purchase price, closing costs and repairs

    Returns:
        Cap rate as percentage

    Raises:
        ZeroDivisionError: If the total cost is zero
    """
    if total_cost_of_project == 0:
        raise ZeroDivisionError("Total cost cannot be zero")

    return (noi / total_cost_of_project) * 100


def cash_on_cash_roi(annual_cash_flow: float, total_cash_invested: float) -> float:
    """
    Calculate cash-on-cash return on investment.

    Args:
        annual_cash_flow: Annual cash flow after all expenses
        total_cash_invested: Down payment, closing costs, repairs and fees

    Returns:
        Cash-on-cash ROI as percentage

    Raises:
        ZeroDivisionError: If the cash invested is zero
    """
    if total_cash_invested == 0:
        raise ZeroDivisionError("Total cash invested cannot be zero")

    return (annual_cash_flow / total_cash_invested) * 100


def gross_rent_multiplier(purchase_price: float, annual_income: float) -> float:
    """Purchase price over annual income (0 when there is no income)."""
    if annual_income == 0:
        return 0.0
    return purchase_price / annual_income


def debt_coverage_ratio(noi: float, annual_debt_service: float) -> float:
    """NOI over annual debt service (0 when there is no debt)."""
    if annual_debt_service == 0:
        return 0.0
    return noi / annual_debt_service


def total_cost_of_project(
    purchase_price: float, closing_costs: float, repair_costs: float
) -> float:
    return purchase_price + closing_costs + repair_costs


def total_cash_needed(
    down_payment: float,
    closing_costs: float,
    repair_costs: float,
    loan_fees: float = 0.0,
) -> float:
    return down_payment + closing_costs + repair_costs + loan_fees


def loan_amount(purchase_price: float, down_payment: float) -> float:
    return max(0.0, purchase_price - down_payment)


def management_fee(monthly_rent: float, management_input: float) -> float:
    """
    Calculate the monthly management fee.

    Inputs below 1 are a decimal fraction of rent, inputs up to 100 a whole
    percentage, and anything larger a flat monthly dollar amount.
    """
    if management_input < 1:
        return monthly_rent * management_input
    if management_input <= 100:
        return monthly_rent * (management_input / 100)
    return management_input


def total_monthly_expenses(
    mortgage_payment: float = 0.0,
    property_taxes: float = 0.0,
    insurance: float = 0.0,
    hoa_fees: float = 0.0,
    management: float = 0.0,
    utilities: Optional[Dict[str, float]] = None,
    custom_expenses: float = 0.0,
) -> float:
    """Sum every monthly expense, mortgage included."""
    utilities_total = sum((amount or 0.0) for amount in (utilities or {}).values())
    return (
        mortgage_payment
        + property_taxes
        + insurance
        + hoa_fees
        + management
        + utilities_total
        + custom_expenses
    )


def monthly_cash_flow(monthly_income: float, total_monthly_expenses: float) -> float:
    return monthly_income - total_monthly_expenses


def compound_growth(initial_value: float, growth_rate_percent: float, years: float) -> float:
    """Value after compounding an annual percentage growth rate."""
    return initial_value * (1 + growth_rate_percent / 100) ** years
