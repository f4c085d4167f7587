"""
Temporary Financing (BRRRR) Calculations

Models a bridge or hard-money loan used to buy and renovate a property,
retired by a cash-out refinance on the after-repair value (ARV). The result
is the investor's residual cash position once the refinance closes.
"""

import logging
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from rental_model.calculations.models import (
    RefinanceResult,
    TemporaryFinancingAnalysis,
    TemporaryFinancingCosts,
    TemporaryFinancingInputs,
    ValidationResult,
)

logger = logging.getLogger(__name__)

DEFAULT_REFINANCE_MONTHS = 1
MAX_TYPICAL_LTV = 80
MAX_TYPICAL_RATE = 20
MAX_TYPICAL_TERM_MONTHS = 12


def financing_costs(
    amount: float,
    annual_rate_percent: float,
    term_months: int,
    points_percent: float,
) -> TemporaryFinancingCosts:
    """
    Calculate interest and origination points on a temporary loan.

    Interest is simple (not amortized) over the term.

    Args:
        amount: Temporary financing amount
        annual_rate_percent: Annual interest rate (e.g., 12 for 12%)
        term_months: Loan term in months
        points_percent: Origination points (e.g., 2 for 2%)
    """
    if amount <= 0:
        return TemporaryFinancingCosts(interest_cost=0.0, points_cost=0.0, total_cost=0.0)

    interest_cost = amount * (annual_rate_percent / 100) * (term_months / 12)
    points_cost = amount * (points_percent / 100)

    return TemporaryFinancingCosts(
        interest_cost=interest_cost,
        points_cost=points_cost,
        total_cost=interest_cost + points_cost,
    )


def cash_out_refinance(
    after_repair_value: float, ltv_percent: float, temp_financing_amount: float
) -> RefinanceResult:
    """
    Calculate a cash-out refinance that retires the temporary loan.

    Cash returned is never negative: when the new loan does not cover the
    temporary balance, nothing comes back to the investor.
    """
    new_loan_amount = after_repair_value * (ltv_percent / 100)
    cash_returned = max(0.0, new_loan_amount - temp_financing_amount)

    return RefinanceResult(
        new_loan_amount=new_loan_amount,
        cash_returned=cash_returned,
        loan_to_value_used=ltv_percent,
    )


def total_initial_investment(
    cash_invested: float, renovation_costs: float, temp_financing_total_cost: float
) -> float:
    """Total money put into the deal before the refinance."""
    return cash_invested + renovation_costs + temp_financing_total_cost


def final_cash_left_in_deal(total_investment: float, cash_returned: float) -> float:
    """Net cash remaining in the deal after the refinance (floored at zero)."""
    return max(0.0, total_investment - cash_returned)


def analysis_start_date(
    temp_loan_term_months: int,
    refinance_months: int = DEFAULT_REFINANCE_MONTHS,
    today: Optional[date] = None,
) -> date:
    """
    Date the stabilized long-term analysis should begin.

    Args:
        temp_loan_term_months: Months the temporary loan is outstanding
        refinance_months: Months the refinance takes to close
        today: Reference date (defaults to the current date)
    """
    if today is None:
        today = date.today()
    return today + relativedelta(months=temp_loan_term_months + refinance_months)


def analyze(
    inputs: TemporaryFinancingInputs,
    today: Optional[date] = None,
    refinance_months: int = DEFAULT_REFINANCE_MONTHS,
) -> TemporaryFinancingAnalysis:
    """
    Run the full temporary financing analysis.

    The temporary loan is assumed to be repaid in full from the refinance.

    Args:
        inputs: Temporary financing inputs
        today: Reference date for the analysis start date
        refinance_months: Months the refinance takes to close

    Returns:
        TemporaryFinancingAnalysis
    """
    costs = financing_costs(
        inputs.temp_financing_amount,
        inputs.temp_interest_rate,
        inputs.temp_loan_term_months,
        inputs.origination_points,
    )

    total_investment = total_initial_investment(
        inputs.initial_cash_investment,
        inputs.renovation_costs,
        costs.total_cost,
    )

    refinance = cash_out_refinance(
        inputs.after_repair_value,
        inputs.cash_out_ltv,
        inputs.temp_financing_amount,
    )

    cash_left = final_cash_left_in_deal(total_investment, refinance.cash_returned)

    logger.debug(
        f"Temporary financing: invested {total_investment:.2f}, "
        f"returned {refinance.cash_returned:.2f}, left in deal {cash_left:.2f}"
    )

    return TemporaryFinancingAnalysis(
        temp_financing_costs=costs,
        refinance_results=refinance,
        total_initial_investment=total_investment,
        final_cash_left_in_deal=cash_left,
        analysis_start_date=analysis_start_date(
            inputs.temp_loan_term_months, refinance_months, today
        ),
        temp_loan_term_months=inputs.temp_loan_term_months,
        is_using_temporary_financing=True,
    )


def validate(inputs: TemporaryFinancingInputs) -> ValidationResult:
    """
    Check temporary financing inputs for business-logic problems.

    Errors mark an economically inconsistent scenario; warnings flag unusual
    but possible inputs. The scenario stays computable either way.
    """
    errors = []
    warnings = []

    acquisition_cost = inputs.purchase_price + inputs.renovation_costs
    if 0 < inputs.after_repair_value <= acquisition_cost:
        warnings.append(
            "ARV should typically be higher than purchase price + renovation costs"
        )

    if inputs.cash_out_ltv > MAX_TYPICAL_LTV:
        warnings.append("Cash-out refinance LTV above 80% is aggressive and may be difficult to obtain")

    if inputs.temp_interest_rate > MAX_TYPICAL_RATE:
        warnings.append("Temporary financing rate above 20% is unusually high")

    if inputs.temp_loan_term_months > MAX_TYPICAL_TERM_MONTHS:
        warnings.append("Temporary financing terms longer than 12 months are uncommon")

    max_refinance_amount = inputs.after_repair_value * (inputs.cash_out_ltv / 100)
    if (
        inputs.after_repair_value > 0
        and inputs.temp_financing_amount > 0
        and max_refinance_amount < inputs.temp_financing_amount
    ):
        errors.append(
            "Refinance loan amount may not cover the outstanding temporary financing balance"
        )

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
