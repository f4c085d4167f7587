"""
Property Analysis

Composes the metrics, mortgage payment and 30-year projection for a single
rental property scenario.

When temporary financing inputs are supplied, the refinanced loan replaces
the purchase loan and the cash left in the deal replaces the cash needed at
purchase, so the long-term analysis starts from the stabilized position.
"""

import logging
import math
from datetime import date
from typing import Optional

from rental_model.calculations import metrics, projection, temporary_financing
from rental_model.calculations.models import (
    ProjectionInputs,
    PropertyAnalysis,
    PropertyInputs,
    PropertyMetrics,
    TemporaryFinancingAnalysis,
    TemporaryFinancingInputs,
)
from rental_model.calculations.time_value import (
    internal_rate_of_return,
    monthly_payment,
    present_value,
)

logger = logging.getLogger(__name__)

DEFAULT_DISCOUNT_RATE = 0.10


def calculate_metrics(
    inputs: PropertyInputs,
    temp_analysis: Optional[TemporaryFinancingAnalysis] = None,
) -> PropertyMetrics:
    """
    Calculate year-zero metrics for a property.

    Cash-on-cash ROI and cap rate are reported as 0 when their base is zero.
    """
    project_cost = metrics.total_cost_of_project(
        inputs.purchase_price,
        inputs.purchase_closing_costs,
        inputs.estimated_repair_costs,
    )

    if temp_analysis is not None:
        loan = temp_analysis.refinance_results.new_loan_amount
        cash_needed = temp_analysis.final_cash_left_in_deal
    else:
        loan = metrics.loan_amount(inputs.purchase_price, inputs.down_payment)
        cash_needed = metrics.total_cash_needed(
            inputs.down_payment,
            inputs.purchase_closing_costs,
            inputs.estimated_repair_costs,
            inputs.loan_fees,
        )

    payment = monthly_payment(loan, inputs.loan_interest_rate / 100, inputs.amortized_over)
    management = metrics.management_fee(inputs.monthly_rent, inputs.monthly_management / 100)

    total_expenses = metrics.total_monthly_expenses(
        mortgage_payment=payment,
        property_taxes=inputs.monthly_property_taxes,
        insurance=inputs.monthly_insurance,
        hoa_fees=inputs.quarterly_hoa_fees / 3,
        management=management,
        utilities=inputs.utilities,
        custom_expenses=inputs.other_monthly_expenses,
    )

    cash_flow = metrics.monthly_cash_flow(inputs.monthly_rent, total_expenses)
    annual_cash_flow = cash_flow * 12

    annual_income = inputs.monthly_rent * 12
    annual_operating_expenses = (total_expenses - payment) * 12
    noi = metrics.net_operating_income(annual_income, annual_operating_expenses)
    annual_debt_service = payment * 12

    coc = metrics.cash_on_cash_roi(annual_cash_flow, cash_needed) if cash_needed > 0 else 0.0
    cap = metrics.cap_rate(noi, project_cost) if project_cost > 0 else 0.0

    return PropertyMetrics(
        total_cost_of_project=project_cost,
        total_cash_needed=cash_needed,
        loan_amount=loan,
        monthly_payment=payment,
        monthly_management_fee=management,
        total_monthly_expenses=total_expenses,
        monthly_cash_flow=cash_flow,
        annual_cash_flow=annual_cash_flow,
        annual_income=annual_income,
        annual_operating_expenses=annual_operating_expenses,
        annual_debt_service=annual_debt_service,
        annual_noi=noi,
        cash_on_cash_roi=coc,
        cap_rate=cap,
        gross_rent_multiplier=metrics.gross_rent_multiplier(inputs.purchase_price, annual_income),
        debt_coverage_ratio=metrics.debt_coverage_ratio(noi, annual_debt_service),
    )


def analyze_property(
    inputs: PropertyInputs,
    temporary_financing_inputs: Optional[TemporaryFinancingInputs] = None,
    discount_rate: float = DEFAULT_DISCOUNT_RATE,
    today: Optional[date] = None,
) -> PropertyAnalysis:
    """
    Run the full analysis for a property scenario.

    Args:
        inputs: Property inputs
        temporary_financing_inputs: Optional bridge/rehab/refinance inputs
        discount_rate: Annual rate used for the NPV of the hold
        today: Reference date for the temporary financing timeline

    Returns:
        PropertyAnalysis with metrics, projections, return on equity, NPV and IRR
    """
    temp_analysis = None
    starting_value = inputs.purchase_price
    initial_equity = inputs.down_payment + inputs.estimated_repair_costs

    if temporary_financing_inputs is not None:
        temp_analysis = temporary_financing.analyze(temporary_financing_inputs, today=today)
        initial_equity = temp_analysis.final_cash_left_in_deal
        if temporary_financing_inputs.after_repair_value > 0:
            starting_value = temporary_financing_inputs.after_repair_value

    property_metrics = calculate_metrics(inputs, temp_analysis)

    projections = projection.project(
        ProjectionInputs(
            loan_amount=property_metrics.loan_amount,
            monthly_rate=inputs.loan_interest_rate / 100 / 12,
            total_payments=inputs.amortized_over * 12,
            monthly_payment=property_metrics.monthly_payment,
            monthly_income=inputs.monthly_rent,
            monthly_operating_expenses=(
                property_metrics.total_monthly_expenses - property_metrics.monthly_payment
            ),
            purchase_price=starting_value,
            income_growth_rate=inputs.annual_income_growth,
            expense_growth_rate=inputs.annual_expense_growth,
            property_value_growth_rate=inputs.annual_property_value_growth,
        )
    )

    first_year = projections[0]
    total_return = (
        first_year.annual_cash_flow + first_year.principal_payment + first_year.appreciation
    )
    return_on_equity = (total_return / initial_equity) * 100 if initial_equity > 0 else 0.0

    cash_flows = projection.projection_cash_flows(property_metrics.total_cash_needed, projections)
    npv = present_value(discount_rate, cash_flows)
    irr = internal_rate_of_return(cash_flows)

    if not math.isfinite(irr):
        logger.info("IRR could not be determined for the projected hold")

    return PropertyAnalysis(
        metrics=property_metrics,
        projections=projections,
        return_on_equity=return_on_equity,
        npv=npv,
        irr=irr,
        discount_rate=discount_rate,
        temporary_financing=temp_analysis,
    )
