"""
Financial calculation API endpoints.

These endpoints accept inputs and return calculated results.
Used by the calculator UI for real-time updates.
"""

import logging
import math
from datetime import date
from typing import Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from rental_model.config import get_settings
from rental_model.calculations import (
    amortization,
    analysis,
    metrics,
    projection,
    temporary_financing,
    time_value,
    validators,
)
from rental_model.calculations.models import (
    LoanTerms,
    ProjectionInputs,
    PropertyInputs,
    TemporaryFinancingInputs,
    to_dict,
)

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter()


def _finite(value: float) -> Optional[float]:
    """Non-finite results cannot be displayed; send them as null."""
    return value if math.isfinite(value) else None


class LoanInput(BaseModel):
    """Input for loan calculations. Rate is a percentage."""

    principal: float
    annual_rate_percent: float
    term_years: int


class MortgagePaymentResponse(BaseModel):
    monthly_payment: float
    total_payments: int
    total_paid: float
    total_interest: float


@router.post("/mortgage-payment", response_model=MortgagePaymentResponse)
async def calculate_mortgage_payment(inputs: LoanInput):
    """Calculate the monthly payment of a fixed-rate loan."""
    payment = time_value.monthly_payment(
        inputs.principal, inputs.annual_rate_percent / 100, inputs.term_years
    )
    total_payments = max(0, inputs.term_years * 12)
    total_paid = round(payment * total_payments, 2)

    return MortgagePaymentResponse(
        monthly_payment=payment,
        total_payments=total_payments,
        total_paid=total_paid,
        total_interest=round(max(0.0, total_paid - inputs.principal), 2),
    )


class AmortizationInput(LoanInput):
    """Input for amortization calculation."""

    extra_monthly_principal: float = 0.0
    lump_sum_payments: Dict[int, float] = {}


@router.post("/amortization")
async def calculate_amortization(inputs: AmortizationInput):
    """Generate loan amortization schedule."""
    schedule = amortization.build_schedule(
        LoanTerms(
            principal=inputs.principal,
            annual_rate_percent=inputs.annual_rate_percent,
            term_years=inputs.term_years,
        ),
        extra_monthly_principal=inputs.extra_monthly_principal,
        lump_sum_payments=inputs.lump_sum_payments,
    )

    return {
        "schedule": [to_dict(row) for row in schedule],
        "total_interest": amortization.total_interest(schedule),
        "total_principal": amortization.total_principal(schedule),
        "payoff_month": amortization.payoff_month(schedule),
    }


class IRRInput(BaseModel):
    """Input for IRR calculation."""

    cash_flows: List[float]
    discount_rate: Optional[float] = None
    guess: float = time_value.DEFAULT_GUESS


class IRRResponse(BaseModel):
    """Response with IRR calculation. IRR is null when no root exists."""

    irr: Optional[float] = None
    npv: Optional[float] = None
    discount_rate: float


@router.post("/irr", response_model=IRRResponse)
async def calculate_irr_endpoint(inputs: IRRInput):
    """Calculate IRR and NPV for given cash flows."""
    discount_rate = inputs.discount_rate
    if discount_rate is None:
        discount_rate = settings.default_discount_rate

    irr_val = time_value.internal_rate_of_return(inputs.cash_flows, inputs.guess)
    npv = time_value.present_value(discount_rate, inputs.cash_flows)

    return IRRResponse(irr=_finite(irr_val), npv=_finite(npv), discount_rate=discount_rate)


class ProjectionInput(BaseModel):
    """Input for the long-term projection. Rates are percentages."""

    loan_amount: float
    annual_rate_percent: float
    term_years: int
    monthly_income: float
    monthly_operating_expenses: float
    purchase_price: float
    income_growth_rate: float = 0.0
    expense_growth_rate: float = 0.0
    property_value_growth_rate: float = 0.0


@router.post("/projections")
async def calculate_projections(inputs: ProjectionInput):
    """Generate yearly cash flow and equity projections."""
    payment = time_value.monthly_payment(
        inputs.loan_amount, inputs.annual_rate_percent / 100, inputs.term_years
    )

    projections = projection.project(
        ProjectionInputs(
            loan_amount=inputs.loan_amount,
            monthly_rate=inputs.annual_rate_percent / 100 / 12,
            total_payments=inputs.term_years * 12,
            monthly_payment=payment,
            monthly_income=inputs.monthly_income,
            monthly_operating_expenses=inputs.monthly_operating_expenses,
            purchase_price=inputs.purchase_price,
            income_growth_rate=inputs.income_growth_rate,
            expense_growth_rate=inputs.expense_growth_rate,
            property_value_growth_rate=inputs.property_value_growth_rate,
        ),
        years=settings.projection_years,
    )

    return {
        "monthly_payment": payment,
        "projections": [to_dict(row) for row in projections],
    }


class TemporaryFinancingInput(BaseModel):
    """Input for a buy-rehab-refinance analysis. Rates, points and LTV in percent."""

    initial_cash_investment: float = 0.0
    renovation_costs: float = 0.0
    temp_financing_amount: float = 0.0
    temp_interest_rate: float = 0.0
    origination_points: float = 0.0
    temp_loan_term_months: int = settings.default_temp_loan_term_months
    after_repair_value: float = 0.0
    cash_out_ltv: float = settings.default_cash_out_ltv
    purchase_price: float = 0.0

    def to_inputs(self) -> TemporaryFinancingInputs:
        return TemporaryFinancingInputs(**self.model_dump(exclude={"as_of"}))


class TemporaryFinancingRequest(TemporaryFinancingInput):
    as_of: Optional[date] = None


@router.post("/temporary-financing")
async def calculate_temporary_financing(inputs: TemporaryFinancingRequest):
    """Run the temporary financing analysis and its validation."""
    tf_inputs = inputs.to_inputs()

    result = temporary_financing.analyze(
        tf_inputs,
        today=inputs.as_of,
        refinance_months=settings.default_refinance_months,
    )
    validation = temporary_financing.validate(tf_inputs)

    if not validation.is_valid:
        logger.info(f"Temporary financing scenario flagged: {validation.errors}")

    return {
        "analysis": to_dict(result),
        "validation": to_dict(validation),
    }


@router.post("/temporary-financing/validate")
async def validate_temporary_financing(inputs: TemporaryFinancingInput):
    """Validate temporary financing inputs without running the analysis."""
    return to_dict(temporary_financing.validate(inputs.to_inputs()))


class ReturnsInput(BaseModel):
    """Input for cash-on-cash ROI and cap rate."""

    annual_cash_flow: float
    total_cash_invested: float
    noi: float
    total_cost_of_project: float


@router.post("/returns")
async def calculate_returns(inputs: ReturnsInput):
    """Calculate cash-on-cash ROI and cap rate (both as percentages)."""
    try:
        return {
            "cash_on_cash_roi": metrics.cash_on_cash_roi(
                inputs.annual_cash_flow, inputs.total_cash_invested
            ),
            "cap_rate": metrics.cap_rate(inputs.noi, inputs.total_cost_of_project),
        }
    except ZeroDivisionError as e:
        raise HTTPException(status_code=400, detail=str(e))


class PropertyInput(BaseModel):
    """Input for a full property analysis. Rates are percentages."""

    purchase_price: float
    down_payment: float
    loan_interest_rate: float
    amortized_over: int
    monthly_rent: float
    purchase_closing_costs: float = 0.0
    estimated_repair_costs: float = 0.0
    loan_fees: float = 0.0
    monthly_property_taxes: float = 0.0
    monthly_insurance: float = 0.0
    monthly_management: float = 0.0
    quarterly_hoa_fees: float = 0.0
    utilities: Dict[str, float] = {}
    other_monthly_expenses: float = 0.0
    annual_income_growth: float = 0.0
    annual_expense_growth: float = 0.0
    annual_property_value_growth: float = 0.0


class PropertyAnalysisRequest(BaseModel):
    property: PropertyInput
    temporary_financing: Optional[TemporaryFinancingInput] = None
    discount_rate: Optional[float] = None
    as_of: Optional[date] = None


@router.post("/property-analysis")
async def calculate_property_analysis(inputs: PropertyAnalysisRequest):
    """Calculate metrics, projections and hold returns for a property."""
    discount_rate = inputs.discount_rate
    if discount_rate is None:
        discount_rate = settings.default_discount_rate

    tf_inputs = None
    if inputs.temporary_financing is not None:
        tf_inputs = inputs.temporary_financing.to_inputs()

    result = analysis.analyze_property(
        PropertyInputs(**inputs.property.model_dump()),
        temporary_financing_inputs=tf_inputs,
        discount_rate=discount_rate,
        today=inputs.as_of,
    )

    data = to_dict(result)
    data["npv"] = _finite(result.npv)
    data["irr"] = _finite(result.irr)
    return data


class InputValidationRequest(BaseModel):
    """Raw field values as entered; numeric strings are accepted."""

    purchase_price: Optional[Union[float, str]] = None
    down_payment: Optional[Union[float, str]] = None
    interest_rate: Optional[Union[float, str]] = None
    monthly_rent: Optional[Union[float, str]] = None
    growth_rates: Dict[str, Union[float, str]] = {}


@router.post("/validate-inputs")
async def validate_inputs(inputs: InputValidationRequest):
    """Check raw inputs against their allowed ranges."""
    return {
        "purchase_price": validators.validate_purchase_price(inputs.purchase_price),
        "down_payment": validators.validate_down_payment(
            inputs.down_payment, inputs.purchase_price
        ),
        "interest_rate": validators.validate_interest_rate(inputs.interest_rate),
        "monthly_rent": validators.validate_monthly_rent(inputs.monthly_rent),
        "growth_rates": {
            name: validators.validate_growth_rate(value)
            for name, value in inputs.growth_rates.items()
        },
    }
