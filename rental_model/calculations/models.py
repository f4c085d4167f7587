"""
Calculation Records

Plain, immutable inputs and results shared by the calculation modules.
Every record is built fresh per calculation call.
"""

from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Dict, List, Optional


@dataclass(frozen=True)
class LoanTerms:
    """Fixed-rate loan terms."""

    principal: float
    annual_rate_percent: float  # e.g. 6.0 for 6%
    term_years: int

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / 12

    @property
    def total_payments(self) -> int:
        return self.term_years * 12


@dataclass(frozen=True)
class PaymentBreakdown:
    """One row of an amortization schedule (money rounded to cents)."""

    month: int
    payment: float
    interest: float
    principal: float
    extra_principal: float
    balance: float


@dataclass(frozen=True)
class ProjectionInputs:
    """Inputs for the 30-year projection. Growth rates are percentages."""

    loan_amount: float
    monthly_rate: float
    total_payments: int
    monthly_payment: float
    monthly_income: float
    monthly_operating_expenses: float
    purchase_price: float
    income_growth_rate: float = 0.0
    expense_growth_rate: float = 0.0
    property_value_growth_rate: float = 0.0


@dataclass(frozen=True)
class ProjectionYear:
    """Yearly snapshot of cash flow and equity."""

    year: int
    annual_income: float
    annual_expenses: float
    annual_cash_flow: float
    property_value: float
    loan_balance: float
    equity: float
    principal_payment: float
    interest_payment: float
    appreciation: float


@dataclass(frozen=True)
class TemporaryFinancingCosts:
    interest_cost: float
    points_cost: float
    total_cost: float


@dataclass(frozen=True)
class RefinanceResult:
    new_loan_amount: float
    cash_returned: float
    loan_to_value_used: float


@dataclass(frozen=True)
class TemporaryFinancingInputs:
    """Inputs for a buy-rehab-refinance cycle. Rates, points and LTV in percent."""

    initial_cash_investment: float = 0.0
    renovation_costs: float = 0.0
    temp_financing_amount: float = 0.0
    temp_interest_rate: float = 0.0
    origination_points: float = 0.0
    temp_loan_term_months: int = 6
    after_repair_value: float = 0.0
    cash_out_ltv: float = 75.0
    purchase_price: float = 0.0


@dataclass(frozen=True)
class TemporaryFinancingAnalysis:
    temp_financing_costs: TemporaryFinancingCosts
    refinance_results: RefinanceResult
    total_initial_investment: float
    final_cash_left_in_deal: float
    analysis_start_date: date
    temp_loan_term_months: int
    is_using_temporary_financing: bool = True


@dataclass(frozen=True)
class ValidationResult:
    """Errors block a scenario; warnings only flag unusual inputs."""

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PropertyInputs:
    """
    Inputs for a single rental property scenario.

    Interest rate, management and growth rates are percentages. HOA fees are
    quarterly; every other expense is monthly.
    """

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
    utilities: Dict[str, float] = field(default_factory=dict)
    other_monthly_expenses: float = 0.0
    annual_income_growth: float = 0.0
    annual_expense_growth: float = 0.0
    annual_property_value_growth: float = 0.0


@dataclass(frozen=True)
class PropertyMetrics:
    """Year-zero metrics for a property scenario."""

    total_cost_of_project: float
    total_cash_needed: float
    loan_amount: float
    monthly_payment: float
    monthly_management_fee: float
    total_monthly_expenses: float
    monthly_cash_flow: float
    annual_cash_flow: float
    annual_income: float
    annual_operating_expenses: float
    annual_debt_service: float
    annual_noi: float
    cash_on_cash_roi: float
    cap_rate: float
    gross_rent_multiplier: float
    debt_coverage_ratio: float


@dataclass(frozen=True)
class PropertyAnalysis:
    metrics: PropertyMetrics
    projections: List[ProjectionYear]
    return_on_equity: float
    npv: float
    irr: float
    discount_rate: float
    temporary_financing: Optional[TemporaryFinancingAnalysis] = None


def to_dict(record) -> Dict:
    """Convert a record (and nested records) to a plain dict."""
    return asdict(record)
