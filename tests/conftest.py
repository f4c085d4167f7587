"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os
from datetime import date

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rental_model.calculations.models import PropertyInputs, TemporaryFinancingInputs


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture
def as_of():
    """Fixed reference date for timeline calculations."""
    return date(2025, 1, 15)


@pytest.fixture
def rental_property():
    """A typical single-family rental."""
    return PropertyInputs(
        purchase_price=300000,
        down_payment=60000,
        loan_interest_rate=6.5,
        amortized_over=30,
        monthly_rent=2500,
        purchase_closing_costs=6000,
        estimated_repair_costs=10000,
        monthly_property_taxes=300,
        monthly_insurance=100,
        monthly_management=8,
        quarterly_hoa_fees=150,
        utilities={"water_sewer": 40, "garbage": 20},
        other_monthly_expenses=50,
        annual_income_growth=3,
        annual_expense_growth=2.5,
        annual_property_value_growth=4,
    )


@pytest.fixture
def brrrr_inputs():
    """Hard money purchase and rehab, refinanced at 75% of ARV."""
    return TemporaryFinancingInputs(
        initial_cash_investment=50000,
        renovation_costs=40000,
        temp_financing_amount=200000,
        temp_interest_rate=12,
        origination_points=2,
        temp_loan_term_months=6,
        after_repair_value=400000,
        cash_out_ltv=75,
        purchase_price=250000,
    )
