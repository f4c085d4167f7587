"""
Tests for the calculation API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from rental_model.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def property_payload():
    return {
        "purchase_price": 300000,
        "down_payment": 60000,
        "loan_interest_rate": 6.5,
        "amortized_over": 30,
        "monthly_rent": 2500,
        "purchase_closing_costs": 6000,
        "estimated_repair_costs": 10000,
        "monthly_property_taxes": 300,
        "monthly_insurance": 100,
        "monthly_management": 8,
        "annual_income_growth": 3,
        "annual_expense_growth": 2.5,
        "annual_property_value_growth": 4,
    }


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestLoanEndpoints:
    """Test mortgage payment and amortization endpoints."""

    def test_mortgage_payment(self, client):
        response = client.post(
            "/api/calculate/mortgage-payment",
            json={"principal": 200000, "annual_rate_percent": 6.5, "term_years": 30},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["monthly_payment"] == pytest.approx(1264.14)
        assert data["total_payments"] == 360
        assert data["total_interest"] > 0

    def test_amortization(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={"principal": 200000, "annual_rate_percent": 6.0, "term_years": 30},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["schedule"][0]["interest"] == pytest.approx(1000.00)
        assert data["total_principal"] == pytest.approx(200000, abs=0.05)
        assert data["payoff_month"] == len(data["schedule"])

    def test_amortization_with_lump_sum(self, client):
        response = client.post(
            "/api/calculate/amortization",
            json={
                "principal": 180000,
                "annual_rate_percent": 5.0,
                "term_years": 30,
                "lump_sum_payments": {"12": 5000},
            },
        )
        assert response.status_code == 200
        assert response.json()["schedule"][11]["extra_principal"] == 5000

    def test_amortization_rejects_missing_fields(self, client):
        response = client.post("/api/calculate/amortization", json={"principal": 1000})
        assert response.status_code == 422


class TestIRREndpoint:
    def test_irr(self, client):
        response = client.post("/api/calculate/irr", json={"cash_flows": [-100, 110]})
        assert response.status_code == 200
        data = response.json()
        assert data["irr"] == pytest.approx(0.10, abs=1e-6)
        assert data["discount_rate"] == 0.10
        assert data["npv"] == pytest.approx(0.0, abs=1e-9)

    def test_no_root_is_null(self, client):
        response = client.post("/api/calculate/irr", json={"cash_flows": [0, 0, 0]})
        assert response.status_code == 200
        assert response.json()["irr"] is None


class TestProjectionEndpoint:
    def test_projections(self, client):
        response = client.post(
            "/api/calculate/projections",
            json={
                "loan_amount": 240000,
                "annual_rate_percent": 6.5,
                "term_years": 30,
                "monthly_income": 2500,
                "monthly_operating_expenses": 1800,
                "purchase_price": 300000,
                "income_growth_rate": 3,
                "expense_growth_rate": 2.5,
                "property_value_growth_rate": 4,
            },
        )
        assert response.status_code == 200
        projections = response.json()["projections"]
        assert len(projections) == 30
        assert projections[4]["annual_income"] == pytest.approx(30000 * 1.03 ** 5)


class TestTemporaryFinancingEndpoints:
    def test_analysis(self, client):
        response = client.post(
            "/api/calculate/temporary-financing",
            json={
                "initial_cash_investment": 50000,
                "renovation_costs": 40000,
                "temp_financing_amount": 200000,
                "temp_interest_rate": 12,
                "origination_points": 2,
                "after_repair_value": 400000,
                "purchase_price": 250000,
                "as_of": "2025-01-15",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["analysis"]["final_cash_left_in_deal"] == pytest.approx(6000)
        assert data["analysis"]["analysis_start_date"] == "2025-08-15"
        assert data["analysis"]["refinance_results"]["cash_returned"] == pytest.approx(100000)
        assert data["validation"]["is_valid"] is True

    def test_validate_flags_short_refinance(self, client):
        response = client.post(
            "/api/calculate/temporary-financing/validate",
            json={
                "temp_financing_amount": 200000,
                "after_repair_value": 200000,
                "cash_out_ltv": 85,
                "purchase_price": 250000,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert len(data["errors"]) == 1
        assert len(data["warnings"]) == 2


class TestReturnsEndpoint:
    def test_returns(self, client):
        response = client.post(
            "/api/calculate/returns",
            json={
                "annual_cash_flow": 6000,
                "total_cash_invested": 50000,
                "noi": 20000,
                "total_cost_of_project": 250000,
            },
        )
        assert response.status_code == 200
        assert response.json() == {"cash_on_cash_roi": pytest.approx(12.0), "cap_rate": pytest.approx(8.0)}

    def test_zero_investment_is_rejected(self, client):
        response = client.post(
            "/api/calculate/returns",
            json={
                "annual_cash_flow": 6000,
                "total_cash_invested": 0,
                "noi": 20000,
                "total_cost_of_project": 250000,
            },
        )
        assert response.status_code == 400
        assert "cannot be zero" in response.json()["detail"]


class TestPropertyAnalysisEndpoint:
    def test_property_analysis(self, client, property_payload):
        response = client.post(
            "/api/calculate/property-analysis", json={"property": property_payload}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["metrics"]["loan_amount"] == 240000
        assert len(data["projections"]) == 30
        assert data["irr"] > 0
        assert data["temporary_financing"] is None

    def test_with_temporary_financing(self, client, property_payload):
        response = client.post(
            "/api/calculate/property-analysis",
            json={
                "property": property_payload,
                "temporary_financing": {
                    "initial_cash_investment": 50000,
                    "renovation_costs": 40000,
                    "temp_financing_amount": 200000,
                    "temp_interest_rate": 12,
                    "origination_points": 2,
                    "after_repair_value": 400000,
                },
                "as_of": "2025-01-15",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["metrics"]["loan_amount"] == pytest.approx(300000)
        assert data["metrics"]["total_cash_needed"] == pytest.approx(6000)
        assert data["temporary_financing"]["analysis_start_date"] == "2025-08-15"


class TestValidateInputsEndpoint:
    def test_validate_inputs(self, client):
        response = client.post(
            "/api/calculate/validate-inputs",
            json={
                "purchase_price": "250000",
                "down_payment": 300000,
                "interest_rate": 6.5,
                "monthly_rent": "abc",
                "growth_rates": {"income": 3, "expense": 25},
            },
        )
        assert response.status_code == 200
        assert response.json() == {
            "purchase_price": True,
            "down_payment": False,
            "interest_rate": True,
            "monthly_rent": False,
            "growth_rates": {"income": True, "expense": False},
        }
