"""
Financial Calculation Engine

Core calculation modules for rental property investment analysis.
Every function is pure: same inputs, same outputs, no shared state.
"""

from rental_model.calculations import (
    time_value,
    amortization,
    projection,
    temporary_financing,
    validators,
    metrics,
    analysis,
)

__all__ = [
    "time_value",
    "amortization",
    "projection",
    "temporary_financing",
    "validators",
    "metrics",
    "analysis",
]
