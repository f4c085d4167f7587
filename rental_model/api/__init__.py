"""
API routes for the financial model.
"""

from fastapi import APIRouter

from rental_model.api import calculations

router = APIRouter()

router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
