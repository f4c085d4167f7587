"""
Main FastAPI application entry point.
"""

from fastapi import FastAPI

from rental_model.config import get_settings
from rental_model.logging_config import setup_logging
from rental_model.api import router as api_router

settings = get_settings()

setup_logging(settings.log_level, json_format=settings.log_json)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Rental property investment analysis and BRRRR modeling",
    version="0.1.0",
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": "0.1.0"}
