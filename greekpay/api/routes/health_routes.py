"""
Health Check API Routes

This module contains API routes for health monitoring.
"""

from fastapi import APIRouter
import time
from datetime import datetime, timezone

from greekpay.api.core.api_config import api_config
from greekpay.api.models.response_models import HealthResponse

router = APIRouter()

# Track startup time for uptime calculation
STARTUP_TIME = time.time()

@router.get("/health", summary="Health check", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=api_config.version,
        uptime=time.time() - STARTUP_TIME
    )
