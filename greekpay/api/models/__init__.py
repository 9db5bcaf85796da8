"""
API Models Module

This module contains all Pydantic models for the API.
"""

from greekpay.api.models.request_models import FeeQuoteRequest, InstallmentPreviewRequest
from greekpay.api.models.response_models import (
    FeeQuoteResponse,
    InstallmentResponse,
    InstallmentPlanResponse,
    PaymentDisplayResponse,
    HealthResponse
)

__all__ = [
    "FeeQuoteRequest",
    "InstallmentPreviewRequest",
    "FeeQuoteResponse",
    "InstallmentResponse",
    "InstallmentPlanResponse",
    "PaymentDisplayResponse",
    "HealthResponse"
]
