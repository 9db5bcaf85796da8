"""
API Response Models

This module contains Pydantic models for API response formatting.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

class FeeQuoteResponse(BaseModel):
    """Model for fee quote responses."""
    amount: float = Field(..., description="Dues amount")
    payment_method_type: str = Field(..., description="'card' or 'us_bank_account'")
    stripe_fee: float = Field(..., description="Stripe processing fee")
    platform_fee: float = Field(..., description="GreekPay platform fee")
    total_charge: float = Field(..., description="Amount billed to the payer")
    chapter_receives: float = Field(..., description="Amount transferred to the chapter")
    amount_cents: int = Field(..., description="Stripe charge amount in cents")
    application_fee_cents: int = Field(..., description="Platform share of the charge in cents")
    transfer_amount_cents: int = Field(..., description="Chapter transfer amount in cents")

class InstallmentResponse(BaseModel):
    """Model for one scheduled installment."""
    installment_number: int = Field(..., description="1-based installment number")
    amount: float = Field(..., description="Installment amount")
    scheduled_date: str = Field(..., description="ISO date the installment is charged")
    total_charge: float = Field(..., description="Amount billed to the payer for this installment")
    stripe_fee: float = Field(..., description="Stripe processing fee")
    platform_fee: float = Field(..., description="GreekPay platform fee")
    chapter_receives: float = Field(..., description="Amount transferred to the chapter")

class InstallmentPlanResponse(BaseModel):
    """Model for installment plan previews."""
    total_amount: float = Field(..., description="Outstanding balance")
    num_installments: int = Field(..., description="Number of payments")
    installment_amount: float = Field(..., description="Amount of each installment after the first")
    first_payment_amount: float = Field(..., description="First installment, including leftover cents")
    payment_method_type: str = Field(..., description="'card' or 'us_bank_account'")
    schedule: List[InstallmentResponse] = Field(..., description="Payment schedule")

class PaymentDisplayResponse(BaseModel):
    """Model for payment display labels."""
    method: Optional[str] = Field(None, description="Formatted payment method")
    status_text: Optional[str] = Field(None, description="Formatted payment status")
    status_color: Optional[str] = Field(None, description="Semantic color tag for the status")

class HealthResponse(BaseModel):
    """Model for health check responses."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Health check timestamp")
    version: str = Field(..., description="API version")
    uptime: float = Field(..., description="Service uptime in seconds")

