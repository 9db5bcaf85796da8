"""
API Request Models

This module contains Pydantic models for API request validation.
Amounts and method types are validated by the fee calculator itself so
callers get the same errors the payment handlers do.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal

class FeeQuoteRequest(BaseModel):
    """Model for a single-payment fee quote."""
    amount: Decimal = Field(..., description="Dues amount in dollars")
    payment_method_type: str = Field(..., description="'card' or 'us_bank_account'")

class InstallmentPreviewRequest(BaseModel):
    """Model for an installment plan preview."""
    total_amount: Decimal = Field(..., description="Outstanding balance in dollars")
    num_installments: int = Field(..., description="Number of payments (2-12)")
    payment_method_type: str = Field(..., description="'card' or 'us_bank_account'")
    start_date: Optional[date] = Field(None, description="Date of the first payment, defaults to today")
    interval_days: Optional[int] = Field(None, description="Days between payments")
