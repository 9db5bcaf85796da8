"""
Fee API Routes

This module contains API routes for dues fee quotes, installment previews
and payment display labels.
"""

from fastapi import APIRouter, HTTPException, Query
from typing import Optional
import logging

from greekpay.api.models.request_models import FeeQuoteRequest, InstallmentPreviewRequest
from greekpay.api.models.response_models import (
    FeeQuoteResponse,
    InstallmentResponse,
    InstallmentPlanResponse,
    PaymentDisplayResponse
)
from greekpay.payments.errors import FeeCalculationError
from greekpay.payments.fees import calculate_fee_breakdown
from greekpay.payments.formatting import format_payment_method, format_payment_status
from greekpay.payments.installments import build_installment_schedule

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/fees/quote", summary="Quote fees for a dues payment", response_model=FeeQuoteResponse)
async def quote_fees(request: FeeQuoteRequest):
    """
    Calculate what the payer is charged and what the chapter receives.
    """
    try:
        breakdown = calculate_fee_breakdown(request.amount, request.payment_method_type)

        return FeeQuoteResponse(**breakdown.to_dict(), **breakdown.to_cents())

    except FeeCalculationError as e:
        logger.warning(f"Rejected fee quote: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error quoting fees: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/fees/installments", summary="Preview an installment plan", response_model=InstallmentPlanResponse)
async def preview_installments(request: InstallmentPreviewRequest):
    """
    Split a balance into installments and quote the fees for each one.
    """
    try:
        schedule = build_installment_schedule(
            total=request.total_amount,
            num_installments=request.num_installments,
            method=request.payment_method_type,
            start_date=request.start_date,
            interval_days=request.interval_days
        )

        first, rest = schedule[0], schedule[1:]
        return InstallmentPlanResponse(
            total_amount=float(sum(item.amount for item in schedule)),
            num_installments=len(schedule),
            installment_amount=float(rest[0].amount),
            first_payment_amount=float(first.amount),
            payment_method_type=first.fees.payment_method_type.value,
            schedule=[
                InstallmentResponse(
                    installment_number=item.installment_number,
                    amount=float(item.amount),
                    scheduled_date=item.scheduled_date.isoformat(),
                    total_charge=float(item.fees.total_charge),
                    stripe_fee=float(item.fees.stripe_fee),
                    platform_fee=float(item.fees.platform_fee),
                    chapter_receives=float(item.fees.chapter_receives)
                )
                for item in schedule
            ]
        )

    except (FeeCalculationError, ValueError) as e:
        logger.warning(f"Rejected installment preview: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error previewing installments: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/payments/format", summary="Format payment labels", response_model=PaymentDisplayResponse)
async def format_payment(
    method: Optional[str] = Query(None, description="Payment method code, e.g. stripe_card"),
    last4: Optional[str] = Query(None, description="Last 4 digits of the card or account"),
    status: Optional[str] = Query(None, description="Payment status, e.g. succeeded")
):
    """
    Display labels for a payment method and status.
    """
    response = PaymentDisplayResponse()

    if method is not None:
        response.method = format_payment_method(method, last4)

    if status is not None:
        display = format_payment_status(status)
        response.status_text = display["text"]
        response.status_color = display["color"]

    return response
