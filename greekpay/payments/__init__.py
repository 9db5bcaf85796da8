"""
Payments Module

Fee computation, settlement allocation, installment plans, late fees and
display formatting for dues payments.
"""

from greekpay.payments.errors import (
    FeeCalculationError,
    InvalidAmount,
    InvalidMethod,
    RoundingOverflow,
)
from greekpay.payments.fees import (
    FeeSchedule,
    FeeBreakdown,
    StripeFeeCalculator,
    calculate_stripe_fee,
    calculate_platform_fee,
    calculate_total_charge,
    calculate_chapter_receives,
    calculate_fee_breakdown,
)
from greekpay.payments.formatting import format_payment_method, format_payment_status
from greekpay.payments.installments import ScheduledInstallment, split_installments, build_installment_schedule
from greekpay.payments.late_fees import calculate_late_fee, validate_custom_late_fee

__all__ = [
    'FeeCalculationError',
    'InvalidAmount',
    'InvalidMethod',
    'RoundingOverflow',
    'FeeSchedule',
    'FeeBreakdown',
    'StripeFeeCalculator',
    'calculate_stripe_fee',
    'calculate_platform_fee',
    'calculate_total_charge',
    'calculate_chapter_receives',
    'calculate_fee_breakdown',
    'format_payment_method',
    'format_payment_status',
    'ScheduledInstallment',
    'split_installments',
    'build_installment_schedule',
    'calculate_late_fee',
    'validate_custom_late_fee',
]
