"""
Fees Module

This module contains fee calculation and settlement allocation components.
"""

from .fee_schedule import FeeSchedule
from .fee_models import FeeBreakdown, round_cents, to_cents
from .fee_calculator import (
    StripeFeeCalculator,
    default_calculator,
    calculate_stripe_fee,
    calculate_platform_fee,
    calculate_total_charge,
    calculate_chapter_receives,
    calculate_fee_breakdown,
    calculate_transaction_fee,
)

__all__ = [
    'FeeSchedule',
    'FeeBreakdown',
    'round_cents',
    'to_cents',
    'StripeFeeCalculator',
    'default_calculator',
    'calculate_stripe_fee',
    'calculate_platform_fee',
    'calculate_total_charge',
    'calculate_chapter_receives',
    'calculate_fee_breakdown',
    'calculate_transaction_fee',
]
