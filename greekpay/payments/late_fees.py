"""
Late fee amounts for overdue dues.

Configured late fees are either a flat amount or a percentage of the
outstanding balance. Both are capped so a misconfigured chapter cannot
levy an unreasonable penalty.
"""

import logging
from decimal import Decimal

from greekpay.core.constants import (
    LATE_FEE_TYPE_FLAT,
    LATE_FEE_TYPE_PERCENTAGE,
    MAX_FLAT_LATE_FEE,
    MAX_LATE_FEE_BALANCE_SHARE,
    MAX_CUSTOM_LATE_FEE,
)
from greekpay.payments.errors import InvalidAmount
from greekpay.payments.fees.fee_calculator import Amount, parse_amount
from greekpay.payments.fees.fee_models import round_cents

logger = logging.getLogger(__name__)

ZERO = Decimal('0.00')


def calculate_late_fee(balance: Amount, late_fee_type: str, late_fee_amount: Amount) -> Decimal:
    """
    Calculate the late fee for an overdue balance.

    Flat: the configured amount, capped at $100.
    Percentage: late_fee_amount percent of the balance, capped at 25% of the balance.

    Returns 0.00 when there is nothing to charge.
    """
    balance = parse_amount(balance)
    late_fee_amount = parse_amount(late_fee_amount)

    if late_fee_type == LATE_FEE_TYPE_FLAT:
        late_fee = min(late_fee_amount, Decimal(MAX_FLAT_LATE_FEE))
    elif late_fee_type == LATE_FEE_TYPE_PERCENTAGE:
        late_fee = min(
            balance * (late_fee_amount / 100),
            balance * Decimal(MAX_LATE_FEE_BALANCE_SHARE)
        )
    else:
        raise ValueError(f"late_fee_type must be 'flat' or 'percentage', got {late_fee_type!r}")

    late_fee = round_cents(late_fee)
    if late_fee <= 0:
        return ZERO

    logger.debug(f"Late fee {late_fee} ({late_fee_type} {late_fee_amount}, balance {balance})")
    return late_fee


def validate_custom_late_fee(amount: Amount) -> Decimal:
    """Check a treasurer-entered late fee: positive and at most $500."""
    value = parse_amount(amount)
    if value <= 0:
        raise InvalidAmount(amount, "Late fee amount must be positive")
    if value > Decimal(MAX_CUSTOM_LATE_FEE):
        raise InvalidAmount(amount, f"Late fee amount exceeds maximum allowed (${MAX_CUSTOM_LATE_FEE})")
    return round_cents(value)
