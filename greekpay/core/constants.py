"""
Centralized constants for GreekPay payments.

This module contains payment-related constants to keep codes and labels
consistent between fee calculation, formatting and the API layer.

Categories:
- Payment Method Types: Stripe payment method kinds that carry fees
- Payment Method Codes: Ledger codes recorded on dues payments
- Payment Status: Payment intent lifecycle values
- Late Fee Types: How a configured late fee is applied
- Limits: Installment and late fee bounds

Usage:
    from greekpay.core.constants import PaymentMethodType, PAYMENT_STATUS_SUCCEEDED

    if method == PaymentMethodType.CARD:
        # Pass the processor fee through to the payer
        pass
"""

from enum import Enum


class PaymentMethodType(str, Enum):
    """Stripe payment method kinds that have a fee schedule."""
    CARD = 'card'
    US_BANK_ACCOUNT = 'us_bank_account'


# Payment Method Codes
PAYMENT_METHOD_STRIPE_ACH = 'stripe_ach'
PAYMENT_METHOD_STRIPE_CARD = 'stripe_card'
PAYMENT_METHOD_CASH = 'cash'
PAYMENT_METHOD_CHECK = 'check'
PAYMENT_METHOD_VENMO = 'venmo'
PAYMENT_METHOD_ZELLE = 'zelle'
PAYMENT_METHOD_OTHER = 'other'

# Payment Status
PAYMENT_STATUS_PENDING = 'pending'
PAYMENT_STATUS_PROCESSING = 'processing'
PAYMENT_STATUS_SUCCEEDED = 'succeeded'
PAYMENT_STATUS_FAILED = 'failed'
PAYMENT_STATUS_CANCELED = 'canceled'

# Status Colors
STATUS_COLOR_YELLOW = 'yellow'
STATUS_COLOR_BLUE = 'blue'
STATUS_COLOR_GREEN = 'green'
STATUS_COLOR_RED = 'red'
STATUS_COLOR_GRAY = 'gray'

# Late Fee Types
LATE_FEE_TYPE_FLAT = 'flat'
LATE_FEE_TYPE_PERCENTAGE = 'percentage'

# Limits
MIN_INSTALLMENTS = 2
MAX_INSTALLMENTS = 12
MAX_FLAT_LATE_FEE = '100.00'
MAX_LATE_FEE_BALANCE_SHARE = '0.25'
MAX_CUSTOM_LATE_FEE = '500.00'
