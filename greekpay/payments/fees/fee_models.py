import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Dict, Union

from greekpay.core.constants import PaymentMethodType
from greekpay.payments.errors import RoundingOverflow

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


def round_cents(value: Decimal) -> Decimal:
    """Round half-up to 2 decimal places."""
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        logger.error(f"Cannot round {value!r} to cents")
        raise RoundingOverflow(value)


def to_cents(value: Union[Decimal, int, float, str]) -> int:
    """Convert a major-unit amount to integer cents for the Stripe API."""
    try:
        cents = (Decimal(str(value)) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        logger.error(f"Cannot convert {value!r} to cents")
        raise RoundingOverflow(value)
    return int(cents)


@dataclass(frozen=True)
class FeeBreakdown:
    """Everything needed to create a payment intent for one dues amount."""
    amount: Decimal
    payment_method_type: PaymentMethodType
    stripe_fee: Decimal
    platform_fee: Decimal
    total_charge: Decimal
    chapter_receives: Decimal

    @property
    def application_fee(self) -> Decimal:
        """What the platform keeps out of the charge (Stripe Connect application fee)."""
        return self.total_charge - self.chapter_receives

    def to_cents(self) -> Dict[str, int]:
        amount_cents = to_cents(self.total_charge)
        transfer_amount_cents = to_cents(self.chapter_receives)
        return {
            'amount_cents': amount_cents,
            'application_fee_cents': amount_cents - transfer_amount_cents,
            'transfer_amount_cents': transfer_amount_cents,
        }

    def to_dict(self) -> Dict[str, Union[float, str]]:
        return {
            'amount': float(self.amount),
            'payment_method_type': self.payment_method_type.value,
            'stripe_fee': float(self.stripe_fee),
            'platform_fee': float(self.platform_fee),
            'total_charge': float(self.total_charge),
            'chapter_receives': float(self.chapter_receives),
        }
