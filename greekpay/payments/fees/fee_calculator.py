"""
Stripe Dues Fee Calculator

This module provides exact fee and settlement calculations for dues paid
through Stripe Connect. The stored ledger values (fee, platform fee, charge,
net) must reconcile with Stripe's settlement reports to the cent, so all
arithmetic is done in Decimal and rounded half-up only where noted.

Card payments pass the processor fee to the payer: the dues amount is marked
up so that after Stripe takes its percentage-plus-fixed fee the remainder is
exactly the dues amount. ACH payments are never marked up; the (capped)
processor fee comes out of the chapter's net instead. The platform fee is
always deducted from the chapter's net.
"""

import logging
import warnings
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from greekpay.core.constants import PaymentMethodType
from greekpay.payments.errors import InvalidAmount, InvalidMethod
from greekpay.payments.fees.fee_models import FeeBreakdown, round_cents
from greekpay.payments.fees.fee_schedule import FeeSchedule

logger = logging.getLogger(__name__)

Amount = Union[int, float, str, Decimal]
Method = Union[str, PaymentMethodType]


def parse_amount(amount: Amount) -> Decimal:
    """Convert a caller-supplied amount to a non-negative finite Decimal."""
    if isinstance(amount, bool) or amount is None:
        logger.error(f"Rejected amount: {amount!r}")
        raise InvalidAmount(amount)
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError):
        logger.error(f"Rejected non-numeric amount: {amount!r}")
        raise InvalidAmount(amount)
    if not value.is_finite() or value < 0:
        logger.error(f"Rejected amount: {amount!r}")
        raise InvalidAmount(amount)
    return value


def parse_method(method: Method) -> PaymentMethodType:
    """Resolve a payment method kind; anything outside the closed set is an error."""
    if isinstance(method, PaymentMethodType):
        return method
    try:
        return PaymentMethodType(method)
    except (ValueError, TypeError):
        logger.error(f"Rejected payment method type: {method!r}")
        raise InvalidMethod(method)


class StripeFeeCalculator:
    """
    Fee calculator bound to a single FeeSchedule.

    Instances hold no mutable state and are safe to share between requests.
    """

    def __init__(self, schedule: Optional[FeeSchedule] = None):
        """
        Initialize the calculator.

        Args:
            schedule: Rates to apply. If None, uses the schedule from settings
        """
        self.schedule = schedule if schedule is not None else FeeSchedule.from_settings()

    def calculate_stripe_fee(self, amount: Amount, method: Method) -> Decimal:
        """
        Calculate the Stripe processing fee for a dues amount.

        Card (reverse calculation, so the chapter's share stays the full dues):
            fee = (amount + fixed) / (1 - percentage) - amount
        ACH:
            fee = min(amount * percentage, cap)

        Args:
            amount: Dues amount in dollars
            method: 'card' or 'us_bank_account'

        Returns:
            Processor fee rounded half-up to cents
        """
        amount = parse_amount(amount)
        method = parse_method(method)
        schedule = self.schedule

        if method == PaymentMethodType.CARD:
            charge_amount = (amount + schedule.card_fixed) / (1 - schedule.card_percentage)
            fee = round_cents(charge_amount - amount)
        else:
            fee = round_cents(min(amount * schedule.ach_percentage, schedule.ach_cap))

        logger.debug(f"Stripe fee calculated: {fee} (amount: {amount}, method: {method.value})")
        return fee

    def calculate_platform_fee(self, amount: Amount) -> Decimal:
        """Platform take-rate on the dues amount, same for every method."""
        amount = parse_amount(amount)
        return round_cents(amount * self.schedule.platform_percentage)

    def calculate_total_charge(self, amount: Amount, method: Method) -> Decimal:
        """
        Calculate what the payer is billed.

        ACH: just the dues amount. Card: dues plus the Stripe fee.
        """
        amount = parse_amount(amount)
        method = parse_method(method)

        if method == PaymentMethodType.US_BANK_ACCOUNT:
            return amount

        return round_cents(amount + self.calculate_stripe_fee(amount, method))

    def calculate_chapter_receives(self, amount: Amount, method: Method) -> Decimal:
        """
        Calculate what the chapter's connected account receives.

        ACH: dues - ACH fee - platform fee.
        Card: dues - platform fee (the payer already covered the Stripe fee).

        The net is strictly less than the dues only from the schedule's
        minimum charge upward. Below 50 cents the platform fee rounds to
        0.00, so a card payment nets the full amount.
        """
        amount = parse_amount(amount)
        method = parse_method(method)
        platform_fee = self.calculate_platform_fee(amount)

        if method == PaymentMethodType.US_BANK_ACCOUNT:
            ach_fee = self.calculate_stripe_fee(amount, method)
            return round_cents(amount - ach_fee - platform_fee)

        return round_cents(amount - platform_fee)

    def calculate_transaction_fee(self, amount: Amount, method: Method) -> Decimal:
        """Deprecated: use calculate_stripe_fee()."""
        warnings.warn(
            "calculate_transaction_fee() is deprecated, use calculate_stripe_fee()",
            DeprecationWarning,
            stacklevel=2
        )
        return self.calculate_stripe_fee(amount, method)

    def calculate_fee_breakdown(self, amount: Amount, method: Method) -> FeeBreakdown:
        """
        Calculate every fee component for one payment.

        The amount must be at least the schedule's minimum charge, since this
        is what a payment intent is created from.

        Args:
            amount: Dues amount in dollars
            method: 'card' or 'us_bank_account'

        Returns:
            FeeBreakdown with fee, platform fee, total charge and chapter net
        """
        value = parse_amount(amount)
        method = parse_method(method)

        if value < self.schedule.minimum_charge:
            logger.error(f"Amount {value} is below the minimum charge of {self.schedule.minimum_charge}")
            raise InvalidAmount(amount, f"Amount must be at least {self.schedule.minimum_charge}")

        breakdown = FeeBreakdown(
            amount=value,
            payment_method_type=method,
            stripe_fee=self.calculate_stripe_fee(value, method),
            platform_fee=self.calculate_platform_fee(value),
            total_charge=self.calculate_total_charge(value, method),
            chapter_receives=self.calculate_chapter_receives(value, method),
        )

        logger.info(f"Fee breakdown: amount {breakdown.amount}, method {method.value}, "
                    f"stripe fee {breakdown.stripe_fee}, platform fee {breakdown.platform_fee}, "
                    f"total charge {breakdown.total_charge}, chapter receives {breakdown.chapter_receives}")
        return breakdown


# Default calculator, configured from settings at import
default_calculator = StripeFeeCalculator(FeeSchedule.from_settings())


def calculate_stripe_fee(amount: Amount, method: Method) -> Decimal:
    return default_calculator.calculate_stripe_fee(amount, method)


def calculate_platform_fee(amount: Amount) -> Decimal:
    return default_calculator.calculate_platform_fee(amount)


def calculate_total_charge(amount: Amount, method: Method) -> Decimal:
    return default_calculator.calculate_total_charge(amount, method)


def calculate_chapter_receives(amount: Amount, method: Method) -> Decimal:
    return default_calculator.calculate_chapter_receives(amount, method)


def calculate_fee_breakdown(amount: Amount, method: Method) -> FeeBreakdown:
    return default_calculator.calculate_fee_breakdown(amount, method)


def calculate_transaction_fee(amount: Amount, method: Method) -> Decimal:
    """Deprecated: use calculate_stripe_fee()."""
    warnings.warn(
        "calculate_transaction_fee() is deprecated, use calculate_stripe_fee()",
        DeprecationWarning,
        stacklevel=2
    )
    return default_calculator.calculate_stripe_fee(amount, method)
