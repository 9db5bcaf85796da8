"""
Installment Plans

Splits an outstanding dues balance into an installment schedule. Every
installment except the first is the balance divided evenly and rounded down
to the cent; the first installment absorbs the leftover cents so the schedule
always sums to the balance exactly.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, ROUND_DOWN
from typing import Dict, List, Optional, Union

from greekpay.config import settings
from greekpay.core.constants import MIN_INSTALLMENTS, MAX_INSTALLMENTS
from greekpay.payments.errors import InvalidAmount
from greekpay.payments.fees.fee_calculator import (
    Amount,
    Method,
    StripeFeeCalculator,
    default_calculator,
    parse_amount,
)
from greekpay.payments.fees.fee_models import CENT, FeeBreakdown, round_cents

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduledInstallment:
    """One payment in an installment plan."""
    installment_number: int
    amount: Decimal
    scheduled_date: date
    fees: FeeBreakdown

    def to_dict(self) -> Dict[str, Union[int, float, str, dict]]:
        return {
            'installment_number': self.installment_number,
            'amount': float(self.amount),
            'scheduled_date': self.scheduled_date.isoformat(),
            'fees': self.fees.to_dict(),
        }


def _validate_num_installments(num_installments: int) -> int:
    if isinstance(num_installments, bool) or not isinstance(num_installments, int):
        raise ValueError(f"num_installments must be an integer, got {num_installments!r}")
    if num_installments < MIN_INSTALLMENTS or num_installments > MAX_INSTALLMENTS:
        raise ValueError(
            f"num_installments must be between {MIN_INSTALLMENTS} and {MAX_INSTALLMENTS}"
        )
    return num_installments


def split_installments(total: Amount, num_installments: int) -> List[Decimal]:
    """
    Split a balance into installment amounts.

    Args:
        total: Outstanding balance in dollars, rounded to cents first
        num_installments: Number of payments (2-12)

    Returns:
        Installment amounts, first one carrying the remainder
    """
    num_installments = _validate_num_installments(num_installments)
    total = round_cents(parse_amount(total))
    if total <= 0:
        raise InvalidAmount(total, "No outstanding balance to split")

    base_amount = (total / num_installments).quantize(CENT, rounding=ROUND_DOWN)
    remainder = round_cents(total - base_amount * num_installments)
    first_payment_amount = base_amount + remainder

    logger.debug(f"Split {total} into {num_installments} installments: "
                 f"first {first_payment_amount}, then {base_amount}")

    return [first_payment_amount] + [base_amount] * (num_installments - 1)


def build_installment_schedule(
    total: Amount,
    num_installments: int,
    method: Method,
    start_date: Optional[date] = None,
    interval_days: Optional[int] = None,
    calculator: Optional[StripeFeeCalculator] = None
) -> List[ScheduledInstallment]:
    """
    Build a dated installment schedule with the fees for each payment.

    Args:
        total: Outstanding balance in dollars
        num_installments: Number of payments (2-12)
        method: 'card' or 'us_bank_account' (the saved payment method used for auto-charging)
        start_date: Date of the first payment, defaults to today
        interval_days: Days between payments, defaults to INSTALLMENT_INTERVAL_DAYS
        calculator: Fee calculator, defaults to the settings-configured one

    Returns:
        One ScheduledInstallment per payment, first one due on start_date
    """
    if calculator is None:
        calculator = default_calculator
    if start_date is None:
        start_date = date.today()
    if interval_days is None:
        interval_days = settings.INSTALLMENT_INTERVAL_DAYS
    if interval_days <= 0:
        raise ValueError(f"interval_days must be positive, got {interval_days}")

    amounts = split_installments(total, num_installments)

    schedule = []
    for index, amount in enumerate(amounts):
        schedule.append(ScheduledInstallment(
            installment_number=index + 1,
            amount=amount,
            scheduled_date=start_date + timedelta(days=index * interval_days),
            fees=calculator.calculate_fee_breakdown(amount, method),
        ))

    logger.info(f"Built {len(schedule)}-payment schedule for {sum(amounts)} "
                f"starting {start_date.isoformat()}")
    return schedule
