"""
Stripe and platform fee rates.

All rates live in one immutable FeeSchedule so a processor renegotiation is a
single edit (or a single environment variable) and every rate can be swapped
out in tests.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Union

from greekpay.config import settings


Rate = Union[str, int, float, Decimal]


def _to_decimal(name: str, value: Rate) -> Decimal:
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValueError(f"{name} must be numeric, got {value!r}")
    if not result.is_finite():
        raise ValueError(f"{name} must be finite, got {value!r}")
    return result


@dataclass(frozen=True)
class FeeSchedule:
    """Rates applied by the fee calculator, in major currency units."""
    card_percentage: Decimal = field(default=Decimal('0.029'))
    card_fixed: Decimal = field(default=Decimal('0.30'))
    ach_percentage: Decimal = field(default=Decimal('0.008'))
    ach_cap: Decimal = field(default=Decimal('5.00'))
    platform_percentage: Decimal = field(default=Decimal('0.01'))
    minimum_charge: Decimal = field(default=Decimal('0.50'))

    def __post_init__(self):
        # Accept floats/strings from config and normalize to Decimal
        for name in ('card_percentage', 'ach_percentage', 'platform_percentage'):
            value = _to_decimal(name, getattr(self, name))
            if value < 0 or value >= 1:
                raise ValueError(f"{name} must be in [0, 1), got {value}")
            object.__setattr__(self, name, value)

        for name in ('card_fixed', 'ach_cap', 'minimum_charge'):
            value = _to_decimal(name, getattr(self, name))
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def from_settings(cls) -> 'FeeSchedule':
        """Build the schedule from environment-driven settings."""
        return cls(
            card_percentage=settings.STRIPE_CARD_PERCENTAGE,
            card_fixed=settings.STRIPE_CARD_FIXED,
            ach_percentage=settings.STRIPE_ACH_PERCENTAGE,
            ach_cap=settings.STRIPE_ACH_CAP,
            platform_percentage=settings.PLATFORM_FEE_PERCENTAGE,
            minimum_charge=settings.STRIPE_MINIMUM_CHARGE,
        )
