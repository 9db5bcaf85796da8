"""
Payment calculation errors.

Every error here is fatal to the single payment operation that raised it.
Callers report it back as a configuration/integration error and never retry
or charge an unvalidated amount.
"""


class FeeCalculationError(Exception):
    """Base class for fee and settlement calculation failures."""


class InvalidAmount(FeeCalculationError, ValueError):
    """Amount is negative, non-finite, non-numeric or outside an allowed range."""

    def __init__(self, amount, reason: str = "Amount must be a non-negative finite number"):
        self.amount = amount
        self.reason = reason
        super().__init__(f"{reason}: {amount!r}")


class InvalidMethod(FeeCalculationError, ValueError):
    """Payment method kind has no fee schedule."""

    def __init__(self, method):
        self.method = method
        super().__init__(
            f"payment_method_type must be 'us_bank_account' or 'card', got {method!r}"
        )


class RoundingOverflow(FeeCalculationError, ArithmeticError):
    """Value cannot be quantized to cents within decimal precision."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Cannot round {value!r} to cents")
