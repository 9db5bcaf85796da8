from typing import Dict, Optional

from greekpay.core.constants import (
    PAYMENT_METHOD_STRIPE_ACH,
    PAYMENT_METHOD_STRIPE_CARD,
    PAYMENT_METHOD_CASH,
    PAYMENT_METHOD_CHECK,
    PAYMENT_METHOD_VENMO,
    PAYMENT_METHOD_ZELLE,
    PAYMENT_METHOD_OTHER,
    PAYMENT_STATUS_PENDING,
    PAYMENT_STATUS_PROCESSING,
    PAYMENT_STATUS_SUCCEEDED,
    PAYMENT_STATUS_FAILED,
    PAYMENT_STATUS_CANCELED,
    STATUS_COLOR_YELLOW,
    STATUS_COLOR_BLUE,
    STATUS_COLOR_GREEN,
    STATUS_COLOR_RED,
    STATUS_COLOR_GRAY,
)


_METHOD_LABELS = {
    PAYMENT_METHOD_STRIPE_ACH: 'Bank Account',
    PAYMENT_METHOD_STRIPE_CARD: 'Card',
    PAYMENT_METHOD_CASH: 'Cash',
    PAYMENT_METHOD_CHECK: 'Check',
    PAYMENT_METHOD_VENMO: 'Venmo',
    PAYMENT_METHOD_ZELLE: 'Zelle',
    PAYMENT_METHOD_OTHER: 'Other',
}

_STATUS_DISPLAY = {
    PAYMENT_STATUS_PENDING: ('Pending', STATUS_COLOR_YELLOW),
    PAYMENT_STATUS_PROCESSING: ('Processing', STATUS_COLOR_BLUE),
    PAYMENT_STATUS_SUCCEEDED: ('Completed', STATUS_COLOR_GREEN),
    PAYMENT_STATUS_FAILED: ('Failed', STATUS_COLOR_RED),
    PAYMENT_STATUS_CANCELED: ('Canceled', STATUS_COLOR_GRAY),
}


def format_payment_method(method: str, last4: Optional[str] = None) -> str:
    """
    Format a payment method code for display, e.g. 'stripe_card', '4242' -> 'Card ****4242'.

    Unknown codes are shown as-is.
    """
    formatted = _METHOD_LABELS.get(method, method)

    if last4:
        return f"{formatted} ****{last4}"

    return formatted


def format_payment_status(status: str) -> Dict[str, str]:
    """Display text and color tag for a payment status."""
    display = _STATUS_DISPLAY.get(status)
    if display is None:
        # unrecognized statuses are harmless, show them raw
        return {'text': status, 'color': STATUS_COLOR_GRAY}

    text, color = display
    return {'text': text, 'color': color}
