import os
import logging
from dotenv import load_dotenv

def reload_env():
    """Reload environment variables from .env file."""
    load_dotenv(override=True)  # override=True forces reload

    global STRIPE_CARD_PERCENTAGE, STRIPE_CARD_FIXED
    global STRIPE_ACH_PERCENTAGE, STRIPE_ACH_CAP
    global PLATFORM_FEE_PERCENTAGE, STRIPE_MINIMUM_CHARGE
    global INSTALLMENT_INTERVAL_DAYS, LOG_DIR

    STRIPE_CARD_PERCENTAGE = os.getenv("STRIPE_CARD_PERCENTAGE", "0.029")
    STRIPE_CARD_FIXED = os.getenv("STRIPE_CARD_FIXED", "0.30")
    STRIPE_ACH_PERCENTAGE = os.getenv("STRIPE_ACH_PERCENTAGE", "0.008")
    STRIPE_ACH_CAP = os.getenv("STRIPE_ACH_CAP", "5.00")
    PLATFORM_FEE_PERCENTAGE = os.getenv("PLATFORM_FEE_PERCENTAGE", "0.01")
    STRIPE_MINIMUM_CHARGE = os.getenv("STRIPE_MINIMUM_CHARGE", "0.50")

    INSTALLMENT_INTERVAL_DAYS = int(os.getenv("INSTALLMENT_INTERVAL_DAYS", "30"))
    LOG_DIR = os.getenv("LOG_DIR", "logs")

    logging.info("Environment variables reloaded successfully")
    logging.info(f"Card fee: {STRIPE_CARD_PERCENTAGE} + {STRIPE_CARD_FIXED}, "
                 f"ACH fee: {STRIPE_ACH_PERCENTAGE} capped at {STRIPE_ACH_CAP}, "
                 f"platform fee: {PLATFORM_FEE_PERCENTAGE}")


load_dotenv()

# Stripe processing fees. Kept as strings so they go straight into Decimal.
STRIPE_CARD_PERCENTAGE = os.getenv("STRIPE_CARD_PERCENTAGE", "0.029")   # 2.9%
STRIPE_CARD_FIXED = os.getenv("STRIPE_CARD_FIXED", "0.30")              # $0.30
STRIPE_ACH_PERCENTAGE = os.getenv("STRIPE_ACH_PERCENTAGE", "0.008")     # 0.8%
STRIPE_ACH_CAP = os.getenv("STRIPE_ACH_CAP", "5.00")                    # $5.00 cap

# Stripe will not create a USD charge below this
STRIPE_MINIMUM_CHARGE = os.getenv("STRIPE_MINIMUM_CHARGE", "0.50")

# GreekPay platform take-rate
PLATFORM_FEE_PERCENTAGE = os.getenv("PLATFORM_FEE_PERCENTAGE", "0.01")  # 1%

# Installment plans
INSTALLMENT_INTERVAL_DAYS = int(os.getenv("INSTALLMENT_INTERVAL_DAYS", "30"))

# Logging
LOG_DIR = os.getenv("LOG_DIR", "logs")
