"""
Test suite for the Stripe dues fee calculator

These tests pin the exact cent values written to the ledger. A mistake here
means a chapter's books stop reconciling with Stripe's settlement reports.
"""

import unittest
import warnings
from decimal import Decimal

from greekpay.core.constants import PaymentMethodType
from greekpay.payments.errors import InvalidAmount, InvalidMethod, FeeCalculationError, RoundingOverflow
from greekpay.payments.fees import (
    FeeSchedule,
    StripeFeeCalculator,
    calculate_stripe_fee,
    calculate_platform_fee,
    calculate_total_charge,
    calculate_chapter_receives,
    calculate_fee_breakdown,
    calculate_transaction_fee,
    to_cents,
)

CARD = 'card'
ACH = 'us_bank_account'

AMOUNTS = ['0.50', '1', '9.99', '10', '33', '50', '99.99', '100', '123.45',
           '500', '624.99', '625', '1000', '2500', '5000', '10000']


class TestStripeFee(unittest.TestCase):
    """Test cases for calculate_stripe_fee"""

    def test_card_fee_reverse_calculation(self):
        """Card fee is marked up so (total - 2.9% - $0.30) equals the dues"""
        # (100 + 0.30) / 0.971 = 103.2956 -> fee 3.30
        self.assertEqual(calculate_stripe_fee(100, CARD), Decimal('3.30'))
        # (500 + 0.30) / 0.971 = 515.2420 -> fee 15.24
        self.assertEqual(calculate_stripe_fee(500, CARD), Decimal('15.24'))
        # (1000 + 0.30) / 0.971 = 1030.1751 -> fee 30.18
        self.assertEqual(calculate_stripe_fee(1000, CARD), Decimal('30.18'))
        # (10000 + 0.30) / 0.971 = 10298.9701 -> fee 298.97
        self.assertEqual(calculate_stripe_fee(10000, CARD), Decimal('298.97'))

    def test_card_fee_small_amounts(self):
        """Fixed component dominates for small dues"""
        self.assertEqual(calculate_stripe_fee(10, CARD), Decimal('0.61'))
        # Zero dues still costs the fixed fee: 0.30 / 0.971 = 0.3090
        self.assertEqual(calculate_stripe_fee(0, CARD), Decimal('0.31'))

    def test_ach_fee_below_cap(self):
        """ACH is a flat 0.8% with no markup"""
        self.assertEqual(calculate_stripe_fee(100, ACH), Decimal('0.80'))
        self.assertEqual(calculate_stripe_fee(500, ACH), Decimal('4.00'))
        self.assertEqual(calculate_stripe_fee(10, ACH), Decimal('0.08'))
        # 123.45 * 0.008 = 0.9876
        self.assertEqual(calculate_stripe_fee('123.45', ACH), Decimal('0.99'))

    def test_ach_fee_cap(self):
        """ACH fee never exceeds $5.00"""
        for amount in (625, 1000, 5000, 10000):
            self.assertEqual(calculate_stripe_fee(amount, ACH), Decimal('5.00'))

    def test_ach_fee_zero(self):
        self.assertEqual(calculate_stripe_fee(0, ACH), Decimal('0.00'))

    def test_fee_is_rounded_to_cents(self):
        for amount in AMOUNTS:
            for method in (CARD, ACH):
                fee = calculate_stripe_fee(amount, method)
                self.assertEqual(fee.as_tuple().exponent, -2)
                self.assertGreaterEqual(fee, 0)

    def test_accepts_enum_and_string_methods(self):
        self.assertEqual(
            calculate_stripe_fee(100, PaymentMethodType.CARD),
            calculate_stripe_fee(100, 'card')
        )
        self.assertEqual(
            calculate_stripe_fee(100, PaymentMethodType.US_BANK_ACCOUNT),
            calculate_stripe_fee(100, 'us_bank_account')
        )

    def test_accepts_float_input(self):
        self.assertEqual(calculate_stripe_fee(100.0, CARD), Decimal('3.30'))
        self.assertEqual(calculate_stripe_fee(Decimal('100.00'), CARD), Decimal('3.30'))


class TestPlatformFee(unittest.TestCase):
    """Test cases for calculate_platform_fee"""

    def test_one_percent(self):
        self.assertEqual(calculate_platform_fee(100), Decimal('1.00'))
        self.assertEqual(calculate_platform_fee(500), Decimal('5.00'))
        self.assertEqual(calculate_platform_fee(1000), Decimal('10.00'))

    def test_penny_precision(self):
        self.assertEqual(calculate_platform_fee(33), Decimal('0.33'))
        # 123.45 * 0.01 = 1.2345
        self.assertEqual(calculate_platform_fee('123.45'), Decimal('1.23'))
        # Half a cent rounds up
        self.assertEqual(calculate_platform_fee('0.50'), Decimal('0.01'))

    def test_zero(self):
        self.assertEqual(calculate_platform_fee(0), Decimal('0'))


class TestTotalCharge(unittest.TestCase):
    """Test cases for calculate_total_charge"""

    def test_ach_payer_pays_exact_dues(self):
        for amount in AMOUNTS + ['0']:
            self.assertEqual(calculate_total_charge(amount, ACH), Decimal(amount))

    def test_card_payer_pays_dues_plus_fee(self):
        self.assertEqual(calculate_total_charge(100, CARD), Decimal('103.30'))
        self.assertEqual(calculate_total_charge(500, CARD), Decimal('515.24'))

    def test_card_total_minus_fee_is_dues(self):
        for amount in AMOUNTS + ['0']:
            total = calculate_total_charge(amount, CARD)
            fee = calculate_stripe_fee(amount, CARD)
            self.assertEqual(total - fee, Decimal(amount))
            self.assertGreater(total, Decimal(amount))

    def test_card_markup_covers_stripe_deduction(self):
        """What Stripe keeps from the marked-up charge is within a cent of the fee"""
        for amount in AMOUNTS:
            total = calculate_total_charge(amount, CARD)
            stripe_takes = total * Decimal('0.029') + Decimal('0.30')
            self.assertLessEqual(abs((total - stripe_takes) - Decimal(amount)), Decimal('0.01'))


class TestChapterReceives(unittest.TestCase):
    """Test cases for calculate_chapter_receives"""

    def test_card_only_platform_fee_deducted(self):
        self.assertEqual(calculate_chapter_receives(100, CARD), Decimal('99.00'))
        self.assertEqual(calculate_chapter_receives(500, CARD), Decimal('495.00'))
        self.assertEqual(calculate_chapter_receives(1000, CARD), Decimal('990.00'))

    def test_ach_both_fees_deducted(self):
        # 100 - 0.80 ACH - 1.00 platform
        self.assertEqual(calculate_chapter_receives(100, ACH), Decimal('98.20'))
        # 500 - 4.00 ACH - 5.00 platform
        self.assertEqual(calculate_chapter_receives(500, ACH), Decimal('491.00'))

    def test_ach_cap_benefits_large_payments(self):
        # 1000 - 5.00 capped ACH - 10.00 platform
        self.assertEqual(calculate_chapter_receives(1000, ACH), Decimal('985.00'))
        self.assertEqual(calculate_chapter_receives(5000, ACH), Decimal('4945.00'))

    def test_net_strictly_between_zero_and_amount(self):
        for amount in AMOUNTS:
            for method in (CARD, ACH):
                net = calculate_chapter_receives(amount, method)
                self.assertGreater(net, 0, f"{method} {amount}")
                self.assertLess(net, Decimal(amount), f"{method} {amount}")

    def test_card_net_below_minimum_charge_keeps_full_amount(self):
        # Platform fee rounds to zero under 50 cents
        self.assertEqual(calculate_chapter_receives('0.25', CARD), Decimal('0.25'))
        self.assertEqual(calculate_chapter_receives('0.49', CARD), Decimal('0.49'))
        self.assertEqual(calculate_chapter_receives('0.50', CARD), Decimal('0.49'))

    def test_card_beats_ach_for_small_amounts(self):
        self.assertGreater(
            calculate_chapter_receives(100, CARD),
            calculate_chapter_receives(100, ACH)
        )


class TestIdempotence(unittest.TestCase):

    def test_repeated_calls_match(self):
        for method in (CARD, ACH):
            self.assertEqual(calculate_stripe_fee('250.75', method), calculate_stripe_fee('250.75', method))
            self.assertEqual(calculate_total_charge('250.75', method), calculate_total_charge('250.75', method))
            self.assertEqual(calculate_chapter_receives('250.75', method), calculate_chapter_receives('250.75', method))
        self.assertEqual(calculate_platform_fee('250.75'), calculate_platform_fee('250.75'))


class TestInputValidation(unittest.TestCase):
    """Bad input is rejected, never defaulted"""

    def test_negative_amount(self):
        with self.assertRaises(InvalidAmount):
            calculate_stripe_fee(-1, CARD)
        with self.assertRaises(InvalidAmount):
            calculate_platform_fee('-0.01')
        with self.assertRaises(InvalidAmount):
            calculate_chapter_receives(-100, ACH)

    def test_non_finite_amount(self):
        for amount in (float('nan'), float('inf'), 'Infinity'):
            with self.assertRaises(InvalidAmount):
                calculate_total_charge(amount, CARD)

    def test_non_numeric_amount(self):
        for amount in ('ten dollars', None, True, [100]):
            with self.assertRaises(InvalidAmount):
                calculate_stripe_fee(amount, CARD)

    def test_unknown_method(self):
        for method in ('paypal', 'CARD', 'stripe_card', '', None, 3):
            with self.assertRaises(InvalidMethod):
                calculate_stripe_fee(100, method)

    def test_unknown_method_on_ach_only_path(self):
        """ACH total short-circuits, but the method is still checked first"""
        with self.assertRaises(InvalidMethod):
            calculate_total_charge(100, 'bank')

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            calculate_stripe_fee(-1, CARD)
        with self.assertRaises(FeeCalculationError):
            calculate_stripe_fee(100, 'paypal')

    def test_amount_too_large_to_round(self):
        with self.assertRaises(RoundingOverflow):
            calculate_stripe_fee('1e40', CARD)
        with self.assertRaises(RoundingOverflow):
            calculate_platform_fee('1e40')
        with self.assertRaises(ArithmeticError):
            calculate_total_charge('1e40', CARD)

    def test_rounding_overflow_is_logged(self):
        with self.assertLogs('greekpay.payments.fees.fee_models', level='ERROR') as logs:
            with self.assertRaises(RoundingOverflow):
                calculate_platform_fee('1e40')
        self.assertIn('Cannot round', logs.output[0])


class TestFeeBreakdown(unittest.TestCase):
    """Test cases for calculate_fee_breakdown"""

    def test_card_breakdown(self):
        breakdown = calculate_fee_breakdown(100, CARD)

        self.assertEqual(breakdown.amount, Decimal('100'))
        self.assertEqual(breakdown.payment_method_type, PaymentMethodType.CARD)
        self.assertEqual(breakdown.stripe_fee, Decimal('3.30'))
        self.assertEqual(breakdown.platform_fee, Decimal('1.00'))
        self.assertEqual(breakdown.total_charge, Decimal('103.30'))
        self.assertEqual(breakdown.chapter_receives, Decimal('99.00'))
        self.assertEqual(breakdown.application_fee, Decimal('4.30'))

        self.assertEqual(breakdown.to_cents(), {
            'amount_cents': 10330,
            'application_fee_cents': 430,
            'transfer_amount_cents': 9900,
        })

    def test_ach_breakdown(self):
        breakdown = calculate_fee_breakdown(100, ACH)

        self.assertEqual(breakdown.total_charge, Decimal('100'))
        self.assertEqual(breakdown.chapter_receives, Decimal('98.20'))
        self.assertEqual(breakdown.to_cents(), {
            'amount_cents': 10000,
            'application_fee_cents': 180,
            'transfer_amount_cents': 9820,
        })

    def test_to_dict(self):
        result = calculate_fee_breakdown(100, CARD).to_dict()

        self.assertEqual(set(result.keys()), {
            'amount', 'payment_method_type', 'stripe_fee', 'platform_fee',
            'total_charge', 'chapter_receives'
        })
        self.assertEqual(result['payment_method_type'], 'card')
        self.assertEqual(result['total_charge'], 103.3)

    def test_below_minimum_charge(self):
        with self.assertRaises(InvalidAmount):
            calculate_fee_breakdown('0.49', CARD)
        with self.assertRaises(InvalidAmount):
            calculate_fee_breakdown(0, ACH)

    def test_at_minimum_charge(self):
        breakdown = calculate_fee_breakdown('0.50', ACH)
        self.assertEqual(breakdown.chapter_receives, Decimal('0.49'))


class TestToCents(unittest.TestCase):

    def test_conversion(self):
        self.assertEqual(to_cents(Decimal('103.30')), 10330)
        self.assertEqual(to_cents('0.005'), 1)
        self.assertEqual(to_cents(0), 0)
        self.assertEqual(to_cents(19.99), 1999)

    def test_overflow(self):
        with self.assertRaises(RoundingOverflow):
            to_cents('1e40')


class TestCustomSchedule(unittest.TestCase):
    """Rates are injected, not hardcoded"""

    def setUp(self):
        self.calculator = StripeFeeCalculator(FeeSchedule(
            card_percentage='0.03',
            card_fixed='0.25',
            ach_percentage='0.008',
            ach_cap='10.00',
            platform_percentage='0.005',
        ))

    def test_card_fee_uses_schedule(self):
        # (100 + 0.25) / 0.97 = 103.3505
        self.assertEqual(self.calculator.calculate_stripe_fee(100, CARD), Decimal('3.35'))

    def test_ach_cap_uses_schedule(self):
        self.assertEqual(self.calculator.calculate_stripe_fee(1000, ACH), Decimal('8.00'))
        self.assertEqual(self.calculator.calculate_stripe_fee(5000, ACH), Decimal('10.00'))

    def test_platform_fee_uses_schedule(self):
        self.assertEqual(self.calculator.calculate_platform_fee(100), Decimal('0.50'))
        self.assertEqual(self.calculator.calculate_chapter_receives(100, CARD), Decimal('99.50'))

    def test_default_schedule_rates(self):
        schedule = FeeSchedule()
        self.assertEqual(schedule.card_percentage, Decimal('0.029'))
        self.assertEqual(schedule.card_fixed, Decimal('0.30'))
        self.assertEqual(schedule.ach_percentage, Decimal('0.008'))
        self.assertEqual(schedule.ach_cap, Decimal('5.00'))
        self.assertEqual(schedule.platform_percentage, Decimal('0.01'))
        self.assertEqual(schedule.minimum_charge, Decimal('0.50'))


class TestDeprecatedTransactionFee(unittest.TestCase):

    def test_matches_stripe_fee_and_warns(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            fee = calculate_transaction_fee(100, CARD)

        self.assertEqual(fee, calculate_stripe_fee(100, CARD))
        self.assertTrue(any(issubclass(w.category, DeprecationWarning) for w in caught))


if __name__ == '__main__':
    unittest.main()
