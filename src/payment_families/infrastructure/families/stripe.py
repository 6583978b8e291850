"""Stripe family: 16-character cards starting with 4, amounts in dollars."""

from payment_families.infrastructure.families.base import (
    FixedLengthCardValidator,
    GatewayFamilyFactory,
    SimulatedProcessor,
    TimestampedLogger,
)


class StripeValidator(FixedLengthCardValidator):
    required_prefix = "4"


class StripeProcessor(SimulatedProcessor):
    family_tag = "STRIPE"
    display_name = "Stripe"
    currency_symbol = "$"


class StripeLogger(TimestampedLogger):
    display_name = "Stripe"


class StripeFactory(GatewayFamilyFactory):
    """Builds Stripe components only."""

    family_name = "stripe"
    display_name = "Stripe"
    validator_class = StripeValidator
    processor_class = StripeProcessor
    logger_class = StripeLogger
