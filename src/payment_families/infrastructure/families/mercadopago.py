"""MercadoPago family: 16-character cards starting with 5, amounts in reais."""

from payment_families.infrastructure.families.base import (
    FixedLengthCardValidator,
    GatewayFamilyFactory,
    SimulatedProcessor,
    TimestampedLogger,
)


class MercadoPagoValidator(FixedLengthCardValidator):
    required_prefix = "5"


class MercadoPagoProcessor(SimulatedProcessor):
    family_tag = "MP"
    display_name = "MercadoPago"
    currency_symbol = "R$"


class MercadoPagoLogger(TimestampedLogger):
    display_name = "MercadoPago"


class MercadoPagoFactory(GatewayFamilyFactory):
    """Builds MercadoPago components only."""

    family_name = "mercadopago"
    display_name = "MercadoPago"
    validator_class = MercadoPagoValidator
    processor_class = MercadoPagoProcessor
    logger_class = MercadoPagoLogger
