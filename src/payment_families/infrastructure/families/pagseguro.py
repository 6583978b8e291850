"""PagSeguro family: any 16-character card, amounts in reais."""

from payment_families.infrastructure.families.base import (
    FixedLengthCardValidator,
    GatewayFamilyFactory,
    SimulatedProcessor,
    TimestampedLogger,
)


class PagSeguroValidator(FixedLengthCardValidator):
    required_prefix = ""


class PagSeguroProcessor(SimulatedProcessor):
    family_tag = "PAGSEG"
    display_name = "PagSeguro"
    currency_symbol = "R$"


class PagSeguroLogger(TimestampedLogger):
    display_name = "PagSeguro"


class PagSeguroFactory(GatewayFamilyFactory):
    """Builds PagSeguro components only."""

    family_name = "pagseguro"
    display_name = "PagSeguro"
    validator_class = PagSeguroValidator
    processor_class = PagSeguroProcessor
    logger_class = PagSeguroLogger
