"""Built-in gateway families.

Each module holds one family: its validator, processor, logger and the
factory that binds them together.
"""

from payment_families.infrastructure.families.base import GatewayFamilyFactory
from payment_families.infrastructure.families.mercadopago import MercadoPagoFactory
from payment_families.infrastructure.families.pagseguro import PagSeguroFactory
from payment_families.infrastructure.families.stripe import StripeFactory

__all__ = [
    "GatewayFamilyFactory",
    "MercadoPagoFactory",
    "PagSeguroFactory",
    "StripeFactory",
]
