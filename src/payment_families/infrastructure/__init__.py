"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Families: PagSeguro, MercadoPago and Stripe components and factories
- Registry: Selection of a family factory by name
- Providers: Reference tokens and clock
- Sinks: Where notices and log lines are written
- Config & Logging: Settings and log handler setup

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_families.infrastructure.families import (
    MercadoPagoFactory,
    PagSeguroFactory,
    StripeFactory,
)
from payment_families.infrastructure.registry import (
    get_factory,
    list_available_families,
    register_family,
)
from payment_families.infrastructure.sinks import CollectingSink, ConsoleSink, LoggingSink
from payment_families.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider
from payment_families.infrastructure.token_provider import (
    SequenceTokenProvider,
    UuidTokenProvider,
)

__all__ = [
    "CollectingSink",
    "ConsoleSink",
    "FixedTimeProvider",
    "LoggingSink",
    "MercadoPagoFactory",
    "PagSeguroFactory",
    "SequenceTokenProvider",
    "StripeFactory",
    "SystemTimeProvider",
    "UuidTokenProvider",
    "get_factory",
    "list_available_families",
    "register_family",
]
