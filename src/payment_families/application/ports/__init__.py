"""Ports - Abstract interfaces for family components and their collaborators.

Ports define the contracts that infrastructure adapters must implement.
PaymentService only ever sees these types, never a concrete family.
"""

from payment_families.application.ports.card_validator import CardValidator
from payment_families.application.ports.output_sink import OutputSink
from payment_families.application.ports.payment_factory import PaymentFactory
from payment_families.application.ports.payment_logger import PaymentLogger
from payment_families.application.ports.time_provider import TimeProvider
from payment_families.application.ports.token_provider import TokenProvider
from payment_families.application.ports.transaction_processor import TransactionProcessor

__all__ = [
    "CardValidator",
    "OutputSink",
    "PaymentFactory",
    "PaymentLogger",
    "TimeProvider",
    "TokenProvider",
    "TransactionProcessor",
]
