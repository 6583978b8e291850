"""Use cases - Application entry points."""

from payment_families.application.use_cases.process_payment import PaymentService

__all__ = [
    "PaymentService",
]
