"""Domain entities - Outcomes of payment processing."""

from payment_families.domain.entities.payment_result import PaymentResult, PaymentStatus

__all__ = [
    "PaymentResult",
    "PaymentStatus",
]
