"""Value objects - Immutable objects defined by their attributes."""

from payment_families.domain.value_objects.amount import Amount
from payment_families.domain.value_objects.card_number import CardNumber
from payment_families.domain.value_objects.transaction_reference import TransactionReference

__all__ = [
    "Amount",
    "CardNumber",
    "TransactionReference",
]
