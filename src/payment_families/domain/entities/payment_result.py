"""Typed outcome of a single process_payment call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_families.domain.value_objects import Amount, TransactionReference


class PaymentStatus(Enum):
    """Terminal outcomes of a payment attempt."""

    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class PaymentResult:
    """Outcome of one payment attempt.

    An approved result always carries the reference produced by the
    family's processor; a rejected one never does. Use the approved()
    and rejected() constructors to keep that pairing intact.
    """

    status: PaymentStatus
    family: str
    amount: Amount
    reference: TransactionReference | None = None

    @classmethod
    def approved(
        cls, family: str, amount: Amount, reference: TransactionReference
    ) -> PaymentResult:
        return cls(status=PaymentStatus.APPROVED, family=family, amount=amount, reference=reference)

    @classmethod
    def rejected(cls, family: str, amount: Amount) -> PaymentResult:
        return cls(status=PaymentStatus.REJECTED, family=family, amount=amount)

    @property
    def is_approved(self) -> bool:
        return self.status == PaymentStatus.APPROVED
