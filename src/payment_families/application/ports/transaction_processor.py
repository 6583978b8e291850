from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_families.domain.value_objects import TransactionReference


class TransactionProcessor(ABC):
    """Port for submitting a transaction to a (simulated) gateway.

    Contract:
    - The card has already passed the family's validator; no re-validation
    - process_transaction() always succeeds and returns a fresh reference
      tagged with the family's prefix
    - Progress notices go to an injected OutputSink; a failing sink MUST
      NOT prevent the reference from being returned
    """

    @abstractmethod
    def process_transaction(self, amount: Decimal, card_number: str) -> TransactionReference:
        """Process amount against card_number.

        Args:
            amount: Non-negative amount, already validated.
            card_number: Card accepted by the same family's validator.

        Returns:
            A new TransactionReference, unique per call.
        """
