from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_families.application.ports.card_validator import CardValidator
    from payment_families.application.ports.payment_logger import PaymentLogger
    from payment_families.application.ports.transaction_processor import TransactionProcessor


class PaymentFactory(ABC):
    """Port for building one family's components.

    Contract:
    - create_validator(), create_processor() and create_logger() take no
      arguments and return a NEW instance on every call
    - All three belong to the same family, by construction: a concrete
      factory hard-wires its own family's classes and nothing else
    - Factories hold no mutable state shared with the components they build
    - family_name is the registry key, display_name the human-readable label
    """

    family_name: str
    display_name: str

    @abstractmethod
    def create_validator(self) -> CardValidator:
        """Return a fresh validator of this family."""

    @abstractmethod
    def create_processor(self) -> TransactionProcessor:
        """Return a fresh processor of this family."""

    @abstractmethod
    def create_logger(self) -> PaymentLogger:
        """Return a fresh logger of this family."""
