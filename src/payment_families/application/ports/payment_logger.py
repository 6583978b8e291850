from __future__ import annotations

from abc import ABC, abstractmethod


class PaymentLogger(ABC):
    """Port for recording payment outcomes in a family-specific format.

    Contract:
    - log() annotates message with the family's tag and a timestamp
    - log() MUST NOT raise when the underlying sink fails
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """Record message."""
