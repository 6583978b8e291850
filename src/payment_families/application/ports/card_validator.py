from __future__ import annotations

from abc import ABC, abstractmethod


class CardValidator(ABC):
    """Port for a family's card acceptance rule.

    Contract:
    - validate_card() is a pure predicate with no side effects
    - validate_card() MUST NOT raise for any str input; empty or short
      strings are simply rejected
    """

    @abstractmethod
    def validate_card(self, card_number: str) -> bool:
        """Return True if the family accepts card_number."""
