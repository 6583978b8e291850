from __future__ import annotations

from abc import ABC, abstractmethod


class TokenProvider(ABC):
    """Port for the random part of transaction references.

    Contract:
    - new_token() returns exactly 8 characters
    - Successive tokens MUST be distinct with overwhelming probability
    - new_token() MUST be safe to call from several threads
    - Tokens need not be cryptographically secure
    """

    @abstractmethod
    def new_token(self) -> str:
        """Return a fresh 8-character token."""
