from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_families.application.ports import TokenProvider

TOKEN_LENGTH = 8
SEPARATOR = "-"


@dataclass(frozen=True, slots=True)
class TransactionReference:
    """Synthetic reference returned by a processor for a completed transaction.

    Rendered as "<family_tag>-<token>", e.g. "MP-3f2a9c1e". The token is
    always TOKEN_LENGTH characters; the tag identifies the family that
    produced it.
    """

    family_tag: str
    token: str

    def __post_init__(self) -> None:
        if not self.family_tag or SEPARATOR in self.family_tag:
            raise ValueError(f"Invalid family tag: {self.family_tag!r}")
        if len(self.token) != TOKEN_LENGTH:
            raise ValueError(
                f"Reference token must be {TOKEN_LENGTH} characters, got {self.token!r}"
            )

    @classmethod
    def generate(cls, family_tag: str, token_provider: TokenProvider) -> TransactionReference:
        """Create a reference for family_tag from a fresh token."""
        return cls(family_tag=family_tag, token=token_provider.new_token())

    @property
    def value(self) -> str:
        return f"{self.family_tag}{SEPARATOR}{self.token}"

    def __str__(self) -> str:
        return self.value
