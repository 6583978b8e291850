from __future__ import annotations

from dataclasses import dataclass

from payment_families.domain.exceptions import InvalidCardNumberError

VISIBLE_DIGITS = 4


@dataclass(frozen=True, slots=True)
class CardNumber:
    """Opaque card identifier supplied with each payment.

    Any string is accepted as-is (no trimming, no structural checks);
    each family's validator applies its own acceptance rule.
    The full value must never reach a log line, use masked() instead.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidCardNumberError(
                f"Card number must be a string, got {type(self.value).__name__}"
            )

    def masked(self) -> str:
        """Return the card number with all but the last four characters hidden."""
        return "*" * max(len(self.value) - VISIBLE_DIGITS, 0) + self.value[-VISIBLE_DIGITS:]

    def __str__(self) -> str:
        return self.masked()
