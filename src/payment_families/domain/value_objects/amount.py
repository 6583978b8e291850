from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext

from payment_families.domain.exceptions import InvalidAmountError

CENTS = Decimal("0.01")


def format_amount(value: Decimal | int | float) -> str:
    """Render value with two decimal places, whatever its magnitude.

    Does not validate: negative and non-finite values are rendered as-is.
    """
    value = value if isinstance(value, Decimal) else Decimal(value)
    if not value.is_finite():
        return str(value)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the two cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(CENTS))


@dataclass(frozen=True, slots=True)
class Amount:
    """Value object for a non-negative monetary amount.

    The currency is implied by the family that processes it; no
    conversion happens anywhere in the package.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise InvalidAmountError(f"Amount must be a Decimal, got {type(self.value).__name__}")
        if not self.value.is_finite():
            raise InvalidAmountError(f"Amount must be finite, got {self.value}")
        if self.value < 0:
            raise InvalidAmountError(f"Amount cannot be negative, got {self.value}")

    @classmethod
    def of(cls, value: Decimal | int | str) -> Amount:
        """Build an Amount from a Decimal, an int or a numeric string.

        Args:
            value: The raw amount. Floats are refused.

        Returns:
            An Amount instance.

        Raises:
            InvalidAmountError: If the value is not a usable non-negative decimal.
        """
        if isinstance(value, Amount):
            return value
        if isinstance(value, bool) or not isinstance(value, (Decimal, int, str)):
            raise InvalidAmountError(
                f"Amount must be a Decimal, int or numeric string, got {type(value).__name__}"
            )
        try:
            return cls(value=Decimal(value.strip() if isinstance(value, str) else value))
        except InvalidOperation as e:
            raise InvalidAmountError(f"Invalid amount: {value!r}") from e

    def __str__(self) -> str:
        return format_amount(self.value)
