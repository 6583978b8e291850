"""Domain exceptions for payment-families.

Exception hierarchy:
    DomainException (base)
    ├── Malformed Input Errors
    │   └── InvalidArgumentError
    │       ├── InvalidAmountError
    │       └── InvalidCardNumberError
    └── Family Selection Errors
        └── UnsupportedFamilyError

A card that fails its family's acceptance rule is NOT an exception: the
payment service reports it as a rejected PaymentResult.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Malformed Input Errors
# =============================================================================


class InvalidArgumentError(DomainException):
    """Raised when a payment request is malformed.

    Raised before the family's validator is consulted, so a malformed
    request never reaches a processor or a logger.
    """


class InvalidAmountError(InvalidArgumentError):
    """Raised when an amount is negative, non-finite or not a decimal.

    Floats are refused: amounts must come in as Decimal, int or a
    numeric string.
    """


class InvalidCardNumberError(InvalidArgumentError):
    """Raised when a card number is absent or not a string.

    Any string is a well-formed card number; whether it is acceptable
    is decided by the family's validator.
    """


# =============================================================================
# Family Selection Errors
# =============================================================================


class UnsupportedFamilyError(DomainException):
    """Raised when a family name has no registered factory."""

    def __init__(self, name: str, supported: list[str]) -> None:
        self.name = name
        self.supported = supported
        super().__init__(
            f"Unsupported payment family: {name}. Supported families: {', '.join(supported)}"
        )
