"""Shared behaviour for the built-in gateway families.

Each family subclasses these with its own class attributes (tag, display
name, currency symbol, required card prefix). The classes carry no
per-instance state beyond the collaborators they are constructed with.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from payment_families.application.ports import (
    CardValidator,
    PaymentFactory,
    PaymentLogger,
    TransactionProcessor,
)
from payment_families.domain.value_objects import TransactionReference
from payment_families.domain.value_objects.amount import format_amount
from payment_families.infrastructure.sinks import LoggingSink, write_quietly
from payment_families.infrastructure.time_provider import SystemTimeProvider
from payment_families.infrastructure.token_provider import UuidTokenProvider

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_families.application.ports import OutputSink, TimeProvider, TokenProvider

CARD_LENGTH = 16


class FixedLengthCardValidator(CardValidator):
    """Accepts cards of CARD_LENGTH characters starting with required_prefix.

    An empty required_prefix means any 16-character string is accepted.
    """

    required_prefix: ClassVar[str] = ""

    def validate_card(self, card_number: str) -> bool:
        return len(card_number) == CARD_LENGTH and card_number.startswith(self.required_prefix)


class SimulatedProcessor(TransactionProcessor):
    """Announces the transaction on a sink and returns a tagged reference."""

    family_tag: ClassVar[str]
    display_name: ClassVar[str]
    currency_symbol: ClassVar[str]

    def __init__(self, sink: OutputSink, token_provider: TokenProvider) -> None:
        self._sink = sink
        self._token_provider = token_provider

    def process_transaction(self, amount: Decimal, card_number: str) -> TransactionReference:
        write_quietly(
            self._sink,
            f"{self.display_name}: processing {self.currency_symbol} {format_amount(amount)}...",
        )
        return TransactionReference.generate(self.family_tag, self._token_provider)


class TimestampedLogger(PaymentLogger):
    """Writes "[<display_name> Log] <timestamp>: <message>" to a sink."""

    display_name: ClassVar[str]

    def __init__(self, sink: OutputSink, time_provider: TimeProvider) -> None:
        self._sink = sink
        self._time_provider = time_provider

    def log(self, message: str) -> None:
        timestamp = self._time_provider.now().isoformat(timespec="seconds")
        write_quietly(self._sink, f"[{self.display_name} Log] {timestamp}: {message}")


class GatewayFamilyFactory(PaymentFactory):
    """Factory base for the built-in families.

    Subclasses bind exactly one validator, processor and logger class.
    The collaborators passed here are shared by every component the
    factory builds; omitted ones get production defaults.
    """

    display_name: ClassVar[str]
    validator_class: ClassVar[type[FixedLengthCardValidator]]
    processor_class: ClassVar[type[SimulatedProcessor]]
    logger_class: ClassVar[type[TimestampedLogger]]

    def __init__(
        self,
        sink: OutputSink | None = None,
        token_provider: TokenProvider | None = None,
        time_provider: TimeProvider | None = None,
    ) -> None:
        self._sink = sink if sink is not None else LoggingSink()
        self._token_provider = token_provider if token_provider is not None else UuidTokenProvider()
        self._time_provider = time_provider if time_provider is not None else SystemTimeProvider()

    def create_validator(self) -> CardValidator:
        return self.validator_class()

    def create_processor(self) -> TransactionProcessor:
        return self.processor_class(self._sink, self._token_provider)

    def create_logger(self) -> PaymentLogger:
        return self.logger_class(self._sink, self._time_provider)
