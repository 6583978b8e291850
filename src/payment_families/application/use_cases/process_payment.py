from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payment_families.domain.entities import PaymentResult
from payment_families.domain.value_objects import Amount, CardNumber

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_families.application.ports import OutputSink, PaymentFactory

logger = logging.getLogger(__name__)

REJECTION_NOTICE = "Error: invalid card."
SUCCESS_MESSAGE = "Success: {reference}"


class PaymentService:
    """Client of a payment family.

    Responsibilities:
    - Draw validator, processor and logger from the factory exactly once
    - Reject malformed input before the validator is consulted
    - Run validator -> processor -> logger for each payment

    The service never learns which family it was given, and the factory
    is not kept after construction, so the three components can never be
    replaced by those of another family.
    """

    def __init__(self, factory: PaymentFactory, notice_sink: OutputSink | None = None) -> None:
        self._family = factory.family_name
        self._validator = factory.create_validator()
        self._processor = factory.create_processor()
        self._logger = factory.create_logger()
        self._notice_sink = notice_sink

    @property
    def family(self) -> str:
        return self._family

    def process_payment(self, amount: Decimal | int | str, card_number: str) -> PaymentResult:
        """Validate, process and log a single payment.

        Args:
            amount: Non-negative amount (Decimal, int or numeric string).
            card_number: Card identifier; acceptance is up to the family.

        Returns:
            PaymentResult, APPROVED with a reference or REJECTED without one.

        Raises:
            InvalidAmountError: amount is negative, non-finite or not a decimal.
            InvalidCardNumberError: card_number is missing or not a string.
        """
        # Step 1: Fail fast on malformed input
        checked_amount = Amount.of(amount)
        card = CardNumber(card_number)

        # Step 2: Family acceptance rule
        if not self._validator.validate_card(card.value):
            logger.info("Card %s rejected by %s validator", card.masked(), self._family)
            self._notify(REJECTION_NOTICE)
            return PaymentResult.rejected(family=self._family, amount=checked_amount)

        # Step 3: Process, then log the outcome
        reference = self._processor.process_transaction(checked_amount.value, card.value)
        logger.info("Payment of %s approved by %s: %s", checked_amount, self._family, reference)

        try:
            self._logger.log(SUCCESS_MESSAGE.format(reference=reference))
        except Exception:
            logger.warning("Failed to record outcome for %s", reference, exc_info=True)

        return PaymentResult.approved(
            family=self._family, amount=checked_amount, reference=reference
        )

    def _notify(self, message: str) -> None:
        if self._notice_sink is None:
            logger.warning(message)
            return
        try:
            self._notice_sink.write(message)
        except Exception:
            logger.warning("Failed to write notice: %s", message, exc_info=True)
