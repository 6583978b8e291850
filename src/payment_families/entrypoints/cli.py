"""Command-line interface.

Commands:
    demo      Run one sample payment through every built-in family
    pay       Process a single payment with a chosen family
    families  List registered family names

Exit codes: 0 approved / success, 1 payment rejected, 2 invalid input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from typing import TYPE_CHECKING

from payment_families.application.use_cases import PaymentService
from payment_families.domain.exceptions import InvalidArgumentError, UnsupportedFamilyError
from payment_families.infrastructure.config import get_settings
from payment_families.infrastructure.logging import setup_logging
from payment_families.infrastructure.registry import get_factory, list_available_families
from payment_families.infrastructure.sinks import ConsoleSink

if TYPE_CHECKING:
    from collections.abc import Sequence

    from payment_families.application.ports import OutputSink

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_INVALID = 2

BANNER = "=== Multi-gateway payment system (abstract factory) ==="

# (family, amount, card) for the demo run, one per built-in family
DEMO_PAYMENTS = [
    ("pagseguro", Decimal("150.00"), "1234567890123456"),
    ("mercadopago", Decimal("200.00"), "5234567890123456"),
    ("stripe", Decimal("300.00"), "4234567890123456"),
]


def run_demo(sink: OutputSink) -> int:
    """Process the sample payments, one service per family."""
    sink.write(BANNER)
    for family, amount, card in DEMO_PAYMENTS:
        factory = get_factory(family, sink=sink)
        service = PaymentService(factory, notice_sink=sink)
        sink.write("")
        sink.write(f"--- {factory.display_name} test ---")
        service.process_payment(amount, card)
    return EXIT_OK


def run_pay(sink: OutputSink, family: str | None, amount: str, card: str) -> int:
    service = PaymentService(get_factory(family, sink=sink), notice_sink=sink)
    result = service.process_payment(amount, card)
    if not result.is_approved:
        return EXIT_REJECTED
    sink.write(f"Reference: {result.reference}")
    return EXIT_OK


def run_families(sink: OutputSink) -> int:
    for name in list_available_families():
        sink.write(name)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payment-families",
        description="Process simulated payments through interchangeable gateway families.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Run one sample payment per family")

    pay = subparsers.add_parser("pay", help="Process a single payment")
    pay.add_argument("--family", help="Family name (defaults to the configured family)")
    pay.add_argument("--amount", required=True, help="Amount, e.g. 150.00")
    pay.add_argument("--card", required=True, help="Card number")

    subparsers.add_parser("families", help="List registered families")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_format)

    sink = ConsoleSink()
    try:
        if args.command == "demo":
            return run_demo(sink)
        if args.command == "pay":
            return run_pay(sink, args.family, args.amount, args.card)
        return run_families(sink)
    except (InvalidArgumentError, UnsupportedFamilyError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
