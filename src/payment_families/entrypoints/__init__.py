"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- CLI: argparse commands (demo, pay, families)

Entrypoints translate external requests into PaymentService calls
and format results for the delivery mechanism.
"""
