"""Family registry.

Maps family names to factory classes so callers can select a family by
name (from settings, a CLI flag) instead of importing a concrete factory.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from payment_families.application.ports import PaymentFactory
from payment_families.domain.exceptions import UnsupportedFamilyError
from payment_families.infrastructure.config import get_settings
from payment_families.infrastructure.families import (
    MercadoPagoFactory,
    PagSeguroFactory,
    StripeFactory,
)

if TYPE_CHECKING:
    from payment_families.application.ports import OutputSink, TimeProvider, TokenProvider

logger = logging.getLogger(__name__)

# Family registry - maps family names to their factory classes
FAMILY_REGISTRY: dict[str, type[PaymentFactory]] = {
    "pagseguro": PagSeguroFactory,
    "mercadopago": MercadoPagoFactory,
    "stripe": StripeFactory,
}


def _normalize(name: str) -> str:
    return name.strip().lower()


def get_factory(
    name: str | None = None,
    *,
    sink: OutputSink | None = None,
    token_provider: TokenProvider | None = None,
    time_provider: TimeProvider | None = None,
) -> PaymentFactory:
    """Build the factory registered under name.

    Args:
        name: Family name, case-insensitive. If None, uses
              Settings.default_family.
        sink: Output sink shared by the family's components.
        token_provider: Source of reference tokens.
        time_provider: Clock for log timestamps.

    Returns:
        A new factory instance for the family.

    Raises:
        UnsupportedFamilyError: If no family is registered under name.

    Example:
        >>> service = PaymentService(get_factory("stripe"))
    """
    if name is None:
        name = get_settings().default_family

    key = _normalize(name)
    if key not in FAMILY_REGISTRY:
        raise UnsupportedFamilyError(name, list_available_families())

    # Pass on only the collaborators the caller supplied
    collaborators = {
        k: v
        for k, v in {
            "sink": sink,
            "token_provider": token_provider,
            "time_provider": time_provider,
        }.items()
        if v is not None
    }

    factory_class = FAMILY_REGISTRY[key]
    logger.debug("Creating %s factory", key)
    return factory_class(**collaborators)


def register_family(name: str, factory_class: type[PaymentFactory]) -> None:
    """Register a family factory at runtime.

    Any PaymentFactory subclass is accepted. get_factory() passes it
    only the sink, token_provider and time_provider keyword arguments
    the caller supplies, so a factory without collaborators only needs a
    no-argument constructor.

    Raises:
        TypeError: If factory_class does not extend PaymentFactory.
        ValueError: If name is blank.
    """
    if not isinstance(factory_class, type) or not issubclass(factory_class, PaymentFactory):
        raise TypeError("Family factory class must extend PaymentFactory")

    key = _normalize(name)
    if not key:
        raise ValueError("Family name cannot be empty")

    if key in FAMILY_REGISTRY:
        logger.info("Replacing registered family %s", key)
    FAMILY_REGISTRY[key] = factory_class


def unregister_family(name: str) -> None:
    """Remove a family from the registry. Unknown names are ignored."""
    FAMILY_REGISTRY.pop(_normalize(name), None)


def list_available_families() -> list[str]:
    """List registered family names in registration order."""
    return list(FAMILY_REGISTRY.keys())
