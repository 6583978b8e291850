"""Tests for the family registry.

Tests cover:
- Family selection by name (normalized) and by configured default
- Collaborator pass-through to the factory
- Runtime registration and its validation
- Error handling for unknown families
"""

from decimal import Decimal

import pytest

from payment_families.application.ports import (
    CardValidator,
    PaymentFactory,
    PaymentLogger,
    TransactionProcessor,
)
from payment_families.application.use_cases import PaymentService
from payment_families.domain.exceptions import UnsupportedFamilyError
from payment_families.infrastructure.families import (
    GatewayFamilyFactory,
    MercadoPagoFactory,
    PagSeguroFactory,
    StripeFactory,
)
from payment_families.infrastructure.families.base import (
    FixedLengthCardValidator,
    SimulatedProcessor,
    TimestampedLogger,
)
from payment_families.infrastructure.registry import (
    FAMILY_REGISTRY,
    get_factory,
    list_available_families,
    register_family,
    unregister_family,
)
from payment_families.infrastructure.sinks import CollectingSink
from payment_families.infrastructure.time_provider import SystemTimeProvider
from payment_families.infrastructure.token_provider import SequenceTokenProvider


class CieloValidator(FixedLengthCardValidator):
    required_prefix = "6"


class CieloProcessor(SimulatedProcessor):
    family_tag = "CIELO"
    display_name = "Cielo"
    currency_symbol = "R$"


class CieloLogger(TimestampedLogger):
    display_name = "Cielo"


class CieloFactory(GatewayFamilyFactory):
    family_name = "cielo"
    display_name = "Cielo"
    validator_class = CieloValidator
    processor_class = CieloProcessor
    logger_class = CieloLogger


class PlainFactory(PaymentFactory):
    """Factory with a no-argument constructor, built on the bare port."""

    family_name = "plain"
    display_name = "Plain"

    def create_validator(self) -> CardValidator:
        return CieloValidator()

    def create_processor(self) -> TransactionProcessor:
        return CieloProcessor(CollectingSink(), SequenceTokenProvider())

    def create_logger(self) -> PaymentLogger:
        return CieloLogger(CollectingSink(), SystemTimeProvider())


class TestGetFactory:
    @pytest.mark.parametrize(
        ("name", "factory_class"),
        [
            ("pagseguro", PagSeguroFactory),
            ("mercadopago", MercadoPagoFactory),
            ("stripe", StripeFactory),
        ],
    )
    def test_returns_registered_factory(self, name: str, factory_class: type) -> None:
        assert isinstance(get_factory(name), factory_class)

    def test_name_is_case_insensitive(self) -> None:
        factories = [get_factory("STRIPE"), get_factory("Stripe"), get_factory("stripe")]

        assert all(isinstance(f, StripeFactory) for f in factories)

    def test_name_is_trimmed(self) -> None:
        assert isinstance(get_factory("  mercadopago  "), MercadoPagoFactory)

    def test_returns_new_factory_each_call(self) -> None:
        assert get_factory("stripe") is not get_factory("stripe")

    def test_uses_configured_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAYMENT_FAMILIES_DEFAULT_FAMILY", "mercadopago")

        assert isinstance(get_factory(), MercadoPagoFactory)

    def test_default_family_is_pagseguro(self) -> None:
        assert isinstance(get_factory(), PagSeguroFactory)

    def test_passes_collaborators_to_factory(self) -> None:
        sink = CollectingSink()

        factory = get_factory("stripe", sink=sink, token_provider=SequenceTokenProvider())
        reference = factory.create_processor().process_transaction(Decimal("3"), "4234567890123456")

        assert reference.value == "STRIPE-tok00001"
        assert sink.messages == ["Stripe: processing $ 3.00..."]

    def test_raises_for_unknown_family(self) -> None:
        with pytest.raises(UnsupportedFamilyError) as exc_info:
            get_factory("paypal")

        assert exc_info.value.name == "paypal"
        assert exc_info.value.supported == ["pagseguro", "mercadopago", "stripe"]
        assert "Supported families: pagseguro, mercadopago, stripe" in str(exc_info.value)

    def test_raises_for_blank_name(self) -> None:
        with pytest.raises(UnsupportedFamilyError):
            get_factory("   ")


class TestRegisterFamily:
    def test_registers_new_family(self) -> None:
        register_family("Cielo", CieloFactory)

        assert "cielo" in list_available_families()
        assert isinstance(get_factory("cielo"), CieloFactory)

    def test_registered_family_builds_its_own_components(self) -> None:
        register_family("cielo", CieloFactory)
        factory = get_factory("cielo", token_provider=SequenceTokenProvider(), sink=CollectingSink())

        assert factory.create_validator().validate_card("6234567890123456") is True
        reference = factory.create_processor().process_transaction(Decimal("1"), "6234567890123456")
        assert reference.value == "CIELO-tok00001"

    def test_registers_plain_factory_without_collaborators(self) -> None:
        register_family("plain", PlainFactory)

        factory = get_factory("plain")
        result = PaymentService(factory).process_payment("7", "6234567890123456")

        assert isinstance(factory, PlainFactory)
        assert str(result.reference) == "CIELO-tok00001"

    def test_plain_factory_rejects_unexpected_collaborators(self) -> None:
        register_family("plain", PlainFactory)

        with pytest.raises(TypeError):
            get_factory("plain", sink=CollectingSink())

    def test_replaces_existing_family(self) -> None:
        register_family("stripe", CieloFactory)

        assert isinstance(get_factory("stripe"), CieloFactory)

    def test_rejects_non_factory_class(self) -> None:
        with pytest.raises(TypeError, match="PaymentFactory"):
            register_family("bogus", dict)  # type: ignore[arg-type]

    def test_rejects_factory_instance(self) -> None:
        with pytest.raises(TypeError):
            register_family("bogus", StripeFactory())  # type: ignore[arg-type]

    def test_rejects_blank_name(self) -> None:
        with pytest.raises(ValueError):
            register_family("  ", CieloFactory)

    def test_unregister_removes_family(self) -> None:
        register_family("cielo", CieloFactory)

        unregister_family("CIELO")

        assert "cielo" not in FAMILY_REGISTRY

    def test_unregister_unknown_is_ignored(self) -> None:
        unregister_family("nothing-here")

        assert list_available_families() == ["pagseguro", "mercadopago", "stripe"]


class TestListAvailableFamilies:
    def test_lists_built_in_families(self) -> None:
        assert list_available_families() == ["pagseguro", "mercadopago", "stripe"]

    def test_all_registered_classes_are_factories(self) -> None:
        assert all(issubclass(cls, PaymentFactory) for cls in FAMILY_REGISTRY.values())
