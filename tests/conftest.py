from __future__ import annotations

from typing import Any, Callable

import pytest

from paymentsheet.catalog import CapabilityCatalog
from paymentsheet.configuration import MerchantConfiguration
from paymentsheet.intent import TransactionSnapshot
from paymentsheet.metadata import PaymentMethodMetadata, build_metadata


CATALOG_PAYLOAD: list[dict[str, Any]] = [
    {"code": "card", "fields": []},
    {
        "code": "sepa_debit",
        "fields": [
            {
                "type": "section",
                "identifier": "sepa_debit_section",
                "fields": [{"type": "field", "identifier": "sepa_debit[iban]", "kind": "iban"}],
            }
        ],
    },
    {"code": "bancontact", "fields": []},
    {
        "code": "ideal",
        "fields": [
            {
                "type": "section",
                "identifier": "ideal_section",
                "fields": [{"type": "field", "identifier": "ideal[bank]", "kind": "bank_selector"}],
            }
        ],
    },
    {"code": "sofort", "fields": [{"type": "country_placeholder"}]},
    {
        "code": "klarna",
        "fields": [
            {"type": "field", "identifier": "klarna_header", "kind": "static_text"},
            {"type": "country_placeholder"},
        ],
    },
    {"code": "affirm", "fields": [{"type": "field", "identifier": "affirm_header", "kind": "static_text"}]},
    {
        "code": "afterpay_clearpay",
        "fields": [{"type": "field", "identifier": "afterpay_header", "kind": "static_text"}],
    },
]


def payment_intent_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "pi_test_123",
        "object": "payment_intent",
        "amount": 1099,
        "currency": "usd",
        "livemode": False,
        "payment_method_types": ["card"],
        "unactivated_payment_method_types": [],
        "payment_method_options": None,
        "setup_future_usage": None,
        "shipping": None,
    }
    payload.update(overrides)
    return payload


def setup_intent_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "seti_test_123",
        "object": "setup_intent",
        "livemode": False,
        "payment_method_types": ["card"],
        "unactivated_payment_method_types": [],
        "usage": "off_session",
    }
    payload.update(overrides)
    return payload


def create_metadata(
    *,
    intent: dict[str, Any] | None = None,
    catalog: CapabilityCatalog | None = None,
    configuration: MerchantConfiguration | None = None,
    has_saved_payment_methods: bool = False,
    **configuration_fields: Any,
) -> PaymentMethodMetadata:
    snapshot = TransactionSnapshot.from_payload(
        intent if intent is not None else payment_intent_payload(),
        has_saved_payment_methods=has_saved_payment_methods,
    )
    if configuration is None:
        configuration = MerchantConfiguration(**configuration_fields)
    return build_metadata(
        snapshot=snapshot,
        configuration=configuration,
        catalog=catalog if catalog is not None else CapabilityCatalog.from_payload(CATALOG_PAYLOAD),
    )


@pytest.fixture
def metadata_factory() -> Callable[..., PaymentMethodMetadata]:
    return create_metadata


@pytest.fixture
def payment_intent() -> Callable[..., dict[str, Any]]:
    return payment_intent_payload


@pytest.fixture
def setup_intent() -> Callable[..., dict[str, Any]]:
    return setup_intent_payload


@pytest.fixture
def full_catalog() -> CapabilityCatalog:
    return CapabilityCatalog.from_payload(CATALOG_PAYLOAD)
