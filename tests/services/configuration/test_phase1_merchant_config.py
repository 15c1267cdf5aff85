from __future__ import annotations

from pathlib import Path

import pytest

from paymentsheet.configuration import (
    AddressCollectionMode,
    CollectionMode,
    MerchantConfigError,
    MerchantConfiguration,
    ShippingDetails,
    load_merchant_configuration,
    merchant_configuration_from_payload,
)


def test_defaults_are_automatic_and_empty() -> None:
    configuration = MerchantConfiguration()
    collection = configuration.billing_details_collection
    assert collection.name is CollectionMode.AUTOMATIC
    assert collection.email is CollectionMode.AUTOMATIC
    assert collection.phone is CollectionMode.AUTOMATIC
    assert collection.address is AddressCollectionMode.AUTOMATIC
    assert configuration.allows_shipping_address_instruments is False
    assert configuration.has_customer_configuration is False
    assert configuration.preferred_order == ()
    assert configuration.shipping_details is None


def test_payload_parses_nested_models() -> None:
    configuration = merchant_configuration_from_payload(
        {
            "billing_details_collection": {"name": "always", "address": "full"},
            "preferred_order": ["klarna", " ", "card"],
            "shipping_details": {"is_same_as_billing": True},
        }
    )
    assert configuration.billing_details_collection.name is CollectionMode.ALWAYS
    assert configuration.billing_details_collection.address is AddressCollectionMode.FULL
    assert configuration.preferred_order == ("klarna", "card")
    assert configuration.shipping_details == ShippingDetails(is_same_as_billing=True)


@pytest.mark.parametrize(
    "payload",
    [
        ["card"],
        {"billing_details_collection": {"name": "sometimes"}},
        {"billing_details_collection": {"address": "always"}},
        {"unknown_option": True},
    ],
)
def test_invalid_payloads_raise_config_error(payload) -> None:
    with pytest.raises(MerchantConfigError):
        merchant_configuration_from_payload(payload)


def test_configuration_is_immutable() -> None:
    configuration = MerchantConfiguration()
    with pytest.raises(Exception):
        configuration.has_customer_configuration = True  # type: ignore[misc]


def test_yaml_loader_expands_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PAYMENTSHEET_HAS_CUSTOMER", "true")
    monkeypatch.delenv("PAYMENTSHEET_PHONE_COLLECTION", raising=False)
    configuration = load_merchant_configuration(Path("config/paymentsheet/merchant_config_v0.yaml"))
    assert configuration.has_customer_configuration is True
    assert configuration.billing_details_collection.phone is CollectionMode.AUTOMATIC
    assert configuration.preferred_order == ("card", "klarna")

    path = tmp_path / "merchant.yaml"
    path.write_text("has_customer_configuration: ${PAYMENTSHEET_REQUIRED_FLAG}\n", encoding="utf-8")
    monkeypatch.delenv("PAYMENTSHEET_REQUIRED_FLAG", raising=False)
    with pytest.raises(MerchantConfigError, match="has_customer_configuration: unset environment variable"):
        load_merchant_configuration(path)


def test_empty_yaml_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "merchant.yaml"
    path.write_text("", encoding="utf-8")
    assert load_merchant_configuration(path) == MerchantConfiguration()


def test_unset_variable_error_names_nested_field(monkeypatch) -> None:
    monkeypatch.delenv("PAYMENTSHEET_ORDER_HEAD", raising=False)
    message = r"preferred_order\[1\]: unset environment variable PAYMENTSHEET_ORDER_HEAD"
    with pytest.raises(MerchantConfigError, match=message):
        merchant_configuration_from_payload({"preferred_order": ["card", "${PAYMENTSHEET_ORDER_HEAD}"]})
    with pytest.raises(MerchantConfigError, match=r"billing_details_collection\.phone"):
        merchant_configuration_from_payload({"billing_details_collection": {"phone": "${PAYMENTSHEET_ORDER_HEAD}"}})
