"""Merchant configuration models and YAML loader."""

from __future__ import annotations

from enum import Enum
import os
from pathlib import Path
import re
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class MerchantConfigError(ValueError):
    """Raised when a merchant configuration file is invalid."""


class CollectionMode(str, Enum):
    AUTOMATIC = "automatic"
    NEVER = "never"
    ALWAYS = "always"


class AddressCollectionMode(str, Enum):
    AUTOMATIC = "automatic"
    NEVER = "never"
    FULL = "full"


class BillingDetailsCollectionConfiguration(BaseModel):
    """Which billing details the merchant wants collected in the form."""

    name: CollectionMode = CollectionMode.AUTOMATIC
    email: CollectionMode = CollectionMode.AUTOMATIC
    phone: CollectionMode = CollectionMode.AUTOMATIC
    address: AddressCollectionMode = AddressCollectionMode.AUTOMATIC

    model_config = ConfigDict(extra="forbid", frozen=True)


class ShippingDetails(BaseModel):
    is_same_as_billing: bool = False

    model_config = ConfigDict(extra="forbid", frozen=True)


class MerchantConfiguration(BaseModel):
    billing_details_collection: BillingDetailsCollectionConfiguration = Field(
        default_factory=BillingDetailsCollectionConfiguration,
        description="Contact and address collection modes",
    )
    allows_shipping_address_instruments: bool = Field(
        default=False, description="Allow payment methods that need a shipping address"
    )
    has_customer_configuration: bool = Field(
        default=False, description="A customer is attached, so methods can be saved"
    )
    preferred_order: tuple[str, ...] = Field(
        default=(), description="Preferred display order of payment method codes"
    )
    shipping_details: Optional[ShippingDetails] = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("preferred_order", mode="before")
    @classmethod
    def _normalize_order(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (list, tuple)):
            return tuple(str(item).strip() for item in value if str(item or "").strip())
        return value


def _expand_str(value: str, field_path: str) -> str:
    def replacer(match: re.Match[str]) -> str:
        token = match.group(1)
        key, has_default, default = token.partition(":-")
        actual = os.getenv(key, "")
        if actual.strip():
            return actual
        if has_default:
            return default
        raise MerchantConfigError(f"{field_path or '<root>'}: unset environment variable {key}")

    return _VAR_PATTERN.sub(replacer, value)


def _expand_payload(value: Any, field_path: str = "") -> Any:
    """Expand ${VAR} references, tracking the dotted merchant config field for errors."""
    if isinstance(value, str):
        return _expand_str(value, field_path)
    if isinstance(value, list):
        return [_expand_payload(item, f"{field_path}[{index}]") for index, item in enumerate(value)]
    if isinstance(value, dict):
        return {
            str(key): _expand_payload(item, f"{field_path}.{key}" if field_path else str(key))
            for key, item in value.items()
        }
    return value


def merchant_configuration_from_payload(payload: Any) -> MerchantConfiguration:
    if payload is None:
        return MerchantConfiguration()
    if not isinstance(payload, dict):
        raise MerchantConfigError("merchant configuration must be a mapping")
    expanded = _expand_payload(payload)
    try:
        return MerchantConfiguration(**expanded)
    except ValidationError as exc:
        raise MerchantConfigError(f"invalid merchant configuration: {exc}") from exc


def load_merchant_configuration(path: Path) -> MerchantConfiguration:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return merchant_configuration_from_payload(data)
