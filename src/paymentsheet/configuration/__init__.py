"""Merchant configuration and Automatic collection policy."""

from .collection_policy import (
    BILLING_FIELDS,
    DEFAULT_COLLECTION_POLICY,
    AutomaticCollectionPolicy,
    BillingRequirements,
    CollectionPolicyError,
    load_collection_policy,
    resolve_billing_requirements,
)
from .config import (
    AddressCollectionMode,
    BillingDetailsCollectionConfiguration,
    CollectionMode,
    MerchantConfigError,
    MerchantConfiguration,
    ShippingDetails,
    load_merchant_configuration,
    merchant_configuration_from_payload,
)

__all__ = [
    "BILLING_FIELDS",
    "DEFAULT_COLLECTION_POLICY",
    "AddressCollectionMode",
    "AutomaticCollectionPolicy",
    "BillingDetailsCollectionConfiguration",
    "BillingRequirements",
    "CollectionMode",
    "CollectionPolicyError",
    "MerchantConfigError",
    "MerchantConfiguration",
    "ShippingDetails",
    "load_collection_policy",
    "load_merchant_configuration",
    "merchant_configuration_from_payload",
    "resolve_billing_requirements",
]
