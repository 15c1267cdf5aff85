"""Per-instrument defaults for billing fields left in Automatic collection mode.

A merchant mode of ALWAYS/FULL or NEVER is honoured as-is. AUTOMATIC defers to this table,
which records the billing details each payment method needs to be confirmed.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .config import AddressCollectionMode, CollectionMode, MerchantConfiguration


BILLING_FIELDS: tuple[str, ...] = ("name", "email", "phone", "address")


class CollectionPolicyError(ValueError):
    """Raised when an Automatic collection policy table is invalid."""


@dataclass(frozen=True)
class BillingRequirements:
    name: bool = False
    email: bool = False
    phone: bool = False
    address: bool = False

    def as_dict(self) -> dict[str, bool]:
        return {"name": self.name, "email": self.email, "phone": self.phone, "address": self.address}


@dataclass(frozen=True)
class AutomaticCollectionPolicy:
    policy_id: str
    rules: Mapping[str, frozenset[str]]

    def requires(self, code: str, field_name: str) -> bool:
        if field_name not in BILLING_FIELDS:
            raise CollectionPolicyError(f"unknown billing field: {field_name!r}")
        return field_name in self.rules.get(code, frozenset())

    def as_dict(self) -> dict[str, Any]:
        return {
            "policy_id": self.policy_id,
            "automatic_fields": {code: sorted(fields) for code, fields in sorted(self.rules.items())},
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AutomaticCollectionPolicy":
        if not isinstance(payload, Mapping):
            raise CollectionPolicyError("collection policy must be a mapping")
        policy_id = str(payload.get("policy_id") or "").strip()
        if not policy_id:
            raise CollectionPolicyError("policy_id is required")
        fields_payload = payload.get("automatic_fields")
        if fields_payload is None:
            fields_payload = {}
        if not isinstance(fields_payload, Mapping):
            raise CollectionPolicyError("automatic_fields must be a mapping")

        rules: dict[str, frozenset[str]] = {}
        for code, fields in fields_payload.items():
            normalized_code = str(code or "").strip()
            if not normalized_code:
                raise CollectionPolicyError("automatic_fields keys must be non-empty codes")
            if fields is None:
                fields = []
            if not isinstance(fields, list):
                raise CollectionPolicyError(f"automatic_fields.{normalized_code} must be a list")
            unknown = sorted({str(item) for item in fields} - set(BILLING_FIELDS))
            if unknown:
                raise CollectionPolicyError(
                    f"automatic_fields.{normalized_code} has unknown fields: {','.join(unknown)}"
                )
            rules[normalized_code] = frozenset(str(item) for item in fields)
        return cls(policy_id=policy_id, rules=rules)


DEFAULT_COLLECTION_POLICY = AutomaticCollectionPolicy(
    policy_id="paymentsheet.collection.v0",
    rules={
        "card": frozenset({"address"}),
        "us_bank_account": frozenset({"name", "email"}),
        "sepa_debit": frozenset({"name", "email", "address"}),
        "bancontact": frozenset({"name"}),
        "ideal": frozenset({"name"}),
        "sofort": frozenset({"name", "email"}),
        "klarna": frozenset({"email"}),
        "afterpay_clearpay": frozenset({"name", "email", "address"}),
    },
)


def load_collection_policy(path: Path) -> AutomaticCollectionPolicy:
    payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    return AutomaticCollectionPolicy.from_payload(payload)


def resolve_billing_requirements(
    configuration: MerchantConfiguration,
    code: str,
    policy: AutomaticCollectionPolicy = DEFAULT_COLLECTION_POLICY,
) -> BillingRequirements:
    collection = configuration.billing_details_collection

    def contact(mode: CollectionMode, field_name: str) -> bool:
        if mode is CollectionMode.ALWAYS:
            return True
        if mode is CollectionMode.NEVER:
            return False
        return policy.requires(code, field_name)

    if collection.address is AddressCollectionMode.FULL:
        address = True
    elif collection.address is AddressCollectionMode.NEVER:
        address = False
    else:
        address = policy.requires(code, "address")

    return BillingRequirements(
        name=contact(collection.name, "name"),
        email=contact(collection.email, "email"),
        phone=contact(collection.phone, "phone"),
        address=address,
    )
