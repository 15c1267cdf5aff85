"""Payment method metadata: filtering, ordering and lookup for one transaction."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from paymentsheet.catalog import CapabilityCatalog, SharedFieldSpec
from paymentsheet.configuration import (
    DEFAULT_COLLECTION_POLICY,
    AutomaticCollectionPolicy,
    MerchantConfiguration,
)
from paymentsheet.definitions import DEFAULT_REGISTRY, DefinitionRegistry, PaymentMethodDefinition
from paymentsheet.intent import TransactionSnapshot


logger = logging.getLogger(__name__)

EXCLUDED_UNREGISTERED = "UNREGISTERED"
EXCLUDED_NO_CATALOG_ENTRY = "NO_CATALOG_ENTRY"
EXCLUDED_UNACTIVATED = "UNACTIVATED_IN_LIVE_MODE"


class InvalidStateError(RuntimeError):
    """Raised when the upstream intent is structurally inconsistent (a configuration bug)."""


@dataclass(frozen=True)
class Amount:
    value: int
    currency: str

    def as_dict(self) -> dict[str, Any]:
        return {"value": self.value, "currency": self.currency}


@dataclass(frozen=True)
class PaymentMethodMetadata:
    """Immutable resolution state for one transaction.

    Built by `build_metadata`; the supported and sorted code views are derived once there
    and never change, so instances can be shared across threads without locking.
    """

    snapshot: TransactionSnapshot
    configuration: MerchantConfiguration
    registry: DefinitionRegistry
    catalog: CapabilityCatalog
    collection_policy: AutomaticCollectionPolicy = DEFAULT_COLLECTION_POLICY
    supported_codes: tuple[str, ...] = field(default=(), init=False)
    sorted_codes: tuple[str, ...] = field(default=(), init=False)
    exclusions: tuple[tuple[str, str], ...] = field(default=(), init=False)

    def __post_init__(self) -> None:
        supported, exclusions = _resolve_supported_codes(
            snapshot=self.snapshot,
            registry=self.registry,
            catalog=self.catalog,
        )
        object.__setattr__(self, "supported_codes", supported)
        object.__setattr__(self, "exclusions", exclusions)
        object.__setattr__(
            self,
            "sorted_codes",
            _sort_codes(supported, self.configuration.preferred_order),
        )

    def supported_definitions(self) -> tuple[PaymentMethodDefinition, ...]:
        """Supported definitions, in requested order."""
        return tuple(self.registry.get(code) for code in self.supported_codes)  # type: ignore[misc]

    def definition_for_code(self, code: str) -> PaymentMethodDefinition | None:
        if code not in self.supported_codes:
            return None
        return self.registry.get(code)

    def catalog_entry_for_code(self, code: str) -> SharedFieldSpec | None:
        return self.catalog.entry_for_code(code)

    def sorted_supported_codes(self) -> tuple[str, ...]:
        return self.sorted_codes

    def supported_saved_instrument_codes(self) -> tuple[str, ...]:
        return tuple(
            definition.code
            for definition in self.supported_definitions()
            if definition.supported_as_saved_instrument
        )

    def amount(self) -> Amount | None:
        snapshot = self.snapshot
        if not snapshot.is_payment:
            return None
        if snapshot.amount is None or snapshot.currency is None:
            raise InvalidStateError(
                f"payment intent {snapshot.intent_id or '<unknown>'} is missing amount or currency"
            )
        return Amount(value=snapshot.amount, currency=snapshot.currency)

    def has_intent_to_setup(self) -> bool:
        return self.snapshot.has_intent_to_setup()

    def has_saved_payment_methods(self) -> bool:
        return self.snapshot.has_saved_payment_methods

    def is_shipping_prerequisite_met(self, code: str) -> bool:
        definition = self.definition_for_code(code)
        if definition is None:
            return False
        if not definition.requires_shipping_address:
            return True
        return self.configuration.allows_shipping_address_instruments or self.snapshot.has_shipping


def build_metadata(
    *,
    snapshot: TransactionSnapshot,
    configuration: MerchantConfiguration | None = None,
    catalog: CapabilityCatalog | None = None,
    registry: DefinitionRegistry = DEFAULT_REGISTRY,
    collection_policy: AutomaticCollectionPolicy = DEFAULT_COLLECTION_POLICY,
) -> PaymentMethodMetadata:
    metadata = PaymentMethodMetadata(
        snapshot=snapshot,
        configuration=configuration if configuration is not None else MerchantConfiguration(),
        registry=registry,
        catalog=catalog if catalog is not None else CapabilityCatalog(),
        collection_policy=collection_policy,
    )
    for code, reason in metadata.exclusions:
        logger.debug("payment method %s excluded: %s", code, reason)
    logger.debug("payment methods resolved: sorted=%s", ",".join(metadata.sorted_codes))
    return metadata


def _resolve_supported_codes(
    *,
    snapshot: TransactionSnapshot,
    registry: DefinitionRegistry,
    catalog: CapabilityCatalog,
) -> tuple[tuple[str, ...], tuple[tuple[str, str], ...]]:
    supported: list[str] = []
    exclusions: list[tuple[str, str]] = []
    for code in snapshot.requested_codes:
        definition = registry.get(code)
        if definition is None:
            exclusions.append((code, EXCLUDED_UNREGISTERED))
            continue
        if definition.requires_catalog_entry and code not in catalog:
            exclusions.append((code, EXCLUDED_NO_CATALOG_ENTRY))
            continue
        if snapshot.is_live_mode and code in snapshot.unactivated_codes:
            exclusions.append((code, EXCLUDED_UNACTIVATED))
            continue
        supported.append(code)
    return tuple(supported), tuple(exclusions)


def _sort_codes(supported: tuple[str, ...], preferred_order: tuple[str, ...]) -> tuple[str, ...]:
    remaining = set(supported)
    ordered: list[str] = []
    for code in preferred_order:
        if code in remaining:
            ordered.append(code)
            remaining.discard(code)
    ordered.extend(code for code in supported if code in remaining)
    return tuple(ordered)
