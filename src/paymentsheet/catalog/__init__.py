"""Capability catalog and field spec node tree."""

from . import identifiers
from .catalog import SHARED_FIELD_SPEC_SCHEMA, CapabilityCatalog, CatalogContractError, SharedFieldSpec
from .specs import (
    CountryPlaceholder,
    FieldKind,
    FieldSpecError,
    FieldSpecNode,
    LeafField,
    Section,
    contains_placeholder,
    has_country_field,
    iter_leaves,
    leaf_identifiers,
    node_from_payload,
    nodes_from_payload,
)

__all__ = [
    "SHARED_FIELD_SPEC_SCHEMA",
    "CapabilityCatalog",
    "CatalogContractError",
    "CountryPlaceholder",
    "FieldKind",
    "FieldSpecError",
    "FieldSpecNode",
    "LeafField",
    "Section",
    "SharedFieldSpec",
    "contains_placeholder",
    "has_country_field",
    "identifiers",
    "iter_leaves",
    "leaf_identifiers",
    "node_from_payload",
    "nodes_from_payload",
]
