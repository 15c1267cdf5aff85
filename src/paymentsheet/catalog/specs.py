"""Field spec node tree shared by catalog templates and assembled forms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Mapping, Union


NODE_TYPE_FIELD = "field"
NODE_TYPE_SECTION = "section"
NODE_TYPE_COUNTRY_PLACEHOLDER = "country_placeholder"


class FieldSpecError(ValueError):
    """Raised when a field spec node payload is malformed."""


class FieldKind(str, Enum):
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    TEXT = "text"
    STATIC_TEXT = "static_text"
    COUNTRY = "country"
    ADDRESS_LINE1 = "address_line1"
    ADDRESS_LINE2 = "address_line2"
    CITY = "city"
    STATE = "state"
    POSTAL_CODE = "postal_code"
    CARD_NUMBER = "card_number"
    CARD_EXPIRY = "card_expiry"
    CARD_CVC = "card_cvc"
    ACCOUNT_NUMBER = "account_number"
    ROUTING_NUMBER = "routing_number"
    IBAN = "iban"
    BANK_SELECTOR = "bank_selector"
    ACCOUNT_LINK = "account_link"
    MANDATE = "mandate"
    CHECKBOX = "checkbox"
    LINK_SIGNUP = "link_signup"


@dataclass(frozen=True)
class LeafField:
    identifier: str
    kind: FieldKind

    def __post_init__(self) -> None:
        if not str(self.identifier or "").strip():
            raise FieldSpecError("field identifier is required")

    def as_dict(self) -> dict[str, Any]:
        return {"type": NODE_TYPE_FIELD, "identifier": self.identifier, "kind": self.kind.value}


@dataclass(frozen=True)
class Section:
    identifier: str
    children: tuple["FieldSpecNode", ...] = ()

    def __post_init__(self) -> None:
        if not str(self.identifier or "").strip():
            raise FieldSpecError("section identifier is required")

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": NODE_TYPE_SECTION,
            "identifier": self.identifier,
            "fields": [child.as_dict() for child in self.children],
        }


@dataclass(frozen=True)
class CountryPlaceholder:
    """Marks where a billing country selector belongs inside an instrument template."""

    def as_dict(self) -> dict[str, Any]:
        return {"type": NODE_TYPE_COUNTRY_PLACEHOLDER}


FieldSpecNode = Union[LeafField, Section, CountryPlaceholder]


def node_from_payload(payload: Mapping[str, Any]) -> FieldSpecNode:
    if not isinstance(payload, Mapping):
        raise FieldSpecError("field spec node must be a mapping")
    node_type = str(payload.get("type") or "").strip()
    if node_type == NODE_TYPE_COUNTRY_PLACEHOLDER:
        return CountryPlaceholder()
    identifier = str(payload.get("identifier") or "").strip()
    if node_type == NODE_TYPE_FIELD:
        raw_kind = str(payload.get("kind") or FieldKind.TEXT.value).strip()
        try:
            kind = FieldKind(raw_kind)
        except ValueError as exc:
            raise FieldSpecError(f"unknown field kind: {raw_kind!r}") from exc
        return LeafField(identifier=identifier, kind=kind)
    if node_type == NODE_TYPE_SECTION:
        fields = payload.get("fields")
        if fields is None:
            fields = []
        if not isinstance(fields, list):
            raise FieldSpecError(f"section {identifier!r} fields must be a list")
        return Section(identifier=identifier, children=nodes_from_payload(fields))
    raise FieldSpecError(f"unknown field spec node type: {node_type!r}")


def nodes_from_payload(payload: Iterable[Mapping[str, Any]]) -> tuple[FieldSpecNode, ...]:
    return tuple(node_from_payload(item) for item in payload)


def iter_leaves(nodes: Iterable[FieldSpecNode]) -> Iterator[LeafField]:
    """Yield every leaf field depth-first, in display order."""
    for node in nodes:
        if isinstance(node, LeafField):
            yield node
        elif isinstance(node, Section):
            yield from iter_leaves(node.children)


def leaf_identifiers(nodes: Iterable[FieldSpecNode]) -> frozenset[str]:
    return frozenset(leaf.identifier for leaf in iter_leaves(nodes))


def has_country_field(nodes: Iterable[FieldSpecNode]) -> bool:
    return any(leaf.kind is FieldKind.COUNTRY for leaf in iter_leaves(nodes))


def contains_placeholder(nodes: Iterable[FieldSpecNode]) -> bool:
    for node in nodes:
        if isinstance(node, CountryPlaceholder):
            return True
        if isinstance(node, Section) and contains_placeholder(node.children):
            return True
    return False
