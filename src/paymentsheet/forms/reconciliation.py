"""Country placeholder reconciliation for instrument templates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from paymentsheet.catalog import (
    CountryPlaceholder,
    FieldSpecNode,
    Section,
    contains_placeholder,
    has_country_field,
)

from .blocks import country_section


@dataclass(frozen=True)
class PlaceholderResolution:
    nodes: tuple[FieldSpecNode, ...]
    placeholder_found: bool

    @property
    def has_country(self) -> bool:
        return has_country_field(self.nodes)


def reconcile_country_placeholder(template: Iterable[FieldSpecNode]) -> PlaceholderResolution:
    """Replace the first country placeholder with a country section, in place.

    The section lands at the placeholder's exact position, at any depth. Later
    placeholders, and any placeholder in a template that already carries a country-kind
    field under whatever identifier, are dropped so the result never holds more than one
    country selector.
    """
    nodes = tuple(template)
    if not contains_placeholder(nodes):
        return PlaceholderResolution(nodes=nodes, placeholder_found=False)
    placed = has_country_field(nodes)
    found = False

    def walk(items: tuple[FieldSpecNode, ...]) -> tuple[FieldSpecNode, ...]:
        nonlocal placed, found
        resolved: list[FieldSpecNode] = []
        for node in items:
            if isinstance(node, CountryPlaceholder):
                found = True
                if not placed:
                    resolved.append(country_section())
                    placed = True
                continue
            if isinstance(node, Section):
                resolved.append(Section(identifier=node.identifier, children=walk(node.children)))
                continue
            resolved.append(node)
        return tuple(resolved)

    return PlaceholderResolution(nodes=walk(nodes), placeholder_found=found)
