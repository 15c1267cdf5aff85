"""Form assembly: merge generic billing blocks with an instrument template."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from paymentsheet.catalog import FieldSpecNode, identifiers, leaf_identifiers
from paymentsheet.configuration import resolve_billing_requirements
from paymentsheet.metadata import PaymentMethodMetadata

from .blocks import (
    address_section,
    contact_sections,
    link_section,
    save_for_future_use_section,
    with_same_as_shipping,
)
from .reconciliation import reconcile_country_placeholder


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormContext:
    """Inputs decided outside the metadata, such as Link inline signup eligibility."""

    link_eligible_codes: frozenset[str] = frozenset()

    def link_enabled_for(self, code: str) -> bool:
        return code in self.link_eligible_codes


def build_form(
    code: str,
    metadata: PaymentMethodMetadata,
    context: FormContext | None = None,
) -> tuple[FieldSpecNode, ...] | None:
    """Assemble the ordered section tree for one supported payment method.

    Order: contact sections (name, email, phone), the instrument template with any
    country placeholder resolved in place, the billing address section, the
    save-for-future-use toggle, then Link signup. Returns None for unsupported codes.
    """
    definition = metadata.definition_for_code(code)
    if definition is None:
        logger.debug("no form for unsupported payment method %s", code)
        return None

    entry = metadata.catalog_entry_for_code(code)
    template = definition.build_field_template(metadata, entry)
    resolution = reconcile_country_placeholder(template)
    taken = leaf_identifiers(resolution.nodes)
    if resolution.has_country:
        taken = taken | {identifiers.ADDRESS_COUNTRY}

    configuration = metadata.configuration
    requirements = resolve_billing_requirements(configuration, code, metadata.collection_policy)

    nodes: list[FieldSpecNode] = list(contact_sections(requirements, exclude=taken))
    nodes.extend(resolution.nodes)

    if requirements.address:
        section = address_section(exclude=taken)
        if section is not None:
            shipping = configuration.shipping_details
            if shipping is not None and shipping.is_same_as_billing:
                section = with_same_as_shipping(section)
            nodes.append(section)

    if configuration.has_customer_configuration and definition.supported_as_saved_instrument:
        nodes.append(save_for_future_use_section())

    if context is not None and context.link_enabled_for(code):
        nodes.append(link_section())

    return tuple(nodes)
