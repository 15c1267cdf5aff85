"""Form assembly engine."""

from .assembly import FormContext, build_form
from .blocks import (
    ADDRESS_FIELDS,
    CONTACT_FIELDS,
    address_section,
    contact_sections,
    country_section,
    link_section,
    save_for_future_use_section,
    with_same_as_shipping,
)
from .reconciliation import PlaceholderResolution, reconcile_country_placeholder

__all__ = [
    "ADDRESS_FIELDS",
    "CONTACT_FIELDS",
    "FormContext",
    "PlaceholderResolution",
    "address_section",
    "build_form",
    "contact_sections",
    "country_section",
    "link_section",
    "reconcile_country_placeholder",
    "save_for_future_use_section",
    "with_same_as_shipping",
]
