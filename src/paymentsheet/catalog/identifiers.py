"""Field identifiers shared between templates, assembled forms and renderers."""

from __future__ import annotations


NAME = "billing_details[name]"
EMAIL = "billing_details[email]"
PHONE = "billing_details[phone]"

ADDRESS_LINE1 = "billing_details[address][line1]"
ADDRESS_LINE2 = "billing_details[address][line2]"
ADDRESS_CITY = "billing_details[address][city]"
ADDRESS_STATE = "billing_details[address][state]"
ADDRESS_POSTAL_CODE = "billing_details[address][postal_code]"
ADDRESS_COUNTRY = "billing_details[address][country]"

BILLING_ADDRESS_SECTION = "billing_details[address]_section"
SAME_AS_SHIPPING = "same_as_shipping"
SAVE_FOR_FUTURE_USE = "save_for_future_use"
LINK_FORM = "link_form"


def section_identifier(identifier: str) -> str:
    return f"{identifier}_section"
