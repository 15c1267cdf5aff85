"""Generic form blocks shared by every payment method."""

from __future__ import annotations

from paymentsheet.catalog import FieldKind, LeafField, Section, identifiers
from paymentsheet.configuration import BillingRequirements


CONTACT_FIELDS: tuple[tuple[str, str, FieldKind], ...] = (
    ("name", identifiers.NAME, FieldKind.NAME),
    ("email", identifiers.EMAIL, FieldKind.EMAIL),
    ("phone", identifiers.PHONE, FieldKind.PHONE),
)

ADDRESS_FIELDS: tuple[LeafField, ...] = (
    LeafField(identifiers.ADDRESS_LINE1, FieldKind.ADDRESS_LINE1),
    LeafField(identifiers.ADDRESS_LINE2, FieldKind.ADDRESS_LINE2),
    LeafField(identifiers.ADDRESS_CITY, FieldKind.CITY),
    LeafField(identifiers.ADDRESS_STATE, FieldKind.STATE),
    LeafField(identifiers.ADDRESS_POSTAL_CODE, FieldKind.POSTAL_CODE),
    LeafField(identifiers.ADDRESS_COUNTRY, FieldKind.COUNTRY),
)


def contact_sections(
    requirements: BillingRequirements,
    *,
    exclude: frozenset[str] = frozenset(),
) -> tuple[Section, ...]:
    sections: list[Section] = []
    for field_name, identifier, kind in CONTACT_FIELDS:
        if not getattr(requirements, field_name) or identifier in exclude:
            continue
        sections.append(
            Section(
                identifier=identifiers.section_identifier(identifier),
                children=(LeafField(identifier, kind),),
            )
        )
    return tuple(sections)


def address_section(*, exclude: frozenset[str] = frozenset()) -> Section | None:
    fields = tuple(field for field in ADDRESS_FIELDS if field.identifier not in exclude)
    if not fields:
        return None
    return Section(identifier=identifiers.BILLING_ADDRESS_SECTION, children=fields)


def country_field() -> LeafField:
    return LeafField(identifiers.ADDRESS_COUNTRY, FieldKind.COUNTRY)


def country_section() -> Section:
    return Section(
        identifier=identifiers.section_identifier(identifiers.ADDRESS_COUNTRY),
        children=(country_field(),),
    )


def with_same_as_shipping(section: Section) -> Section:
    return Section(
        identifier=section.identifier,
        children=section.children + (LeafField(identifiers.SAME_AS_SHIPPING, FieldKind.CHECKBOX),),
    )


def save_for_future_use_section() -> Section:
    return Section(
        identifier=identifiers.SAVE_FOR_FUTURE_USE,
        children=(LeafField(identifiers.SAVE_FOR_FUTURE_USE, FieldKind.CHECKBOX),),
    )


def link_section() -> Section:
    return Section(
        identifier=identifiers.LINK_FORM,
        children=(LeafField(identifiers.LINK_FORM, FieldKind.LINK_SIGNUP),),
    )
