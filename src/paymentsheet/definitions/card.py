"""Card payment method."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paymentsheet.catalog import FieldKind, FieldSpecNode, LeafField, Section, SharedFieldSpec

from .base import PaymentMethodDefinition

if TYPE_CHECKING:
    from paymentsheet.metadata import PaymentMethodMetadata


CARD_DETAILS_SECTION = "card_details"
CARD_NUMBER = "card[number]"
CARD_EXPIRY = "card[exp]"
CARD_CVC = "card[cvc]"


class CardDefinition(PaymentMethodDefinition):
    code = "card"
    requires_catalog_entry = False
    supported_as_saved_instrument = True
    requires_shipping_address = False

    def build_field_template(
        self,
        metadata: "PaymentMethodMetadata",
        entry: SharedFieldSpec | None,
    ) -> tuple[FieldSpecNode, ...]:
        return (
            Section(
                identifier=CARD_DETAILS_SECTION,
                children=(
                    LeafField(CARD_NUMBER, FieldKind.CARD_NUMBER),
                    LeafField(CARD_EXPIRY, FieldKind.CARD_EXPIRY),
                    LeafField(CARD_CVC, FieldKind.CARD_CVC),
                ),
            ),
        )
