"""Bank debit payment methods (US bank account, SEPA Direct Debit)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from paymentsheet.catalog import FieldKind, FieldSpecNode, LeafField, Section, SharedFieldSpec, leaf_identifiers

from .base import PaymentMethodDefinition

if TYPE_CHECKING:
    from paymentsheet.metadata import PaymentMethodMetadata


logger = logging.getLogger(__name__)

VERIFICATION_AUTOMATIC = "automatic"
VERIFICATION_INSTANT = "instant"
VERIFICATION_MICRODEPOSITS = "microdeposits"
VERIFICATION_METHODS: tuple[str, ...] = (
    VERIFICATION_AUTOMATIC,
    VERIFICATION_INSTANT,
    VERIFICATION_MICRODEPOSITS,
)

US_BANK_ACCOUNT_SECTION = "us_bank_account_details"
US_BANK_ACCOUNT_LINK = "us_bank_account[link_account]"
US_BANK_ACCOUNT_ROUTING_NUMBER = "us_bank_account[routing_number]"
US_BANK_ACCOUNT_ACCOUNT_NUMBER = "us_bank_account[account_number]"
US_BANK_ACCOUNT_MANDATE = "us_bank_account[mandate]"
SEPA_DEBIT_MANDATE = "sepa_debit[mandate]"


class UsBankAccountDefinition(PaymentMethodDefinition):
    code = "us_bank_account"
    requires_catalog_entry = False
    supported_as_saved_instrument = True
    requires_shipping_address = False

    def verification_method(self, metadata: "PaymentMethodMetadata") -> str:
        options = metadata.snapshot.options_for(self.code)
        method = str(options.get("verification_method") or VERIFICATION_AUTOMATIC).strip().lower()
        if method not in VERIFICATION_METHODS:
            logger.debug("unknown us_bank_account verification_method %r; using automatic", method)
            return VERIFICATION_AUTOMATIC
        return method

    def build_field_template(
        self,
        metadata: "PaymentMethodMetadata",
        entry: SharedFieldSpec | None,
    ) -> tuple[FieldSpecNode, ...]:
        method = self.verification_method(metadata)
        children: list[FieldSpecNode] = []
        if method != VERIFICATION_MICRODEPOSITS:
            children.append(LeafField(US_BANK_ACCOUNT_LINK, FieldKind.ACCOUNT_LINK))
        if method != VERIFICATION_INSTANT:
            children.append(LeafField(US_BANK_ACCOUNT_ROUTING_NUMBER, FieldKind.ROUTING_NUMBER))
            children.append(LeafField(US_BANK_ACCOUNT_ACCOUNT_NUMBER, FieldKind.ACCOUNT_NUMBER))
        return (
            Section(identifier=US_BANK_ACCOUNT_SECTION, children=tuple(children)),
            LeafField(US_BANK_ACCOUNT_MANDATE, FieldKind.MANDATE),
        )


class SepaDebitDefinition(PaymentMethodDefinition):
    code = "sepa_debit"
    requires_catalog_entry = True
    supported_as_saved_instrument = True
    requires_shipping_address = False

    def build_field_template(
        self,
        metadata: "PaymentMethodMetadata",
        entry: SharedFieldSpec | None,
    ) -> tuple[FieldSpecNode, ...]:
        template = entry.field_template if entry is not None else ()
        if SEPA_DEBIT_MANDATE in leaf_identifiers(template):
            return template
        return template + (LeafField(SEPA_DEBIT_MANDATE, FieldKind.MANDATE),)
