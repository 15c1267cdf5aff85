"""Payment method definition interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paymentsheet.catalog import FieldSpecNode, SharedFieldSpec

if TYPE_CHECKING:
    from paymentsheet.metadata import PaymentMethodMetadata


class PaymentMethodDefinition:
    """Static capabilities of one payment method code.

    Subclasses set the class attributes and implement `build_field_template`. Instances are
    stateless and shared by every transaction through the registry.
    """

    code: str = ""
    requires_catalog_entry: bool = True
    supported_as_saved_instrument: bool = False
    requires_shipping_address: bool = False

    def build_field_template(
        self,
        metadata: "PaymentMethodMetadata",
        entry: SharedFieldSpec | None,
    ) -> tuple[FieldSpecNode, ...]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r})"


class CatalogTemplateDefinition(PaymentMethodDefinition):
    """Definition whose form comes entirely from its catalog entry."""

    def build_field_template(
        self,
        metadata: "PaymentMethodMetadata",
        entry: SharedFieldSpec | None,
    ) -> tuple[FieldSpecNode, ...]:
        if entry is None:
            return ()
        return entry.field_template
