"""Redirect and buy-now-pay-later payment methods described by the catalog."""

from __future__ import annotations

from .base import CatalogTemplateDefinition


class BancontactDefinition(CatalogTemplateDefinition):
    code = "bancontact"


class IdealDefinition(CatalogTemplateDefinition):
    code = "ideal"


class SofortDefinition(CatalogTemplateDefinition):
    code = "sofort"


class KlarnaDefinition(CatalogTemplateDefinition):
    code = "klarna"


class AffirmDefinition(CatalogTemplateDefinition):
    code = "affirm"
    requires_shipping_address = True


class AfterpayClearpayDefinition(CatalogTemplateDefinition):
    code = "afterpay_clearpay"
    requires_shipping_address = True
