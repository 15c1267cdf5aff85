"""Payment method definitions and their registry."""

from .bank_debit import VERIFICATION_METHODS, SepaDebitDefinition, UsBankAccountDefinition
from .base import CatalogTemplateDefinition, PaymentMethodDefinition
from .card import CardDefinition
from .catalog_backed import (
    AffirmDefinition,
    AfterpayClearpayDefinition,
    BancontactDefinition,
    IdealDefinition,
    KlarnaDefinition,
    SofortDefinition,
)
from .registry import DEFAULT_REGISTRY, DefinitionRegistry, DefinitionRegistryError

__all__ = [
    "DEFAULT_REGISTRY",
    "VERIFICATION_METHODS",
    "AffirmDefinition",
    "AfterpayClearpayDefinition",
    "BancontactDefinition",
    "CardDefinition",
    "CatalogTemplateDefinition",
    "DefinitionRegistry",
    "DefinitionRegistryError",
    "IdealDefinition",
    "KlarnaDefinition",
    "PaymentMethodDefinition",
    "SepaDebitDefinition",
    "SofortDefinition",
    "UsBankAccountDefinition",
]
