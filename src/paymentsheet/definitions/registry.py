"""Static registry of payment method definitions keyed by code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .bank_debit import SepaDebitDefinition, UsBankAccountDefinition
from .base import PaymentMethodDefinition
from .card import CardDefinition
from .catalog_backed import (
    AffirmDefinition,
    AfterpayClearpayDefinition,
    BancontactDefinition,
    IdealDefinition,
    KlarnaDefinition,
    SofortDefinition,
)


class DefinitionRegistryError(ValueError):
    """Raised when a definition registry is built from invalid definitions."""


@dataclass(frozen=True)
class DefinitionRegistry:
    definitions: tuple[PaymentMethodDefinition, ...]

    def __post_init__(self) -> None:
        by_code: dict[str, PaymentMethodDefinition] = {}
        for definition in self.definitions:
            code = str(definition.code or "").strip()
            if not code:
                raise DefinitionRegistryError(f"{definition!r} has no code")
            if code in by_code:
                raise DefinitionRegistryError(f"duplicate definition for code: {code}")
            by_code[code] = definition
        object.__setattr__(self, "_by_code", by_code)

    @classmethod
    def of(cls, definitions: Iterable[PaymentMethodDefinition]) -> "DefinitionRegistry":
        return cls(definitions=tuple(definitions))

    def get(self, code: str) -> PaymentMethodDefinition | None:
        return self._by_code.get(code)  # type: ignore[attr-defined]

    def codes(self) -> tuple[str, ...]:
        return tuple(definition.code for definition in self.definitions)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[PaymentMethodDefinition]:
        return iter(self.definitions)

    def __len__(self) -> int:
        return len(self.definitions)


DEFAULT_REGISTRY = DefinitionRegistry.of(
    [
        CardDefinition(),
        UsBankAccountDefinition(),
        SepaDebitDefinition(),
        BancontactDefinition(),
        IdealDefinition(),
        SofortDefinition(),
        KlarnaDefinition(),
        AffirmDefinition(),
        AfterpayClearpayDefinition(),
    ]
)
