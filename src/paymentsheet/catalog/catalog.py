"""Capability catalog: per-code field templates supplied by the backend."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Iterator, Mapping

import yaml
from jsonschema import Draft202012Validator

from .specs import FieldKind, FieldSpecError, FieldSpecNode, nodes_from_payload


logger = logging.getLogger(__name__)


SHARED_FIELD_SPEC_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["code"],
    "properties": {
        "code": {"type": "string", "minLength": 1},
        "fields": {"type": "array", "items": {"$ref": "#/$defs/node"}},
    },
    "$defs": {
        "node": {
            "type": "object",
            "required": ["type"],
            "oneOf": [
                {
                    "properties": {
                        "type": {"const": "field"},
                        "identifier": {"type": "string", "minLength": 1},
                        "kind": {"enum": [kind.value for kind in FieldKind]},
                    },
                    "required": ["type", "identifier"],
                },
                {
                    "properties": {
                        "type": {"const": "section"},
                        "identifier": {"type": "string", "minLength": 1},
                        "fields": {"type": "array", "items": {"$ref": "#/$defs/node"}},
                    },
                    "required": ["type", "identifier"],
                },
                {
                    "properties": {"type": {"const": "country_placeholder"}},
                    "required": ["type"],
                },
            ],
        }
    },
}

_ENTRY_VALIDATOR = Draft202012Validator(SHARED_FIELD_SPEC_SCHEMA)


class CatalogContractError(ValueError):
    """Raised when the catalog payload as a whole is unusable."""


@dataclass(frozen=True)
class SharedFieldSpec:
    code: str
    field_template: tuple[FieldSpecNode, ...] = ()

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SharedFieldSpec":
        errors = sorted(
            _ENTRY_VALIDATOR.iter_errors(payload),
            key=lambda e: [str(part) for part in e.path],
        )
        if errors:
            messages = "; ".join(error.message for error in errors)
            raise FieldSpecError(f"shared field spec failed validation: {messages}")
        return cls(
            code=str(payload["code"]).strip(),
            field_template=nodes_from_payload(payload.get("fields") or []),
        )

    def as_dict(self) -> dict[str, Any]:
        return {"code": self.code, "fields": [node.as_dict() for node in self.field_template]}


@dataclass(frozen=True)
class CapabilityCatalog:
    entries: tuple[SharedFieldSpec, ...] = ()

    def __post_init__(self) -> None:
        by_code: dict[str, SharedFieldSpec] = {}
        for entry in self.entries:
            by_code.setdefault(entry.code, entry)
        object.__setattr__(self, "_by_code", by_code)

    @classmethod
    def from_payload(cls, payload: Any) -> "CapabilityCatalog":
        if isinstance(payload, Mapping):
            payload = payload.get("specs")
        if payload is None:
            return cls()
        if not isinstance(payload, list):
            raise CatalogContractError("catalog payload must be a list of shared field specs")

        entries: list[SharedFieldSpec] = []
        seen: set[str] = set()
        for index, item in enumerate(payload):
            try:
                entry = SharedFieldSpec.from_payload(item)
            except FieldSpecError as exc:
                logger.warning("skipping malformed catalog entry %d: %s", index, exc)
                continue
            if entry.code in seen:
                logger.warning("skipping duplicate catalog entry %d for code %s", index, entry.code)
                continue
            seen.add(entry.code)
            entries.append(entry)
        return cls(entries=tuple(entries))

    @classmethod
    def load(cls, path: Path) -> "CapabilityCatalog":
        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        return cls.from_payload(payload)

    @classmethod
    def for_codes(cls, *codes: str) -> "CapabilityCatalog":
        """Catalog with an empty template for each code."""
        return cls(entries=tuple(SharedFieldSpec(code=code) for code in codes))

    def entry_for_code(self, code: str) -> SharedFieldSpec | None:
        return self._by_code.get(code)  # type: ignore[attr-defined]

    def codes(self) -> tuple[str, ...]:
        return tuple(entry.code for entry in self.entries)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[SharedFieldSpec]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def as_dict(self) -> dict[str, Any]:
        return {"specs": [entry.as_dict() for entry in self.entries]}
