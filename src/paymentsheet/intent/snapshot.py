"""Transaction snapshot: the normalized view of a payment or setup intent."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import json
from typing import Any, Mapping


class TransactionContractError(ValueError):
    """Raised when an upstream intent payload is structurally invalid."""


class IntentKind(str, Enum):
    PAYMENT = "payment_intent"
    SETUP = "setup_intent"


class Usage(str, Enum):
    NONE = "none"
    ON_SESSION = "on_session"
    OFF_SESSION = "off_session"


@dataclass(frozen=True)
class TransactionSnapshot:
    kind: IntentKind
    requested_codes: tuple[str, ...]
    unactivated_codes: frozenset[str] = frozenset()
    is_live_mode: bool = False
    amount: int | None = None
    currency: str | None = None
    usage: Usage = Usage.NONE
    instrument_options: Mapping[str, Any] = field(default_factory=dict)
    has_saved_payment_methods: bool = False
    has_shipping: bool = False
    intent_id: str | None = None

    def __post_init__(self) -> None:
        if len(set(self.requested_codes)) != len(self.requested_codes):
            raise TransactionContractError("requested_codes must be unique")
        if self.kind is IntentKind.SETUP and (self.amount is not None or self.currency is not None):
            raise TransactionContractError("setup intents carry no amount or currency")

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, Any],
        *,
        has_saved_payment_methods: bool = False,
    ) -> "TransactionSnapshot":
        if not isinstance(payload, Mapping):
            raise TransactionContractError("intent payload must be a mapping")
        object_name = str(payload.get("object") or "").strip()
        try:
            kind = IntentKind(object_name)
        except ValueError as exc:
            raise TransactionContractError(f"unsupported intent object: {object_name!r}") from exc

        if kind is IntentKind.PAYMENT:
            amount = _optional_amount(payload.get("amount"))
            currency = _optional_text(payload.get("currency"))
            usage = _usage(payload.get("setup_future_usage"), default=Usage.NONE)
        else:
            amount = None
            currency = None
            usage = _usage(payload.get("usage"), default=Usage.OFF_SESSION)

        livemode = payload.get("livemode", False)
        if not isinstance(livemode, bool):
            raise TransactionContractError("livemode must be boolean")

        return cls(
            kind=kind,
            requested_codes=_unique_codes(payload.get("payment_method_types"), "payment_method_types"),
            unactivated_codes=frozenset(
                _unique_codes(payload.get("unactivated_payment_method_types"), "unactivated_payment_method_types")
            ),
            is_live_mode=livemode,
            amount=amount,
            currency=currency,
            usage=usage,
            instrument_options=_instrument_options(payload.get("payment_method_options")),
            has_saved_payment_methods=bool(has_saved_payment_methods),
            has_shipping=payload.get("shipping") is not None,
            intent_id=_optional_text(payload.get("id")),
        )

    @property
    def is_payment(self) -> bool:
        return self.kind is IntentKind.PAYMENT

    def has_intent_to_setup(self) -> bool:
        if self.kind is IntentKind.SETUP:
            return True
        return self.usage is not Usage.NONE

    def options_for(self, code: str) -> Mapping[str, Any]:
        options = self.instrument_options.get(code)
        if isinstance(options, Mapping):
            return options
        return {}


def _unique_codes(value: Any, field_name: str) -> tuple[str, ...]:
    if value in (None, []):
        return ()
    if not isinstance(value, (list, tuple)):
        raise TransactionContractError(f"{field_name} must be a list")
    codes: list[str] = []
    for item in value:
        code = str(item or "").strip()
        if code and code not in codes:
            codes.append(code)
    return tuple(codes)


def _optional_amount(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TransactionContractError(f"amount must be an integer in minor units: {value!r}")
    if value < 0:
        raise TransactionContractError("amount must be >= 0")
    return value


def _optional_text(value: Any) -> str | None:
    text = str(value or "").strip()
    return text or None


def _usage(value: Any, *, default: Usage) -> Usage:
    text = str(value or "").strip().lower()
    if not text:
        return default
    try:
        return Usage(text)
    except ValueError as exc:
        raise TransactionContractError(f"unsupported usage: {text!r}") from exc


def _instrument_options(value: Any) -> dict[str, Any]:
    if value in (None, ""):
        return {}
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise TransactionContractError("payment_method_options is not valid JSON") from exc
    if not isinstance(value, Mapping):
        raise TransactionContractError("payment_method_options must be a mapping")
    return {str(key): item for key, item in value.items()}
