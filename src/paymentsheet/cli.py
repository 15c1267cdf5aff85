"""CLI for resolving payment methods and assembling forms from local files."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
import sys
from typing import Any, Sequence, TextIO

import yaml

from .catalog import CapabilityCatalog, CatalogContractError, FieldSpecNode
from .configuration import (
    DEFAULT_COLLECTION_POLICY,
    CollectionPolicyError,
    MerchantConfigError,
    load_collection_policy,
    load_merchant_configuration,
)
from .forms import FormContext, build_form
from .intent import TransactionContractError, TransactionSnapshot
from .logging_utils import configure_logging
from .metadata import InvalidStateError, PaymentMethodMetadata, build_metadata
from .presentation import FormRenderer


@dataclass
class JsonFormRenderer:
    """FormRenderer that writes the assembled tree as one JSON document."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, code: str, nodes: Sequence[FieldSpecNode]) -> None:
        payload = {"code": code, "fields": [node.as_dict() for node in nodes]}
        print(json.dumps(payload, sort_keys=True), file=self.stream)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Payment method metadata tools")
    parser.add_argument("--intent", required=True, help="Intent payload (JSON or YAML)")
    parser.add_argument("--catalog", default=None, help="Capability catalog (JSON or YAML)")
    parser.add_argument("--merchant-config", default=None, help="Merchant configuration YAML")
    parser.add_argument(
        "--collection-policy",
        default=None,
        help="Automatic collection policy YAML (defaults to the built-in table)",
    )
    parser.add_argument(
        "--has-saved-payment-methods",
        action="store_true",
        help="The customer already has saved payment methods",
    )
    parser.add_argument("--log-level", default="WARNING")
    subparsers = parser.add_subparsers(dest="cmd", required=True)

    subparsers.add_parser("methods", help="List supported payment methods in display order")

    form = subparsers.add_parser("form", help="Assemble the form for one payment method")
    form.add_argument("--code", required=True)
    form.add_argument(
        "--link-eligible",
        action="append",
        default=[],
        help="Payment method code eligible for Link inline signup (repeatable).",
    )

    args = parser.parse_args(argv)
    configure_logging(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    metadata = _build_metadata(args)

    if args.cmd == "methods":
        print(json.dumps(_methods_payload(metadata), sort_keys=True))
        return

    if args.cmd == "form":
        context = FormContext(link_eligible_codes=frozenset(args.link_eligible or []))
        nodes = build_form(args.code, metadata, context)
        if nodes is None:
            raise SystemExit(f"payment method not supported for this intent: {args.code}")
        renderer: FormRenderer = JsonFormRenderer()
        renderer.render(args.code, nodes)
        return

    raise SystemExit(f"unknown command: {args.cmd}")


def _build_metadata(args: argparse.Namespace) -> PaymentMethodMetadata:
    try:
        snapshot = TransactionSnapshot.from_payload(
            _read_payload(Path(args.intent)),
            has_saved_payment_methods=bool(args.has_saved_payment_methods),
        )
        catalog = CapabilityCatalog.load(Path(args.catalog)) if args.catalog else CapabilityCatalog()
        configuration = load_merchant_configuration(Path(args.merchant_config)) if args.merchant_config else None
        policy = (
            load_collection_policy(Path(args.collection_policy))
            if args.collection_policy
            else DEFAULT_COLLECTION_POLICY
        )
    except (
        TransactionContractError,
        CatalogContractError,
        MerchantConfigError,
        CollectionPolicyError,
    ) as exc:
        raise SystemExit(f"invalid input: {exc}") from exc
    return build_metadata(
        snapshot=snapshot,
        configuration=configuration,
        catalog=catalog,
        collection_policy=policy,
    )


def _methods_payload(metadata: PaymentMethodMetadata) -> dict[str, Any]:
    try:
        amount = metadata.amount()
    except InvalidStateError as exc:
        raise SystemExit(f"invalid intent: {exc}") from exc
    return {
        "sorted": list(metadata.sorted_supported_codes()),
        "saved": list(metadata.supported_saved_instrument_codes()),
        "amount": amount.as_dict() if amount is not None else None,
        "has_intent_to_setup": metadata.has_intent_to_setup(),
        "has_saved_payment_methods": metadata.has_saved_payment_methods(),
        "shipping_prerequisite_met": {
            code: metadata.is_shipping_prerequisite_met(code) for code in metadata.sorted_supported_codes()
        },
        "excluded": {code: reason for code, reason in metadata.exclusions},
    }


def _read_payload(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
