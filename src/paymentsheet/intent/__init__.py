"""Normalized transaction snapshot."""

from .snapshot import IntentKind, TransactionContractError, TransactionSnapshot, Usage

__all__ = ["IntentKind", "TransactionContractError", "TransactionSnapshot", "Usage"]
