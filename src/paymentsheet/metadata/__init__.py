"""Payment method metadata resolution."""

from .metadata import (
    EXCLUDED_NO_CATALOG_ENTRY,
    EXCLUDED_UNACTIVATED,
    EXCLUDED_UNREGISTERED,
    Amount,
    InvalidStateError,
    PaymentMethodMetadata,
    build_metadata,
)

__all__ = [
    "EXCLUDED_NO_CATALOG_ENTRY",
    "EXCLUDED_UNACTIVATED",
    "EXCLUDED_UNREGISTERED",
    "Amount",
    "InvalidStateError",
    "PaymentMethodMetadata",
    "build_metadata",
]
