"""Presentation-lifecycle boundary."""

from .sheet import (
    SHOW_ATTEMPT_LIMIT,
    DismissalType,
    FormRenderer,
    KeyboardHandler,
    SheetController,
    SheetInterruptedError,
    SheetLifecycle,
)

__all__ = [
    "SHOW_ATTEMPT_LIMIT",
    "DismissalType",
    "FormRenderer",
    "KeyboardHandler",
    "SheetController",
    "SheetInterruptedError",
    "SheetLifecycle",
]
