"""Presentation boundary: the modal sheet lifecycle and the form renderer protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Protocol, Sequence

from paymentsheet.catalog import FieldSpecNode


logger = logging.getLogger(__name__)

SHOW_ATTEMPT_LIMIT = 10


class SheetInterruptedError(RuntimeError):
    """Raised by a sheet controller when a show animation is interrupted."""


class DismissalType(str, Enum):
    PROGRAMMATICALLY = "PROGRAMMATICALLY"
    SWIPED_DOWN_BY_USER = "SWIPED_DOWN_BY_USER"


class SheetController(Protocol):
    @property
    def is_visible(self) -> bool: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...


class KeyboardHandler(Protocol):
    def dismiss(self) -> None: ...


class FormRenderer(Protocol):
    def render(self, code: str, nodes: Sequence[FieldSpecNode]) -> None: ...


@dataclass
class SheetLifecycle:
    controller: SheetController
    keyboard: KeyboardHandler
    show_attempt_limit: int = SHOW_ATTEMPT_LIMIT

    def __post_init__(self) -> None:
        if self.show_attempt_limit < 1:
            raise ValueError("show_attempt_limit must be >= 1")
        self._dismissal_type: DismissalType | None = None

    def show(self) -> bool:
        """Show the sheet, retrying interrupted attempts. Returns whether it was shown."""
        for attempt in range(1, self.show_attempt_limit + 1):
            try:
                self.controller.show()
            except SheetInterruptedError:
                logger.debug("sheet show interrupted (attempt %d/%d)", attempt, self.show_attempt_limit)
                continue
            return True
        logger.warning("sheet show gave up after %d interrupted attempts", self.show_attempt_limit)
        return False

    def hide(self) -> None:
        self._dismissal_type = DismissalType.PROGRAMMATICALLY
        # Keyboard goes first so the hide is not interrupted.
        self.keyboard.dismiss()
        if self.controller.is_visible:
            self.controller.hide()

    def dismissal_outcome(self) -> DismissalType | None:
        if self.controller.is_visible:
            return None
        return self._dismissal_type or DismissalType.SWIPED_DOWN_BY_USER
