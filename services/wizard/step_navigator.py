# -*- coding: utf-8 -*-
"""
Step Navigator - Manages the cursor over a step catalog.

Handles:
- Step progression (next/previous), clamped at both ends
- Jumping to a step by id
- Bounds enforcement for raw index moves
- Reset to the starting step
"""

from typing import Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from models.step import Step
from services.exceptions import StepOutOfRangeError
from utils.logger import get_logger

from .step_catalog import StepCatalog, get_initial_step_index

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Single source of truth for where the flow is.

    Responsibilities:
    - Own the current index (never outside [0, len - 1])
    - Remember the starting index for reset()
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)

    def __init__(self, catalog: StepCatalog, initial_step_id: Optional[str] = None):
        """
        Initialize the navigator.

        Args:
            catalog: Steps to navigate
            initial_step_id: Step to start on (first step if None or unknown)
        """
        super().__init__()
        self.catalog = catalog
        self.initial_index = get_initial_step_index(catalog, initial_step_id)
        self._current_index = self.initial_index

    @property
    def current_index(self) -> int:
        """Index of the active step."""
        return self._current_index

    def all(self) -> Tuple[Step, ...]:
        """Get all steps."""
        return self.catalog.get_all()

    def current(self) -> Step:
        """Get the current step."""
        return self.catalog.get_by_index(self._current_index)

    def get_step_count(self) -> int:
        """Get total number of steps."""
        return len(self.catalog)

    def is_first(self) -> bool:
        return self._current_index == 0

    def is_last(self) -> bool:
        return self._current_index == len(self.catalog) - 1

    def can_go_next(self) -> bool:
        """Check if there is a step after the current one."""
        return not self.is_last()

    def can_go_previous(self) -> bool:
        """Check if there is a step before the current one."""
        return not self.is_first()

    def next(self):
        """Advance one step; a no-op at the last step."""
        if self.is_last():
            logger.debug(f"Cannot go next: already at last step ({self._current_index})")
            return
        self.set_index(self._current_index + 1)

    def prev(self):
        """Go back one step; a no-op at the first step."""
        if self.is_first():
            logger.debug(f"Cannot go previous: already at first step ({self._current_index})")
            return
        self.set_index(self._current_index - 1)

    def go_to(self, step_id: str):
        """
        Navigate to a step by id.

        Raises:
            StepNotFoundError: if step_id is not in the catalog (cursor unchanged)
        """
        self.set_index(self.catalog.get_index(step_id))

    def reset(self):
        """Return to the step the navigator started on."""
        logger.info(f"Resetting navigator to step {self.initial_index}")
        self.set_index(self.initial_index)

    def set_index(self, new_index: int):
        """
        Move the cursor to an index.

        Args:
            new_index: Target step index

        Raises:
            StepOutOfRangeError: if new_index is outside [0, len - 1]
        """
        size = len(self.catalog)
        if new_index < 0 or new_index >= size:
            logger.warning(f"Invalid step index: {new_index} (valid range: 0-{size - 1})")
            raise StepOutOfRangeError(new_index, size)

        old_index = self._current_index
        if new_index == old_index:
            return

        self._current_index = new_index
        logger.info(
            f"Navigation: Step {old_index} → {new_index} "
            f"('{self.catalog.get_by_index(new_index).id}')"
        )

        # Emit signals
        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self.catalog) <= 1:
            return 0.0
        return (self._current_index / (len(self.catalog) - 1)) * 100.0
