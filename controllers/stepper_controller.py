# -*- coding: utf-8 -*-
"""
Stepper Controller
==================
Facade over the wizard engine for rendering code.

One controller owns one flow: its catalog, navigator, metadata store and
guarded transition executor. Nothing is shared between controllers.

Usage:
    stepper = StepperController(
        [{"id": "account", "title": "Account"}, {"id": "review", "title": "Review"}],
        initial_metadata={"account": {"email": None}},
    )
    stepper.step_changed.connect(render)

    await stepper.before_next(form_is_valid)
    label = stepper.switch({
        "account": lambda step: step.title,
        "review": lambda step: "Confirm",
    })
"""

from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from models.step import Direction, Step, TransitionOutcome
from services.wizard.metadata_store import MetadataStore
from services.wizard.step_catalog import StepCatalog, StepDefinition
from services.wizard.step_dispatch import Condition, Handler, match, switch, when
from services.wizard.step_navigator import StepNavigator
from services.wizard.transition_executor import GuardCallback, TransitionExecutor
from utils.logger import get_logger

logger = get_logger(__name__)


class StepperController(QObject):
    """
    Read surface, commands and dispatch for a single wizard flow.

    Provides:
    - Step queries (all, current, first/last checks, lookup utilities)
    - Navigation commands (next, prev, go_to, reset)
    - Guarded navigation (before_*/after_* coroutines)
    - Per-step metadata
    - switch/when/match dispatch on the current step
    """

    step_changed = pyqtSignal(object)  # new current Step
    metadata_changed = pyqtSignal(str, object)  # step id, value

    def __init__(
        self,
        steps: Iterable[StepDefinition],
        initial_step_id: Optional[str] = None,
        initial_metadata: Optional[Mapping[str, Any]] = None,
        policy: Optional[str] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._catalog = StepCatalog(steps)
        self._navigator = StepNavigator(self._catalog, initial_step_id)
        self._metadata = MetadataStore(self._catalog, initial_metadata)
        self._executor = TransitionExecutor(self._navigator, policy=policy)

        self._navigator.step_changed.connect(self._on_step_changed)

        logger.info(
            f"{self.__class__.__name__} created with {len(self._catalog)} steps, "
            f"starting at '{self.current().id}'"
        )

    # =========================================================================
    # Read surface
    # =========================================================================

    @property
    def all(self) -> Tuple[Step, ...]:
        """All steps in order."""
        return self._catalog.get_all()

    @property
    def utils(self) -> StepCatalog:
        """Stateless step queries (get_index, get_neighbors, ...)."""
        return self._catalog

    @property
    def navigator(self) -> StepNavigator:
        return self._navigator

    @property
    def current_index(self) -> int:
        return self._navigator.current_index

    def current(self) -> Step:
        return self._navigator.current()

    def is_first(self) -> bool:
        return self._navigator.is_first()

    def is_last(self) -> bool:
        return self._navigator.is_last()

    def get(self, step_id: str) -> Step:
        """Get a step by id."""
        return self._catalog.get(step_id)

    # =========================================================================
    # Commands
    # =========================================================================

    def next(self):
        self._navigator.next()

    def prev(self):
        self._navigator.prev()

    def go_to(self, step_id: str):
        self._navigator.go_to(step_id)

    def reset(self):
        """Return to the starting step. Metadata is left untouched."""
        self._navigator.reset()

    # =========================================================================
    # Guarded navigation
    # =========================================================================

    async def before_next(self, callback: GuardCallback) -> TransitionOutcome:
        """Advance only if callback does not veto."""
        return await self._executor.execute(Direction.NEXT, callback, run_before=True)

    async def after_next(self, callback: GuardCallback) -> TransitionOutcome:
        """Advance, then run callback."""
        return await self._executor.execute(Direction.NEXT, callback, run_before=False)

    async def before_prev(self, callback: GuardCallback) -> TransitionOutcome:
        return await self._executor.execute(Direction.PREV, callback, run_before=True)

    async def after_prev(self, callback: GuardCallback) -> TransitionOutcome:
        return await self._executor.execute(Direction.PREV, callback, run_before=False)

    async def before_go_to(self, step_id: str, callback: GuardCallback) -> TransitionOutcome:
        return await self._executor.execute(
            Direction.GO_TO, callback, run_before=True, target_id=step_id
        )

    async def after_go_to(self, step_id: str, callback: GuardCallback) -> TransitionOutcome:
        return await self._executor.execute(
            Direction.GO_TO, callback, run_before=False, target_id=step_id
        )

    # =========================================================================
    # Metadata
    # =========================================================================

    @property
    def metadata(self) -> Dict[str, Any]:
        """Snapshot of every step's metadata."""
        return self._metadata.snapshot()

    def get_metadata(self, step_id: str) -> Any:
        return self._metadata.read(step_id)

    def set_metadata(self, step_id: str, value: Any):
        self._metadata.write(step_id, value)
        self.metadata_changed.emit(step_id, value)

    def reset_metadata(self, keep_initial: bool = False):
        """Clear metadata, optionally back to the construction-time values."""
        self._metadata.reset(keep_initial=keep_initial)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def switch(self, handlers: Mapping[str, Handler], exhaustive: bool = False) -> Any:
        """
        Call the handler for the current step.

        Args:
            handlers: Mapping of step id to handler
            exhaustive: If True, every catalog step must have a handler
        """
        step_ids = self._catalog.ids() if exhaustive else None
        return switch(self.current(), handlers, step_ids=step_ids)

    def when(self, condition: Condition, when_fn: Handler,
             else_fn: Optional[Handler] = None) -> Any:
        """Call when_fn if the current step matches condition, else else_fn."""
        return when(self.current(), condition, when_fn, else_fn)

    def match(self, step_id: str, handlers: Mapping[str, Handler]) -> Any:
        """Dispatch on step_id; returns NO_MATCH when nothing handles it."""
        return match(step_id, handlers, self._catalog)

    # =========================================================================
    # Signal Handlers
    # =========================================================================

    def _on_step_changed(self, old_index: int, new_index: int):
        self.step_changed.emit(self._catalog.get_by_index(new_index))
