# -*- coding: utf-8 -*-
"""
Transition Executor - Runs a navigator move behind an optional guard.

A "before" guard is awaited first and can veto the move by returning a
falsy value other than None. An "after" guard runs once the move is
applied and its result is ignored. Guard exceptions are never caught here.

Executions against one executor are serialized with an asyncio.Lock:
- queue:  a second execution waits for the first to finish
- reject: a second execution raises TransitionInProgressError
"""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, Optional, Union

from app.config import Config
from models.step import Direction, TransitionOutcome, TransitionRequest
from services.exceptions import TransitionInProgressError
from utils.logger import get_logger

from .step_navigator import StepNavigator

logger = get_logger(__name__)

GuardCallback = Callable[[], Union[Any, Awaitable[Any]]]


async def _run_guard(callback: Optional[GuardCallback]) -> Any:
    """Invoke a sync or async guard and return its (awaited) result."""
    if callback is None:
        return None
    result = callback()
    if inspect.isawaitable(result):
        result = await result
    return result


class TransitionExecutor:
    """Applies guarded transitions to a navigator."""

    def __init__(self, navigator: StepNavigator, policy: Optional[str] = None):
        """
        Initialize the executor.

        Args:
            navigator: Navigator (or any object with next/prev/go_to) to drive
            policy: "queue" or "reject"; defaults to Config.TRANSITION_POLICY
        """
        self.navigator = navigator
        self.policy = Config.validate_policy(policy or Config.TRANSITION_POLICY)
        self._lock = asyncio.Lock()

    def is_busy(self) -> bool:
        """Check if an execution is in flight."""
        return self._lock.locked()

    async def execute(
        self,
        direction: Union[Direction, str, TransitionRequest],
        callback: Optional[GuardCallback] = None,
        run_before: bool = True,
        target_id: Optional[str] = None,
    ) -> TransitionOutcome:
        """
        Run a guarded transition.

        Args:
            direction: next / prev / goTo, or a ready TransitionRequest
            callback: Guard to run before or after the move
            run_before: True for a gating guard, False for an observing one
            target_id: Target step id, required for goTo

        Returns:
            TransitionOutcome.APPLIED or TransitionOutcome.ABORTED

        Raises:
            ValueError: goTo without target_id
            TransitionInProgressError: overlapping call under the reject policy
        """
        if isinstance(direction, TransitionRequest):
            request = direction
        else:
            request = TransitionRequest(direction=direction, target_id=target_id)

        if self.policy == "reject" and self._lock.locked():
            raise TransitionInProgressError(
                f"Cannot start '{request.direction.value}': another transition is in progress"
            )

        async with self._lock:
            if run_before:
                decision = await _run_guard(callback)
                if decision is not None and not decision:
                    logger.debug(f"Transition '{request.direction.value}' vetoed by guard")
                    return TransitionOutcome.ABORTED
                self._apply(request)
            else:
                self._apply(request)
                await _run_guard(callback)

        return TransitionOutcome.APPLIED

    def _apply(self, request: TransitionRequest):
        """Apply a request to the navigator."""
        logger.debug(f"Applying transition: {request.direction.value} {request.target_id or ''}")
        if request.direction is Direction.NEXT:
            self.navigator.next()
        elif request.direction is Direction.PREV:
            self.navigator.prev()
        else:
            self.navigator.go_to(request.target_id)
