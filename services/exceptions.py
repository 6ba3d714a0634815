# -*- coding: utf-8 -*-
"""Custom exceptions for the step navigation engine."""

from typing import Iterable, Optional


class StepperException(Exception):
    """Base exception for all engine errors."""

    def __init__(self, message: str, context: str = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class StepNotFoundError(StepperException, LookupError):
    """Raised when a step id is not a member of the catalog."""

    def __init__(self, step_id: str, context: str = None):
        super().__init__(f"Step with id '{step_id}' not found", context=context)
        self.step_id = step_id


class StepOutOfRangeError(StepperException, IndexError):
    """Raised when an index falls outside [0, size - 1]."""

    BOUND_FIRST = "first"
    BOUND_LAST = "last"

    def __init__(self, index: int, size: int, context: str = None):
        if index < 0:
            bound = self.BOUND_FIRST
            message = f"Index {index} is out of range: cannot go before the first step"
        else:
            bound = self.BOUND_LAST
            message = (
                f"Index {index} is out of range: cannot go past the last step "
                f"(last index is {size - 1})"
            )
        super().__init__(message, context=context)
        self.index = index
        self.size = size
        self.bound = bound


class NoSuchNeighborError(StepperException, LookupError):
    """Raised when a neighbor is requested past either end of the catalog."""

    def __init__(self, step_id: str, direction: str, context: str = None):
        position = "last" if direction == "next" else "first"
        super().__init__(
            f"Step '{step_id}' is the {position} step and has no {direction} step",
            context=context
        )
        self.step_id = step_id
        self.direction = direction


class UnhandledStepError(StepperException):
    """Raised when a dispatch mapping has no handler for a step."""

    def __init__(self, step_id: Optional[str], missing: Iterable[str] = None,
                 context: str = None):
        self.missing = list(missing or [])
        if self.missing:
            message = f"No handler for step(s): {', '.join(self.missing)}"
        else:
            message = f"No handler for step '{step_id}'"
        super().__init__(message, context=context)
        self.step_id = step_id


class InvalidCatalogError(StepperException, ValueError):
    """Raised when a step catalog cannot be built from the given steps."""


class TransitionInProgressError(StepperException):
    """Raised when a guarded transition overlaps one already in flight."""
