# -*- coding: utf-8 -*-
"""
Step dispatch helpers.

Select and call exactly one handler keyed by step id, instead of writing
if/elif chains over the current step:

    switch(step, {"account": render_account, "review": render_review})
    when(step, "review", render_submit, render_next)
    match("account", {"account": summarize}, catalog)

Handler mappings may be keyed by plain strings or by members of a
``str`` Enum, which compare equal to their string value.
"""

from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, TypeVar, Union

from models.step import Step
from services.exceptions import UnhandledStepError

from .step_catalog import StepCatalog

R = TypeVar('R')

Handler = Callable[[Step], R]
Condition = Union[str, Sequence[Any]]


class _NoMatch:
    """Sentinel returned by match() when nothing handles the id."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NO_MATCH"


NO_MATCH = _NoMatch()


def switch(step: Step, handlers: Mapping[str, Handler],
           step_ids: Optional[Iterable[str]] = None) -> R:
    """
    Call the handler registered for the step's id.

    Args:
        step: Step to dispatch on (usually the current one)
        handlers: Mapping of step id to handler
        step_ids: Closed set of ids the mapping must cover; when given,
                  any gap is reported even if this step is handled

    Raises:
        UnhandledStepError: no handler for the step, or gaps in step_ids
    """
    if step_ids is not None:
        missing = [step_id for step_id in step_ids if step_id not in handlers]
        if missing:
            raise UnhandledStepError(step.id, missing=missing, context="switch")

    handler = handlers.get(step.id)
    if handler is None:
        raise UnhandledStepError(step.id, context="switch")
    return handler(step)


def match(step_id: str, handlers: Mapping[str, Handler], catalog: StepCatalog) -> Any:
    """
    Call the handler registered for step_id with that step.

    Unlike switch(), a missing handler is not an error: NO_MATCH is returned
    when step_id has no handler or is not in the catalog.
    """
    try:
        handler = handlers.get(step_id)
    except TypeError:
        # Unhashable id
        return NO_MATCH
    if handler is None or step_id not in catalog:
        return NO_MATCH
    return handler(catalog.get(step_id))


def when(step: Step, condition: Condition, when_fn: Handler,
         else_fn: Optional[Handler] = None) -> Any:
    """
    Call when_fn if the step matches, else else_fn (or return None).

    Args:
        step: Step to test (usually the current one)
        condition: A step id, or [step_id, *extra_conditions] where every
                   extra condition must also be truthy
        when_fn: Called with the step on a match
        else_fn: Called with the step otherwise
    """
    if isinstance(condition, str):
        step_id, extra = condition, ()
    else:
        step_id, *extra = condition

    if step.id == step_id and all(extra):
        return when_fn(step)
    if else_fn is not None:
        return else_fn(step)
    return None
