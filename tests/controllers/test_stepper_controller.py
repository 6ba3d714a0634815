# -*- coding: utf-8 -*-
"""
Tests for StepperController.

Tests cover:
- Read surface and navigation commands
- Guarded navigation shortcuts
- Metadata
- Dispatch bound to the current step
- Signals
- Instance isolation
"""

from unittest.mock import AsyncMock

import pytest

from controllers.stepper_controller import StepperController
from models.step import TransitionOutcome
from services.exceptions import StepNotFoundError, UnhandledStepError
from services.wizard.step_dispatch import NO_MATCH

STEPS = [
    {"id": "account", "title": "Account"},
    {"id": "shipping", "title": "Shipping"},
    {"id": "review", "title": "Review"},
]


@pytest.fixture
def stepper():
    return StepperController(STEPS, policy="queue")


class TestReadSurface:
    """Test queries exposed to rendering code."""

    def test_all_and_current(self, stepper):
        assert [step.id for step in stepper.all] == ["account", "shipping", "review"]
        assert stepper.current().title == "Account"
        assert stepper.is_first() is True
        assert stepper.is_last() is False

    def test_get_and_utils(self, stepper):
        assert stepper.get("review").title == "Review"
        assert stepper.utils.get_neighbors("shipping").next.id == "review"

    def test_starts_at_initial_step(self):
        stepper = StepperController(STEPS, initial_step_id="shipping")
        assert stepper.current_index == 1


class TestCommands:
    """Test navigation commands."""

    def test_next_prev_clamp(self, stepper):
        stepper.prev()
        assert stepper.current().id == "account"
        for _ in range(5):
            stepper.next()
        assert stepper.current().id == "review"
        assert stepper.is_last() is True

    def test_go_to_and_reset(self):
        stepper = StepperController(STEPS, initial_step_id="shipping")
        stepper.go_to("review")
        stepper.reset()
        assert stepper.current().id == "shipping"

    def test_go_to_unknown(self, stepper):
        with pytest.raises(StepNotFoundError):
            stepper.go_to("payment")
        assert stepper.current().id == "account"


class TestGuardedNavigation:
    """Test before_*/after_* shortcuts."""

    @pytest.mark.asyncio
    async def test_before_next_vetoed(self, stepper):
        outcome = await stepper.before_next(AsyncMock(return_value=False))
        assert outcome is TransitionOutcome.ABORTED
        assert stepper.current().id == "account"

    @pytest.mark.asyncio
    async def test_before_next_approved(self, stepper):
        outcome = await stepper.before_next(AsyncMock(return_value=True))
        assert outcome is TransitionOutcome.APPLIED
        assert stepper.current().id == "shipping"

    @pytest.mark.asyncio
    async def test_after_next_sees_new_step(self, stepper):
        seen = []
        await stepper.after_next(lambda: seen.append(stepper.current().id))
        assert seen == ["shipping"]

    @pytest.mark.asyncio
    async def test_before_prev_and_after_prev(self, stepper):
        stepper.go_to("review")
        await stepper.before_prev(lambda: True)
        assert stepper.current().id == "shipping"
        await stepper.after_prev(lambda: None)
        assert stepper.current().id == "account"

    @pytest.mark.asyncio
    async def test_go_to_shortcuts(self, stepper):
        await stepper.before_go_to("review", AsyncMock(return_value=False))
        assert stepper.current().id == "account"
        await stepper.after_go_to("review", AsyncMock())
        assert stepper.current().id == "review"


class TestMetadata:
    """Test metadata access through the controller."""

    def test_initial_metadata(self):
        stepper = StepperController(STEPS, initial_metadata={"account": {"email": "a@b.c"}})
        assert stepper.get_metadata("account") == {"email": "a@b.c"}
        assert stepper.metadata == {
            "account": {"email": "a@b.c"},
            "shipping": None,
            "review": None,
        }

    def test_set_metadata_emits_signal(self, stepper, qtbot):
        with qtbot.waitSignal(stepper.metadata_changed, timeout=1000) as blocker:
            stepper.set_metadata("shipping", {"zip": "10115"})
        assert blocker.args == ["shipping", {"zip": "10115"}]
        assert stepper.get_metadata("shipping") == {"zip": "10115"}

    def test_reset_metadata(self):
        stepper = StepperController(STEPS, initial_metadata={"account": 1})
        stepper.set_metadata("account", 2)
        stepper.reset_metadata(keep_initial=True)
        assert stepper.get_metadata("account") == 1
        stepper.reset_metadata()
        assert stepper.get_metadata("account") is None

    def test_reset_keeps_metadata(self, stepper):
        stepper.set_metadata("account", "filled")
        stepper.next()
        stepper.reset()
        assert stepper.get_metadata("account") == "filled"


class TestDispatch:
    """Test dispatch bound to the current step."""

    def test_switch(self, stepper):
        stepper.go_to("review")
        result = stepper.switch({
            "account": lambda step: "f",
            "shipping": lambda step: "g",
            "review": lambda step: f"h:{step.title}",
        })
        assert result == "h:Review"

    def test_switch_unhandled(self, stepper):
        stepper.go_to("review")
        with pytest.raises(UnhandledStepError):
            stepper.switch({"account": lambda step: "f"})

    def test_switch_exhaustive(self, stepper):
        with pytest.raises(UnhandledStepError) as exc_info:
            stepper.switch({"account": lambda step: "f"}, exhaustive=True)
        assert exc_info.value.missing == ["shipping", "review"]

    def test_when(self, stepper):
        assert stepper.when("account", lambda step: "yes", lambda step: "no") == "yes"
        assert stepper.when(["account", False], lambda step: "yes", lambda step: "no") == "no"

    def test_match(self, stepper):
        assert stepper.match("review", {"review": lambda step: step.title}) == "Review"
        assert stepper.match("x", {"account": lambda step: 1}) is NO_MATCH


class TestSignals:
    """Test controller signals."""

    def test_step_changed_carries_new_step(self, stepper, qtbot):
        with qtbot.waitSignal(stepper.step_changed, timeout=1000) as blocker:
            stepper.next()
        assert blocker.args[0].id == "shipping"

    def test_no_signal_when_clamped(self, stepper, qtbot):
        with qtbot.assertNotEmitted(stepper.step_changed):
            stepper.prev()


def test_instances_do_not_share_state():
    first = StepperController(STEPS)
    second = StepperController(STEPS)

    first.next()
    first.set_metadata("account", "mine")

    assert second.current().id == "account"
    assert second.get_metadata("account") is None
