# -*- coding: utf-8 -*-
"""
Smoke tests to ensure the engine doesn't break after changes.
These tests verify basic functionality works.
"""
import sys
import pytest
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def test_imports():
    """Test that all main modules can be imported."""
    try:
        from app.config import Config
        from models.step import Step
        from services.wizard import StepCatalog, StepNavigator, TransitionExecutor
        from controllers import StepperController
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_lazy_service_exports():
    """Test that the service layer resolves its lazy exports."""
    import services
    from services.wizard.step_navigator import StepNavigator

    assert services.StepNavigator is StepNavigator
    with pytest.raises(AttributeError):
        services.DoesNotExist


def test_config_defaults():
    """Test that configuration exposes a valid transition policy."""
    from app.config import Config

    assert Config.TRANSITION_POLICY in Config.TRANSITION_POLICIES
    assert Config.validate_policy("REJECT") == "reject"
    with pytest.raises(ValueError):
        Config.validate_policy("parallel")


def test_logger_is_namespaced():
    """Test that module loggers hang off the engine logger."""
    from utils.logger import get_logger

    logger = get_logger("smoke")
    assert logger.name == "stepflow.smoke"


def test_controller_round_trip():
    """Test a short flow end to end."""
    from controllers import StepperController

    stepper = StepperController([{"id": "a"}, {"id": "b"}, {"id": "c"}], initial_step_id="b")
    stepper.next()
    stepper.next()
    assert stepper.current().id == "c"
    stepper.reset()
    assert stepper.current().id == "b"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
