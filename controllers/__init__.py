# -*- coding: utf-8 -*-
"""
Stepflow Controllers
====================
Controller layer between rendering code and the wizard engine.

Usage:
    from controllers import StepperController

    stepper = StepperController([{"id": "a"}, {"id": "b"}])
    stepper.next()
    print(stepper.current().id)  # "b"
"""

from controllers.stepper_controller import StepperController

__all__ = [
    "StepperController",
]
