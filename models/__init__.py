# -*- coding: utf-8 -*-
"""
Stepflow Data Models
"""

from .step import Step, Neighbors, Direction, TransitionRequest, TransitionOutcome

__all__ = [
    "Step",
    "Neighbors",
    "Direction",
    "TransitionRequest",
    "TransitionOutcome",
]
