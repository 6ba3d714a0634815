# -*- coding: utf-8 -*-
"""
Wizard engine - step catalog, navigation and dispatch.

UI-free building blocks for multi-step flows. Rendering code consumes
these through controllers.StepperController.
"""

from .step_catalog import StepCatalog, get_initial_step_index
from .metadata_store import MetadataStore
from .step_navigator import StepNavigator
from .transition_executor import TransitionExecutor
from .step_dispatch import NO_MATCH, match, switch, when

__all__ = [
    'StepCatalog',
    'get_initial_step_index',
    'MetadataStore',
    'StepNavigator',
    'TransitionExecutor',
    'NO_MATCH',
    'match',
    'switch',
    'when',
]
