# -*- coding: utf-8 -*-
"""
Stepflow Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "StepCatalog",
    "MetadataStore",
    "StepNavigator",
    "TransitionExecutor",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "StepCatalog":
        from .wizard.step_catalog import StepCatalog
        return StepCatalog
    elif name == "MetadataStore":
        from .wizard.metadata_store import MetadataStore
        return MetadataStore
    elif name == "StepNavigator":
        from .wizard.step_navigator import StepNavigator
        return StepNavigator
    elif name == "TransitionExecutor":
        from .wizard.transition_executor import TransitionExecutor
        return TransitionExecutor
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
