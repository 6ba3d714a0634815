# -*- coding: utf-8 -*-
"""
Metadata Store - Per-step metadata overlay for a wizard flow.

A plain key-value mapping from step id to a caller-defined value
(None until the caller writes one). No cascading or derived values.
"""

from typing import Any, Dict, Mapping, Optional

from services.exceptions import StepNotFoundError
from utils.logger import get_logger

from .step_catalog import StepCatalog

logger = get_logger(__name__)


class MetadataStore:
    """Mutable metadata entries keyed by step id."""

    def __init__(self, catalog: StepCatalog, initial: Optional[Mapping[str, Any]] = None):
        """
        Initialize one entry per catalog step.

        Args:
            catalog: Catalog whose ids key the store
            initial: Optional initial values for a subset of steps
        """
        self._catalog = catalog
        self._initial: Dict[str, Any] = dict(initial or {})

        for step_id in self._initial:
            if step_id not in catalog:
                raise StepNotFoundError(step_id, context="initial metadata")

        self._entries: Dict[str, Any] = {}
        self._seed(keep_initial=True)

    def _seed(self, keep_initial: bool):
        self._entries = {
            step_id: self._initial.get(step_id) if keep_initial else None
            for step_id in self._catalog.ids()
        }

    def _require(self, step_id: str):
        if step_id not in self._catalog:
            raise StepNotFoundError(step_id, context="metadata")

    def read(self, step_id: str) -> Any:
        """Get the metadata for a step (None if never set)."""
        self._require(step_id)
        return self._entries[step_id]

    def write(self, step_id: str, value: Any):
        """Overwrite the metadata for a step."""
        self._require(step_id)
        self._entries[step_id] = value
        logger.debug(f"Metadata updated for step '{step_id}'")

    def reset(self, keep_initial: bool = False):
        """
        Reset every entry.

        Args:
            keep_initial: If True, restore the construction-time values
                          instead of clearing to None
        """
        self._seed(keep_initial)
        logger.debug(f"Metadata reset (keep_initial={keep_initial})")

    def snapshot(self) -> Dict[str, Any]:
        """Get a shallow copy of all entries."""
        return dict(self._entries)
