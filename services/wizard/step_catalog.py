# -*- coding: utf-8 -*-
"""
Step Catalog - Immutable ordered collection of wizard steps.

Provides the stateless query utilities the rest of the engine is built on:
- Lookup by id or index
- First/last step
- Neighbor queries (failing and non-failing forms)
"""

from typing import Any, Iterable, Iterator, Mapping, Optional, Tuple, Union

from models.step import Step, Neighbors
from services.exceptions import (
    InvalidCatalogError,
    NoSuchNeighborError,
    StepNotFoundError,
    StepOutOfRangeError,
)
from utils.logger import get_logger

logger = get_logger(__name__)

StepDefinition = Union[Step, Mapping[str, Any]]


class StepCatalog:
    """
    Ordered, immutable sequence of steps with pairwise distinct ids.

    Order defines adjacency: step i's neighbors are i - 1 and i + 1.
    """

    def __init__(self, steps: Iterable[StepDefinition]):
        """
        Build the catalog.

        Args:
            steps: Step instances or mappings with an 'id' key

        Raises:
            InvalidCatalogError: empty sequence, bad definition or duplicate ids
        """
        built = []
        for definition in steps:
            try:
                step = definition if isinstance(definition, Step) else Step.from_dict(definition)
            except (TypeError, ValueError) as e:
                raise InvalidCatalogError(f"Invalid step definition: {e}") from e
            built.append(step)

        if not built:
            raise InvalidCatalogError("A step catalog needs at least one step")

        self._index_by_id = {}
        for index, step in enumerate(built):
            if step.id in self._index_by_id:
                raise InvalidCatalogError(f"Duplicate step id '{step.id}'")
            self._index_by_id[step.id] = index

        self._steps: Tuple[Step, ...] = tuple(built)
        logger.debug(f"Step catalog built: {list(self._index_by_id)}")

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __contains__(self, step_id: object) -> bool:
        try:
            return step_id in self._index_by_id
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"StepCatalog({list(self._index_by_id)!r})"

    def ids(self) -> Tuple[str, ...]:
        """Step ids in catalog order."""
        return tuple(step.id for step in self._steps)

    def get_all(self) -> Tuple[Step, ...]:
        """Get all steps in order."""
        return self._steps

    def get(self, step_id: str) -> Step:
        """Get a step by id."""
        return self._steps[self.get_index(step_id)]

    def get_index(self, step_id: str) -> int:
        """Get the zero-based position of a step."""
        try:
            return self._index_by_id[step_id]
        except (KeyError, TypeError):
            raise StepNotFoundError(step_id) from None

    def get_by_index(self, index: int) -> Step:
        """Get the step at a position; negative indexes are not wrapped."""
        if index < 0 or index >= len(self._steps):
            raise StepOutOfRangeError(index, len(self._steps))
        return self._steps[index]

    def get_first(self) -> Step:
        """Get the first step."""
        return self._steps[0]

    def get_last(self) -> Step:
        """Get the last step."""
        return self._steps[-1]

    def get_next(self, step_id: str) -> Step:
        """
        Get the step after the given one.

        Raises:
            NoSuchNeighborError: if step_id is the last step
        """
        index = self.get_index(step_id)
        if index == len(self._steps) - 1:
            raise NoSuchNeighborError(step_id, "next")
        return self._steps[index + 1]

    def get_prev(self, step_id: str) -> Step:
        """
        Get the step before the given one.

        Raises:
            NoSuchNeighborError: if step_id is the first step
        """
        index = self.get_index(step_id)
        if index == 0:
            raise NoSuchNeighborError(step_id, "prev")
        return self._steps[index - 1]

    def get_neighbors(self, step_id: str) -> Neighbors:
        """Get both neighbors; a missing side is None rather than an error."""
        index = self.get_index(step_id)
        prev_step = self._steps[index - 1] if index > 0 else None
        next_step = self._steps[index + 1] if index < len(self._steps) - 1 else None
        return Neighbors(prev=prev_step, next=next_step)


def get_initial_step_index(catalog: StepCatalog, initial_step_id: Optional[str] = None) -> int:
    """
    Resolve the starting position of a flow.

    Returns 0 when no id is given or when the id is not in the catalog.
    """
    if initial_step_id is None:
        return 0
    if initial_step_id not in catalog:
        logger.warning(f"Initial step '{initial_step_id}' not found, starting at first step")
        return 0
    return catalog.get_index(initial_step_id)
