# -*- coding: utf-8 -*-
"""
Step and transition models.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional


@dataclass(frozen=True)
class Step:
    """
    One identified stage of a multi-step flow.

    The id is the step identity; everything else the caller wants to carry
    (title, description, validation rules, domain data) lives in ``fields``
    and is exposed read-only:

        step = Step("shipping", {"title": "Shipping"})
        step.title          # "Shipping"
        step["title"]       # "Shipping"
        step.get("icon")    # None

    Payload names must be strings that do not start with an underscore and
    do not shadow a Step attribute (id, fields, get, to_dict, ...).
    """

    id: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Step id must be a non-empty string, got {self.id!r}")
        for key in self.fields:
            if _is_reserved_field(key):
                raise ValueError(
                    f"Step field name {key!r} is reserved and cannot be used as payload"
                )
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getattr__(self, name: str) -> Any:
        # Only called when regular lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.__dict__["fields"][name]
        except KeyError:
            raise AttributeError(
                f"Step '{self.__dict__.get('id')}' has no field '{name}'"
            ) from None

    def __getitem__(self, key: str) -> Any:
        if key == "id":
            return self.id
        return self.fields[key]

    def __hash__(self):
        return hash(self.id)

    def __reduce__(self):
        # fields is a mappingproxy, which cannot be pickled
        return (self.__class__, (self.id, dict(self.fields)))

    def get(self, key: str, default: Any = None) -> Any:
        """Get a payload field, or default if absent."""
        if key == "id":
            return self.id
        return self.fields.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the step back into a plain dictionary."""
        return {"id": self.id, **self.fields}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Step':
        """Create a step from a mapping carrying an 'id' key."""
        if "id" not in data:
            raise ValueError(f"Step definition has no 'id': {dict(data)!r}")
        payload = {key: value for key, value in data.items() if key != "id"}
        return cls(id=data["id"], fields=payload)


class Neighbors(NamedTuple):
    """Previous and next steps around a step; None at either extreme."""
    prev: Optional[Step]
    next: Optional[Step]


class Direction(str, Enum):
    """Direction of a requested transition."""
    NEXT = "next"
    PREV = "prev"
    GO_TO = "goTo"


class TransitionOutcome(str, Enum):
    """Result of a guarded transition."""
    APPLIED = "applied"
    ABORTED = "aborted"


@dataclass(frozen=True)
class TransitionRequest:
    """An attempted move; lives for one guarded execution only."""
    direction: Direction
    target_id: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "direction", Direction(self.direction))
        if self.direction is Direction.GO_TO and not self.target_id:
            raise ValueError("A goTo transition requires a target step id")


def _is_reserved_field(key: Any) -> bool:
    """Check if a payload key would be unreadable as a Step attribute."""
    if not isinstance(key, str) or key.startswith("_"):
        return True
    return key in ("id", "fields") or hasattr(Step, key)
