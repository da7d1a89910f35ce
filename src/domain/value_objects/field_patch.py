"""Tri-state patch value for optional task fields.

A partial update has to tell three situations apart for a nullable field:

- NOT_PROVIDED: the caller did not mention the field, keep the current value
- CLEARED: the caller explicitly sent null, reset the field to None
- SET: the caller sent a concrete value

A plain ``Optional`` cannot carry this (None would mean both "not provided"
and "cleared"), so FieldPatch tags the state explicitly. Conversion from
inbound mappings uses key presence, never a comparison against a default.

Usage:
    patch = FieldPatch.from_mapping(payload, "max_points_override", "maxPointsOverride")
    task.max_points_override = patch.apply(task.max_points_override)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class PatchState(str, Enum):
    """State of a FieldPatch."""

    NOT_PROVIDED = "not_provided"
    CLEARED = "cleared"
    SET = "set"


@dataclass(frozen=True, eq=True)
class FieldPatch(Generic[T]):
    """Tagged patch for a nullable field: not provided, cleared or set.

    Attributes:
        state: Which of the three states this patch is in.
        value: The new value. Only meaningful when state is SET.
    """

    state: PatchState = PatchState.NOT_PROVIDED
    value: Optional[T] = None

    def __post_init__(self) -> None:
        """Validate state/value consistency.

        Raises:
            ValueError: If a non-SET patch carries a value, or a SET patch has none.
        """
        if self.state is PatchState.SET and self.value is None:
            raise ValueError("SET patch requires a value; use FieldPatch.cleared() for null")
        if self.state is not PatchState.SET and self.value is not None:
            raise ValueError(f"{self.state.value} patch cannot carry a value")

    @classmethod
    def not_provided(cls) -> FieldPatch[T]:
        """Patch that leaves the field untouched."""
        return cls(PatchState.NOT_PROVIDED)

    @classmethod
    def cleared(cls) -> FieldPatch[T]:
        """Patch that resets the field to None."""
        return cls(PatchState.CLEARED)

    @classmethod
    def set_to(cls, value: T) -> FieldPatch[T]:
        """Patch that assigns a concrete value.

        Args:
            value: The new field value. Must not be None.
        """
        return cls(PatchState.SET, value)

    @classmethod
    def from_value(cls, value: Optional[T]) -> FieldPatch[T]:
        """Build a patch for a value that is known to be present.

        None maps to CLEARED, anything else to SET.
        """
        if value is None:
            return cls.cleared()
        return cls.set_to(value)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any], *keys: str) -> FieldPatch[Any]:
        """Build a patch from an inbound mapping using key presence.

        The first key found in ``payload`` wins. A key present with a None
        value yields CLEARED; an absent key yields NOT_PROVIDED.

        Args:
            payload: Inbound partial-update mapping.
            *keys: Accepted spellings of the field, checked in order.

        Returns:
            FieldPatch reflecting the key's presence and value.
        """
        for key in keys:
            if key in payload:
                return cls.from_value(payload[key])
        return cls.not_provided()

    @property
    def is_provided(self) -> bool:
        """True when the patch changes the field (CLEARED or SET)."""
        return self.state is not PatchState.NOT_PROVIDED

    def apply(self, current: Optional[T]) -> Optional[T]:
        """Resolve the field value after applying this patch.

        Args:
            current: The field's current value.

        Returns:
            ``current`` when not provided, None when cleared, else the new value.
        """
        if self.state is PatchState.NOT_PROVIDED:
            return current
        if self.state is PatchState.CLEARED:
            return None
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for logging.

        Returns:
            Dictionary with the state and, for SET patches, the value.
        """
        data: dict[str, Any] = {"state": self.state.value}
        if self.state is PatchState.SET:
            data["value"] = self.value
        return data
