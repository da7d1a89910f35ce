"""
Value objects for Task Bank.

Value objects are immutable types defined by their attributes rather
than identity. Two value objects with the same attributes are equal.
"""

from src.domain.value_objects.field_patch import FieldPatch, PatchState

__all__: list[str] = ["FieldPatch", "PatchState"]
