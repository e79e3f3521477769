"""
Module: catalog

Purpose:
    ClassOption value type for the fixed list of selectable classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True, slots=True)
class ClassOption:
    """
    One selectable class.

    Attributes:
        id: Positive class identifier, also sent as the ``class`` value
        name: Display name shown in the class selector

    Example:
        >>> ClassOption(3, "Class 3").name
        'Class 3'
    """

    id: int
    name: str

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValueError(f"Class id must be positive: {self.id}")
        if not self.name:
            raise ValueError("Class name cannot be empty")

    @classmethod
    def numbered(cls, count: int) -> Tuple[ClassOption, ...]:
        """Build ``Class 1`` … ``Class <count>`` with ids 1…count."""
        return tuple(cls(i, f"Class {i}") for i in range(1, count + 1))


def find_class(classes: Sequence[ClassOption], class_id: int) -> ClassOption | None:
    """Return the option with ``class_id`` or None."""
    for option in classes:
        if option.id == class_id:
            return option
    return None
