"""
Module: fields

Purpose:
    FieldSlot and RoundGroup - the deterministic layout of student name
    inputs. Every class shares the same layout: round 1 holds two
    students, rounds 2-9 hold one each, ten slots in total.

Key Functions:
    - build_field_slots(): Ordered slots for a selected class
    - FieldSlot.value_key: Key used in the submitted values map

Used By:
    - core.form_state.RegistrationForm
    - gui.widgets.round_card.RoundCard
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

ROUND_COUNT = 9

# Round number -> number of student slots. Rounds not listed hold one.
STUDENTS_PER_ROUND: Dict[int, int] = {1: 2}

VALUE_KEY_SUFFIX = "_name"


@dataclass(frozen=True, slots=True)
class FieldSlot:
    """
    One named input position for a single student within a round.

    Attributes:
        identifier: ``round<N>_student<K>``
        round: Round number, 1..9
        slot_index: Position within the round, 0 or 1

    Example:
        >>> slot = FieldSlot.for_position(1, 1)
        >>> slot.identifier, slot.value_key
        ('round1_student2', 'round1_student2_name')
    """

    identifier: str
    round: int
    slot_index: int

    def __post_init__(self) -> None:
        if not 1 <= self.round <= ROUND_COUNT:
            raise ValueError(f"Round must be between 1 and {ROUND_COUNT}: {self.round}")
        if self.slot_index not in (0, 1):
            raise ValueError(f"Slot index must be 0 or 1: {self.slot_index}")

    @classmethod
    def for_position(cls, round_number: int, slot_index: int) -> FieldSlot:
        return cls(
            identifier=f"round{round_number}_student{slot_index + 1}",
            round=round_number,
            slot_index=slot_index,
        )

    @property
    def value_key(self) -> str:
        """Key under which this slot's text is stored and submitted."""
        return f"{self.identifier}{VALUE_KEY_SUFFIX}"

    @property
    def label(self) -> str:
        return f"Student {self.slot_index + 1} Name"


@dataclass(frozen=True, slots=True)
class RoundGroup:
    """Display grouping of the slots belonging to one round."""

    round: int
    fields: Tuple[FieldSlot, ...]

    @property
    def title(self) -> str:
        count = len(self.fields)
        noun = "Student" if count == 1 else "Students"
        return f"Round {self.round} - {count} {noun}"


def students_in_round(round_number: int) -> int:
    return STUDENTS_PER_ROUND.get(round_number, 1)


def build_field_slots() -> Tuple[FieldSlot, ...]:
    """
    Build the ordered slot layout used for every class.

    Order is significant for display: round 1 student 1, round 1
    student 2, then student 1 of rounds 2 through 9.

    Returns:
        Tuple of ten FieldSlot values
    """
    return tuple(
        FieldSlot.for_position(round_number, slot_index)
        for round_number in range(1, ROUND_COUNT + 1)
        for slot_index in range(students_in_round(round_number))
    )
