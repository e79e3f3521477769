"""
Module: core.form_state

Purpose:
    RegistrationForm - the single mutable aggregate of the application.
    Keeps the derived field slots and the values map consistent with the
    selected class.

Key Classes:
    - RegistrationForm: Form state controller
    - RoundGrouping: Restartable view of the slots grouped by round

Used By:
    - submission.flow.SubmitFlow
    - gui.main_window.RegistrationWindow
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from class_registration.config import DEFAULT_CLASSES, DEFAULT_PROGRAM_NAME
from class_registration.core.models.catalog import ClassOption, find_class
from class_registration.core.models.fields import (
    FieldSlot,
    RoundGroup,
    ROUND_COUNT,
    build_field_slots,
)
from class_registration.errors import UnknownClassError

logger = logging.getLogger(__name__)

FormListener = Callable[["RegistrationForm"], None]


class RoundGrouping:
    """
    Lazy, restartable sequence of RoundGroup for rounds 1 through 9.

    Each iteration walks the captured slots again, so the same grouping
    can be rendered any number of times.
    """

    def __init__(self, fields: Tuple[FieldSlot, ...]):
        self._fields = fields

    def __iter__(self) -> Iterator[RoundGroup]:
        if not self._fields:
            return
        for round_number in range(1, ROUND_COUNT + 1):
            yield RoundGroup(
                round=round_number,
                fields=tuple(f for f in self._fields if f.round == round_number),
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RoundGrouping):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"RoundGrouping({len(self._fields)} fields)"


class RegistrationForm:
    """
    Form state controller.

    Owns the selected class, the derived field slots and the value of
    every field. Changing the class is a full replace: anything typed
    under the previous class is discarded.

    Attributes:
        classes: Class catalog the selection is checked against
        program_name: Constant program name sent with every class

    Example:
        >>> form = RegistrationForm()
        >>> form.select_class(3)
        >>> form.values["class"], len(form.fields)
        ('3', 10)
        >>> form.set_field_value("round1_student1_name", "Alice")
    """

    CLASS_KEY = "class"
    PROGRAM_KEY = "program"

    def __init__(
        self,
        classes: Sequence[ClassOption] = DEFAULT_CLASSES,
        program_name: str = DEFAULT_PROGRAM_NAME,
    ) -> None:
        self.classes: Tuple[ClassOption, ...] = tuple(classes)
        self.program_name = program_name
        self._selected_class_id: Optional[int] = None
        self._fields: Tuple[FieldSlot, ...] = ()
        self._values: Dict[str, str] = {}
        self._listeners: List[FormListener] = []

    @property
    def selected_class_id(self) -> Optional[int]:
        return self._selected_class_id

    @property
    def selected_class(self) -> Optional[ClassOption]:
        if self._selected_class_id is None:
            return None
        return find_class(self.classes, self._selected_class_id)

    @property
    def has_class(self) -> bool:
        return self._selected_class_id is not None

    @property
    def fields(self) -> Tuple[FieldSlot, ...]:
        return self._fields

    @property
    def values(self) -> Dict[str, str]:
        """Read-only snapshot of the current values."""
        return dict(self._values)

    def add_listener(self, listener: FormListener) -> None:
        """Register a callable notified after every class change."""
        self._listeners.append(listener)

    def select_class(self, class_id: Union[int, str, None]) -> None:
        """
        Select a class and rebuild fields and values.

        Args:
            class_id: Catalog id, its string form, or None/"" to clear

        Raises:
            UnknownClassError: If the id is not in the catalog
        """
        resolved = self._resolve_class_id(class_id)

        if resolved is None:
            self._selected_class_id = None
            self._fields = ()
            self._values = {}
            logger.info("Class selection cleared")
        else:
            fields = build_field_slots()
            values = {self.CLASS_KEY: str(resolved), self.PROGRAM_KEY: self.program_name}
            values.update((slot.value_key, "") for slot in fields)
            # Swap all three together so fields and values never disagree
            self._selected_class_id = resolved
            self._fields = fields
            self._values = values
            logger.info(f"Selected class {resolved} ({len(fields)} student fields)")

        for listener in list(self._listeners):
            listener(self)

    def set_field_value(self, identifier: str, text: str) -> None:
        """
        Store text for a field. No content validation is performed.

        Args:
            identifier: Value key such as ``round1_student1_name``
            text: New text, empty string allowed

        Raises:
            KeyError: If the key is not part of the current form
        """
        if identifier not in self._values:
            raise KeyError(f"No field {identifier!r} in the current form")
        self._values[identifier] = text

    def value_of(self, slot: FieldSlot) -> str:
        return self._values.get(slot.value_key, "")

    def group_fields_by_round(self) -> RoundGrouping:
        """Group the current slots by round for display. Pure."""
        return RoundGrouping(self._fields)

    def empty_fields(self) -> List[FieldSlot]:
        """Slots whose value is still the empty string."""
        return [slot for slot in self._fields if not self._values.get(slot.value_key)]

    def payload(self) -> Dict[str, str]:
        """Detached copy of the values map for transmission."""
        return dict(self._values)

    def _resolve_class_id(self, class_id: Union[int, str, None]) -> Optional[int]:
        if class_id is None or class_id == "":
            return None
        try:
            resolved = int(class_id)
        except (TypeError, ValueError):
            raise UnknownClassError(class_id) from None
        if find_class(self.classes, resolved) is None:
            raise UnknownClassError(class_id)
        return resolved
