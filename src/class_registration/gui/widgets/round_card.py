"""
Round card: one rounded panel per round holding a name input per student.
"""
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit
)
from PySide6.QtCore import Qt, Signal

from class_registration.core.models.fields import RoundGroup
from class_registration.gui.styles.theme import Colors, Fonts, Styles
from class_registration.gui.utils.icons import MaterialIcons


class RoundCard(QFrame):
    """Inputs for every student slot of a single round."""

    # value key, text
    value_edited = Signal(str, str)

    def __init__(self, group: RoundGroup, parent=None):
        super().__init__(parent)
        self.group = group
        self.inputs: Dict[str, QLineEdit] = {}

        self.setObjectName("roundCard")
        self.setStyleSheet(Styles.ROUND_CARD + Styles.INPUT_FIELD)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 20)
        layout.setSpacing(12)

        # Heading: numbered badge + title
        heading = QHBoxLayout()
        heading.setSpacing(10)
        badge = QLabel(str(group.round))
        badge.setFixedSize(28, 28)
        badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
        badge.setStyleSheet(
            f"background-color: {Colors.BORDER}; border-radius: 14px; "
            f"color: {Colors.TEXT_SECONDARY}; font-weight: {Fonts.WEIGHT_BOLD};"
        )
        heading.addWidget(badge)
        self.title_label = QLabel(group.title)
        self.title_label.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-weight: {Fonts.WEIGHT_BOLD};")
        heading.addWidget(self.title_label)
        heading.addStretch()
        layout.addLayout(heading)

        grid = QGridLayout()
        grid.setHorizontalSpacing(12)
        grid.setVerticalSpacing(12)
        for column, slot in enumerate(group.fields):
            slot_frame = QFrame()
            slot_frame.setObjectName("slotCard")
            slot_layout = QVBoxLayout(slot_frame)
            slot_layout.setContentsMargins(12, 10, 12, 12)
            slot_layout.setSpacing(4)

            label = QLabel(slot.label.upper())
            label.setStyleSheet(
                f"color: {Colors.TEXT_SECONDARY}; font-size: {Fonts.SMALL}; font-weight: {Fonts.WEIGHT_BOLD};"
            )
            slot_layout.addWidget(label)

            edit = QLineEdit()
            edit.setObjectName(slot.value_key)
            edit.setPlaceholderText("Enter name")
            edit.addAction(MaterialIcons.account(), QLineEdit.ActionPosition.LeadingPosition)
            edit.textEdited.connect(lambda text, key=slot.value_key: self._on_text_edited(key, text))
            slot_layout.addWidget(edit)

            self.inputs[slot.value_key] = edit
            grid.addWidget(slot_frame, 0, column)
        layout.addLayout(grid)

    def _on_text_edited(self, key: str, text: str) -> None:
        self.set_invalid(key, False)
        self.value_edited.emit(key, text)

    def set_invalid(self, key: str, invalid: bool) -> None:
        edit = self.inputs.get(key)
        if edit is None:
            return
        edit.setStyleSheet(Styles.INPUT_FIELD_INVALID if invalid else "")

    def input_for(self, key: str) -> Optional[QLineEdit]:
        return self.inputs.get(key)
