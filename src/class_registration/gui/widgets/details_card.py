"""
Registration details card: selected class, program and student count.
"""
from typing import Optional

from PySide6.QtWidgets import QFrame, QHBoxLayout, QVBoxLayout, QLabel
from PySide6.QtCore import Qt

from class_registration.core.models.catalog import ClassOption
from class_registration.gui.styles.theme import Colors, Fonts, Styles


class DetailsCard(QFrame):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("detailsCard")
        self.setStyleSheet(Styles.DETAILS_CARD)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)

        text_col = QVBoxLayout()
        caption = QLabel("REGISTRATION DETAILS")
        caption.setStyleSheet(
            f"color: {Colors.PRIMARY_BLUE}; font-size: {Fonts.SMALL}; font-weight: {Fonts.WEIGHT_BOLD};"
        )
        text_col.addWidget(caption)
        self.summary_label = QLabel()
        self.summary_label.setStyleSheet(
            f"color: {Colors.PRIMARY_DARK}; font-size: {Fonts.H1}; font-weight: {Fonts.WEIGHT_BOLD};"
        )
        text_col.addWidget(self.summary_label)
        layout.addLayout(text_col, stretch=1)

        count_box = QFrame()
        count_box.setStyleSheet(f"background-color: {Colors.SURFACE}; border-radius: 8px;")
        count_layout = QVBoxLayout(count_box)
        count_layout.setContentsMargins(16, 8, 16, 8)
        total_caption = QLabel("Total Students")
        total_caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        total_caption.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: {Fonts.SMALL};")
        count_layout.addWidget(total_caption)
        self.count_label = QLabel("0")
        self.count_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.count_label.setStyleSheet(
            f"color: {Colors.PRIMARY_BLUE}; font-size: {Fonts.H1}; font-weight: {Fonts.WEIGHT_BOLD};"
        )
        count_layout.addWidget(self.count_label)
        layout.addWidget(count_box)

        self.hide()

    def update_details(self, selected: Optional[ClassOption], program_name: str, student_count: int) -> None:
        """Show the card for a selected class, hide it otherwise."""
        if selected is None:
            self.hide()
            return
        self.summary_label.setText(f"{selected.name} - {program_name}")
        self.count_label.setText(str(student_count))
        self.show()
