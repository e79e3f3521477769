"""
Inline status banner shown below the submit button after an attempt.
"""
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel
from PySide6.QtCore import Qt, QSize

from class_registration.core.models.outcome import SubmissionOutcome
from class_registration.gui.styles.theme import Styles
from class_registration.gui.utils.icons import MaterialIcons


class StatusBanner(QFrame):
    """Green success or red error message with a leading icon."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("statusBanner")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)

        self.icon_label = QLabel()
        self.icon_label.setFixedSize(20, 20)
        layout.addWidget(self.icon_label, alignment=Qt.AlignmentFlag.AlignTop)

        self.message_label = QLabel()
        self.message_label.setWordWrap(True)
        self.message_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.message_label, stretch=1)

        self.kind = None
        self.hide()

    def show_outcome(self, outcome: SubmissionOutcome) -> None:
        if outcome.is_success:
            self._show("success", outcome.message)
        else:
            self._show("error", outcome.message)

    def show_error(self, message: str) -> None:
        self._show("error", message)

    def clear(self) -> None:
        self.kind = None
        self.message_label.clear()
        self.hide()

    def message(self) -> str:
        return self.message_label.text()

    def _show(self, kind: str, message: str) -> None:
        self.kind = kind
        if kind == "success":
            icon = MaterialIcons.check_circle()
            self.setStyleSheet(Styles.BANNER_SUCCESS)
        else:
            icon = MaterialIcons.alert_circle()
            self.setStyleSheet(Styles.BANNER_ERROR)
        self.icon_label.setPixmap(icon.pixmap(QSize(20, 20)))
        self.message_label.setText(message)
        self.show()
