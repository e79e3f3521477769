"""
Main Window for the Class Registration form.
"""
import logging
import queue
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QComboBox,
    QPushButton, QScrollArea, QFrame
)
from PySide6.QtCore import Qt, QSize, QTimer

from class_registration.core.form_state import RegistrationForm
from class_registration.core.models.outcome import SubmissionOutcome
from class_registration.submission.flow import SubmitFlow, SubmitState
from class_registration.gui.styles.theme import Colors, Fonts, Styles, apply_shadow
from class_registration.gui.utils.icons import MaterialIcons
from class_registration.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler
from class_registration.gui.widgets.console_widget import ConsoleWidget
from class_registration.gui.widgets.details_card import DetailsCard
from class_registration.gui.widgets.round_card import RoundCard
from class_registration.gui.widgets.status_banner import StatusBanner

logger = logging.getLogger(__name__)

CLASS_PLACEHOLDER = "-- Choose a Class --"
SUBMIT_TEXT = "Submit Registration"
SUBMITTING_TEXT = "Submitting..."


class RegistrationWindow(QMainWindow):
    """
    Single-page registration form.

    The form controller and the submit flow are injected by the
    composition root (gui.app.run) so tests can drive the window with
    a fake gateway.
    """

    def __init__(self, form: RegistrationForm, flow: SubmitFlow, log_queue: Optional[queue.Queue] = None):
        super().__init__()
        self.form = form
        self.flow = flow
        self.round_cards: List[RoundCard] = []
        self._required_warning_shown = False

        self.setWindowTitle("Student Registration")
        self.resize(900, 860)
        self.setMinimumSize(640, 560)

        # Initialize Logging
        self.log_queue = log_queue or queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # Central scroll area
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        self.setCentralWidget(scroll)

        container = QWidget()
        scroll.setWidget(container)
        outer = QHBoxLayout(container)
        outer.setContentsMargins(24, 32, 24, 32)

        self.page = QFrame()
        self.page.setObjectName("card")
        self.page.setStyleSheet(Styles.CARD)
        self.page.setMaximumWidth(860)
        apply_shadow(self.page)
        outer.addWidget(self.page)

        self.page_layout = QVBoxLayout(self.page)
        self.page_layout.setContentsMargins(32, 32, 32, 32)
        self.page_layout.setSpacing(24)

        self._build_header()
        self._build_class_selector()

        self.details_card = DetailsCard()
        self.page_layout.addWidget(self.details_card)

        self._build_rounds_section()
        self._build_submit_row()

        self.status_banner = StatusBanner()
        self.page_layout.addWidget(self.status_banner)

        self.console = ConsoleWidget()
        self.page_layout.addWidget(self.console)
        self.page_layout.addStretch()

        # Wiring
        self.form.add_listener(self._on_form_changed)
        self.flow.state_changed.connect(self._on_flow_state_changed)
        self.flow.outcome_cleared.connect(self.status_banner.clear)
        self.flow.outcome_ready.connect(self._on_outcome_ready)

        self._on_form_changed(self.form)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _build_header(self) -> None:
        header = QVBoxLayout()
        header.setSpacing(6)

        badge = QLabel()
        badge.setFixedSize(64, 64)
        badge.setAlignment(Qt.AlignmentFlag.AlignCenter)
        badge.setStyleSheet(f"background-color: {Colors.SELECTION_BG}; border-radius: 32px;")
        badge.setPixmap(MaterialIcons.school().pixmap(QSize(32, 32)))
        header.addWidget(badge, alignment=Qt.AlignmentFlag.AlignHCenter)

        title = QLabel("Student Registration")
        title.setObjectName("mainTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.addWidget(title)

        subtitle = QLabel("Enroll students into programs by class")
        subtitle.setObjectName("mainSubtitle")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.addWidget(subtitle)

        self.page_layout.addLayout(header)

    def _build_class_selector(self) -> None:
        section = QVBoxLayout()
        section.setSpacing(8)

        label = QLabel("Select Academic Class")
        label.setStyleSheet(f"font-weight: {Fonts.WEIGHT_BOLD};")
        section.addWidget(label)

        self.class_combo = QComboBox()
        self.class_combo.setStyleSheet(Styles.COMBOBOX)
        self.class_combo.addItem(CLASS_PLACEHOLDER, None)
        for option in self.form.classes:
            self.class_combo.addItem(option.name, option.id)
        self.class_combo.currentIndexChanged.connect(self._on_class_changed)
        section.addWidget(self.class_combo)

        self.page_layout.addLayout(section)

    def _build_rounds_section(self) -> None:
        self.rounds_section = QWidget()
        rounds_layout = QVBoxLayout(self.rounds_section)
        rounds_layout.setContentsMargins(0, 0, 0, 0)
        rounds_layout.setSpacing(16)

        heading = QHBoxLayout()
        icon = QLabel()
        icon.setPixmap(MaterialIcons.account_group().pixmap(QSize(20, 20)))
        heading.addWidget(icon)
        heading_label = QLabel("Student Details by Round")
        heading_label.setStyleSheet(f"font-size: {Fonts.H2}; font-weight: {Fonts.WEIGHT_BOLD};")
        heading.addWidget(heading_label)
        heading.addStretch()
        rounds_layout.addLayout(heading)

        self.rounds_container = QVBoxLayout()
        self.rounds_container.setSpacing(16)
        rounds_layout.addLayout(self.rounds_container)

        self.rounds_section.hide()
        self.page_layout.addWidget(self.rounds_section)

    def _build_submit_row(self) -> None:
        self.submit_btn = QPushButton(SUBMIT_TEXT)
        self.submit_btn.setIcon(MaterialIcons.send())
        self.submit_btn.setStyleSheet(Styles.BUTTON_PRIMARY)
        self.submit_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        self.submit_btn.clicked.connect(self._on_submit_clicked)
        self.page_layout.addWidget(self.submit_btn)

    # ------------------------------------------------------------------
    # Form events
    # ------------------------------------------------------------------

    def _on_class_changed(self, index: int) -> None:
        self.form.select_class(self.class_combo.itemData(index))

    def _on_form_changed(self, form: RegistrationForm) -> None:
        """Rebuild the round cards from the freshly derived fields."""
        for card in self.round_cards:
            self.rounds_container.removeWidget(card)
            card.deleteLater()
        self.round_cards = []

        if self._required_warning_shown:
            self.status_banner.clear()
            self._required_warning_shown = False

        for group in form.group_fields_by_round():
            card = RoundCard(group)
            card.value_edited.connect(self._on_value_edited)
            self.rounds_container.addWidget(card)
            self.round_cards.append(card)

        self.rounds_section.setVisible(bool(self.round_cards))
        self.details_card.update_details(form.selected_class, form.program_name, len(form.fields))
        self._refresh_submit_button()

    def _on_value_edited(self, key: str, text: str) -> None:
        self.form.set_field_value(key, text)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def _on_submit_clicked(self) -> None:
        """Handle Submit Registration button click."""
        if not self.flow.can_submit:
            return

        missing = self.form.empty_fields()
        if missing:
            self._mark_missing([slot.value_key for slot in missing])
            noun = "name" if len(missing) == 1 else "names"
            message = f"Please fill in every student name ({len(missing)} {noun} missing)."
            logger.warning(f"Submit blocked: {len(missing)} required {noun} empty")
            self.status_banner.show_error(message)
            self._required_warning_shown = True
            return

        self._required_warning_shown = False
        self.flow.submit()

    def _mark_missing(self, keys: List[str]) -> None:
        first_input = None
        for card in self.round_cards:
            for key in card.inputs:
                card.set_invalid(key, key in keys)
                if key in keys and first_input is None:
                    first_input = card.input_for(key)
        if first_input is not None:
            first_input.setFocus()

    def _on_flow_state_changed(self, state: SubmitState) -> None:
        if state is SubmitState.SUBMITTING:
            self.submit_btn.setText(SUBMITTING_TEXT)
            self.submit_btn.setIcon(MaterialIcons.loading())
        else:
            self.submit_btn.setText(SUBMIT_TEXT)
            self.submit_btn.setIcon(MaterialIcons.send())
        self._refresh_submit_button()

    def _on_outcome_ready(self, outcome: SubmissionOutcome) -> None:
        self.status_banner.show_outcome(outcome)
        self._refresh_submit_button()

    def _refresh_submit_button(self) -> None:
        self.submit_btn.setEnabled(self.flow.can_submit)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def _drain_log_queue(self):
        while True:
            try:
                msg = self.log_queue.get_nowait()
                if isinstance(msg, tuple) and len(msg) == 2:
                    text, level = msg
                    self.console.append_log(level, text)
                else:
                    self.console.append_log("INFO", str(msg))
                self.log_queue.task_done()
            except queue.Empty:
                break

    def closeEvent(self, event):
        self.log_timer.stop()
        detach_queue_handler(self._log_handler)
        super().closeEvent(event)
