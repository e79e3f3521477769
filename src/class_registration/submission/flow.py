"""
Module: submission.flow

Purpose:
    SubmitFlow - the submit state machine sitting between the window,
    the form controller and the gateway.

    IDLE -> SUBMITTING -> SUCCESS | ERROR, where SUCCESS and ERROR stay
    until the next submit. The gateway call runs on a worker thread and
    reports back through a Qt signal, so all state changes happen on the
    UI thread. At most one submission is in flight.

Key Classes:
    - SubmitState: Flow states
    - SubmitFlow: QObject orchestrating one submission at a time
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from class_registration.core.form_state import RegistrationForm
from class_registration.core.models.outcome import SubmissionOutcome
from class_registration.submission.gateway import SubmissionGateway

logger = logging.getLogger(__name__)


class SubmitState(Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class SubmitFlow(QObject):
    """
    Orchestrates submit attempts.

    Signals:
        state_changed(object): New SubmitState
        outcome_cleared(): Previous status message should disappear
        outcome_ready(object): SubmissionOutcome of the finished attempt
    """

    state_changed = Signal(object)
    outcome_cleared = Signal()
    outcome_ready = Signal(object)

    # Worker thread -> UI thread
    _attempt_finished = Signal(object)

    def __init__(self, form: RegistrationForm, gateway: SubmissionGateway, parent=None):
        super().__init__(parent)
        self.form = form
        self.gateway = gateway
        self._state = SubmitState.IDLE
        self._outcome: Optional[SubmissionOutcome] = None
        self._worker: Optional[threading.Thread] = None
        self._attempt_finished.connect(self._finish_attempt)

    @property
    def state(self) -> SubmitState:
        return self._state

    @property
    def outcome(self) -> Optional[SubmissionOutcome]:
        return self._outcome

    @property
    def is_submitting(self) -> bool:
        return self._state is SubmitState.SUBMITTING

    @property
    def can_submit(self) -> bool:
        """A class must be selected and nothing may be in flight."""
        return self.form.has_class and not self.is_submitting

    def submit(self) -> bool:
        """
        Start a submission if allowed.

        Returns:
            True if an attempt was started, False if it was refused
        """
        if not self.form.has_class:
            logger.info("Submit ignored: no class selected")
            return False
        if self.is_submitting:
            logger.info("Submit ignored: a submission is already in flight")
            return False

        self._outcome = None
        self.outcome_cleared.emit()
        self._set_state(SubmitState.SUBMITTING)

        # Snapshot on the UI thread; the worker never touches the form
        payload = self.form.payload()

        def run_submission(values):
            try:
                outcome = self.gateway.submit(values)
            except Exception as e:
                logger.exception("Unexpected error during submission")
                outcome = SubmissionOutcome.error(f"Error: {e}")
            # Always report back so the submit button is re-enabled
            self._attempt_finished.emit(outcome)

        self._worker = threading.Thread(
            target=run_submission, args=(payload,), name="registration-submit", daemon=True
        )
        self._worker.start()
        return True

    def _finish_attempt(self, outcome: SubmissionOutcome) -> None:
        self._worker = None
        self._outcome = outcome
        self._set_state(SubmitState.SUCCESS if outcome.is_success else SubmitState.ERROR)
        if outcome.is_success:
            logger.info(outcome.message)
        else:
            logger.warning(outcome.message)
        self.outcome_ready.emit(outcome)

    def _set_state(self, state: SubmitState) -> None:
        if state is self._state:
            return
        self._state = state
        self.state_changed.emit(state)
