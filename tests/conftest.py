import os
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import class_registration
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from class_registration.core.form_state import RegistrationForm
from class_registration.core.models.outcome import SubmissionOutcome


class RecordingTransport:
    """Transport double: records payloads, optionally raises."""

    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send(self, payload: str) -> None:
        self.sent.append(payload)
        if self.error is not None:
            raise self.error


class StubGateway:
    """Gateway double returning a fixed outcome and counting calls."""

    def __init__(self, outcome=None):
        self.outcome = outcome or SubmissionOutcome.success("Registration submitted for Class 1.")
        self.calls = []

    def submit(self, values):
        self.calls.append(dict(values))
        return self.outcome


# Common test fixtures
@pytest.fixture
def form():
    """Return a form with the default catalog."""
    return RegistrationForm()


@pytest.fixture
def selected_form(form):
    """Return a form with class 3 selected."""
    form.select_class(3)
    return form


def fill_all(form, prefix="Student"):
    for i, slot in enumerate(form.fields, start=1):
        form.set_field_value(slot.value_key, f"{prefix} {i}")


@pytest.fixture
def make_transport():
    return RecordingTransport


@pytest.fixture
def make_gateway():
    return StubGateway


@pytest.fixture
def fill_form():
    return fill_all
