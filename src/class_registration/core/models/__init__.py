"""
Core Models Package

Small immutable value types used by the form controller and the gateway.
The only mutable object in the application is RegistrationForm, which
lives in core.form_state and is built from these values.
"""

from .catalog import ClassOption
from .fields import FieldSlot, RoundGroup, build_field_slots, ROUND_COUNT, STUDENTS_PER_ROUND
from .outcome import SubmissionOutcome, OutcomeKind, ErrorCategory

__all__ = [
    "ClassOption",
    "FieldSlot",
    "RoundGroup",
    "build_field_slots",
    "ROUND_COUNT",
    "STUDENTS_PER_ROUND",
    "SubmissionOutcome",
    "OutcomeKind",
    "ErrorCategory",
]
