"""
Core package: value models (core.models) and the form state controller
(core.form_state).

form_state is imported explicitly by callers since it depends on
class_registration.config, which itself depends on core.models.
"""

from .models import ClassOption, FieldSlot, RoundGroup, SubmissionOutcome, OutcomeKind

__all__ = [
    "ClassOption",
    "FieldSlot",
    "RoundGroup",
    "SubmissionOutcome",
    "OutcomeKind",
]
