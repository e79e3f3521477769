"""
Submission package: the HTTP gateway and the submit state machine.

Key Classes:
    - SubmissionGateway, RequestsTransport (submission.gateway)
    - SubmitFlow, SubmitState (submission.flow)
"""

from .gateway import (
    SubmissionGateway,
    RequestsTransport,
    Transport,
    classify_failure,
    CONNECTION_ERROR_MESSAGE,
)
from .flow import SubmitFlow, SubmitState

__all__ = [
    "SubmissionGateway",
    "RequestsTransport",
    "Transport",
    "classify_failure",
    "CONNECTION_ERROR_MESSAGE",
    "SubmitFlow",
    "SubmitState",
]
