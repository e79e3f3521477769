"""
Module: submission.gateway

Purpose:
    Send the registration values to the spreadsheet endpoint and classify
    what happened.

    The endpoint is a web app that only works in opaque-response mode:
    the caller never learns the HTTP status or body. A call that
    completes without raising is therefore reported as success, and a
    remote-side rejection cannot be detected.

Key Classes:
    - Transport: Capability interface ``send(payload) -> None``
    - RequestsTransport: Production transport using requests
    - SubmissionGateway: Serialize, send, classify

Used By:
    - submission.flow.SubmitFlow
"""

from __future__ import annotations

import json
import logging
from typing import Mapping, Optional, Protocol

import requests

from class_registration.config import RegistrationConfig
from class_registration.core.models.outcome import ErrorCategory, SubmissionOutcome

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = (
    "Connection Error: Could not reach the registration endpoint (network/access policy). "
    'Ensure the endpoint is deployed with access set to "Anyone".'
)

# Lowercase description fragments that mean the request never reached the endpoint
CONNECTIVITY_MARKERS = ("failed to fetch", "could not reach")


class Transport(Protocol):
    """Sends a serialized payload. Settles with None or raises."""

    def send(self, payload: str) -> None:
        ...


class RequestsTransport:
    """
    POST transport backed by a requests.Session.

    The response is deliberately not inspected: no raise_for_status and
    no body access, matching the endpoint's opaque deployment.

    Example:
        >>> transport = RequestsTransport("https://example.com/exec")
        >>> transport.send('{"class": "3"}')
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: RegistrationConfig) -> RequestsTransport:
        return cls(config.endpoint_url, timeout=config.timeout)

    def send(self, payload: str) -> None:
        response = self.session.post(self.endpoint_url, data=payload, timeout=self.timeout)
        # Close without reading; the body is not ours to interpret
        response.close()


def is_connectivity_failure(error: BaseException) -> bool:
    """True when the request could never be delivered to the endpoint."""
    if isinstance(error, (requests.ConnectionError, ConnectionError)):
        return True
    description = str(error).lower()
    return any(marker in description for marker in CONNECTIVITY_MARKERS)


def classify_failure(error: BaseException) -> SubmissionOutcome:
    """Map a raised failure to an ERROR outcome."""
    if is_connectivity_failure(error):
        return SubmissionOutcome.error(CONNECTION_ERROR_MESSAGE, ErrorCategory.CONNECTIVITY)
    return SubmissionOutcome.error(f"Error: {error}", ErrorCategory.GENERIC)


class SubmissionGateway:
    """
    Serialize form values and hand them to a Transport.

    Args:
        transport: Where the JSON body is sent
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    def submit(self, values: Mapping[str, str]) -> SubmissionOutcome:
        """
        Send the values map as a JSON object.

        Args:
            values: Flat string map including ``class`` and ``program``

        Returns:
            SUCCESS if the transport settled, otherwise a classified ERROR
        """
        body = json.dumps(dict(values))
        class_id = values.get("class", "?")
        logger.info(f"Submitting registration for class {class_id} ({len(values)} keys)")

        try:
            self.transport.send(body)
        except Exception as e:
            outcome = classify_failure(e)
            logger.warning(f"Submission failed ({outcome.category.value}): {e}")
            return outcome

        logger.info(f"Submission for class {class_id} dispatched")
        return SubmissionOutcome.success(f"Registration submitted for Class {class_id}.")
