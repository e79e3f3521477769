"""Tests for SubmissionGateway and RequestsTransport."""

import json
from unittest.mock import Mock, patch

import pytest
import requests

from class_registration.config import RegistrationConfig
from class_registration.core.models.outcome import ErrorCategory, OutcomeKind
from class_registration.submission.gateway import (
    CONNECTION_ERROR_MESSAGE,
    RequestsTransport,
    SubmissionGateway,
    classify_failure,
)


class TestSubmissionGatewaySerialization:
    def test_body_is_json_of_values(self, selected_form, make_transport):
        transport = make_transport()
        gateway = SubmissionGateway(transport)
        selected_form.set_field_value("round1_student1_name", "Alice")

        gateway.submit(selected_form.payload())

        assert len(transport.sent) == 1
        body = json.loads(transport.sent[0])
        assert body == selected_form.values
        assert body["class"] == "3"
        assert body["program"] == "Program Name"
        assert body["round1_student1_name"] == "Alice"
        assert all(isinstance(v, str) for v in body.values())

    def test_body_keys(self, selected_form, make_transport):
        transport = make_transport()
        SubmissionGateway(transport).submit(selected_form.payload())

        keys = set(json.loads(transport.sent[0]))
        expected = {"class", "program", "round1_student1_name", "round1_student2_name"}
        expected.update(f"round{r}_student1_name" for r in range(2, 10))
        assert keys == expected


class TestSubmissionGatewayOutcomes:
    def test_clean_settle_is_success(self, selected_form, make_transport):
        outcome = SubmissionGateway(make_transport()).submit(selected_form.payload())

        assert outcome.kind is OutcomeKind.SUCCESS
        assert outcome.message == "Registration submitted for Class 3."

    def test_failed_to_fetch_is_connectivity(self, selected_form, make_transport):
        transport = make_transport(error=RuntimeError("TypeError: Failed to fetch"))

        outcome = SubmissionGateway(transport).submit(selected_form.payload())

        assert outcome.kind is OutcomeKind.ERROR
        assert outcome.category is ErrorCategory.CONNECTIVITY
        assert "Could not reach" in outcome.message
        assert "access policy" in outcome.message

    def test_requests_connection_error_is_connectivity(self, selected_form, make_transport):
        transport = make_transport(error=requests.ConnectionError("Name or service not known"))

        outcome = SubmissionGateway(transport).submit(selected_form.payload())

        assert outcome.category is ErrorCategory.CONNECTIVITY
        assert outcome.message == CONNECTION_ERROR_MESSAGE

    def test_other_error_echoes_description(self, selected_form, make_transport):
        transport = make_transport(error=ValueError("payload too large"))

        outcome = SubmissionGateway(transport).submit(selected_form.payload())

        assert outcome.category is ErrorCategory.GENERIC
        assert outcome.message == "Error: payload too large"


class TestClassifyFailure:
    @pytest.mark.parametrize("error", [
        requests.ConnectionError("refused"),
        ConnectionRefusedError("refused"),
        OSError("Could not reach host"),
        Exception("Failed to fetch"),
        RuntimeError("COULD NOT REACH the endpoint"),
        requests.ConnectTimeout("connect timed out"),
    ])
    def test_connectivity(self, error):
        assert classify_failure(error).category is ErrorCategory.CONNECTIVITY

    @pytest.mark.parametrize("error", [
        requests.Timeout("read timed out"),
        RuntimeError("boom"),
        KeyError("class"),
    ])
    def test_generic(self, error):
        outcome = classify_failure(error)
        assert outcome.category is ErrorCategory.GENERIC
        assert outcome.message.startswith("Error: ")


class TestRequestsTransport:
    @patch("class_registration.submission.gateway.requests.Session.post")
    def test_posts_body_without_inspecting_response(self, mock_post):
        """The response is closed, never checked for status or read."""
        mock_response = Mock()
        mock_post.return_value = mock_response

        transport = RequestsTransport("https://example.com/exec")
        transport.send('{"class": "3"}')

        mock_post.assert_called_once_with(
            "https://example.com/exec", data='{"class": "3"}', timeout=None
        )
        mock_response.raise_for_status.assert_not_called()
        mock_response.json.assert_not_called()
        mock_response.close.assert_called_once()

    @patch("class_registration.submission.gateway.requests.Session.post")
    def test_http_error_status_still_settles(self, mock_post):
        mock_response = Mock(status_code=500)
        mock_post.return_value = mock_response

        outcome = SubmissionGateway(RequestsTransport("https://example.com/exec")).submit({"class": "1"})

        assert outcome.kind is OutcomeKind.SUCCESS

    @patch("class_registration.submission.gateway.requests.Session.post")
    def test_connection_error_propagates(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("unreachable")

        transport = RequestsTransport("https://example.com/exec")
        with pytest.raises(requests.ConnectionError):
            transport.send("{}")

    def test_from_config(self):
        config = RegistrationConfig(endpoint_url="https://example.com/exec", timeout=5.0)
        transport = RequestsTransport.from_config(config)
        assert transport.endpoint_url == "https://example.com/exec"
        assert transport.timeout == 5.0
        assert isinstance(transport.session, requests.Session)

    def test_injected_session(self):
        session = Mock()
        transport = RequestsTransport("https://example.com/exec", session=session)
        transport.send("{}")
        session.post.assert_called_once()
