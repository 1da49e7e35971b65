"""
Tests for `lambda_function.py` – the Lambda entry point.

The module-level router is replaced with one backed by the in-memory device source, so
the handler runs the full routing, discovery and translation path without network access.
"""

from unittest.mock import MagicMock, patch

import lambda_function
from core.skill import SkillRouter
from provider_api import CloudAPIStatusError, MockProviderClient


@patch("lambda_function._router", SkillRouter(MockProviderClient()))
def test_discovery_returns_endpoints(discovery_event):
    response = lambda_function.lambda_handler(discovery_event, None)

    endpoints = response["event"]["payload"]["endpoints"]
    assert len(endpoints) > 0
    for endpoint in endpoints:
        assert endpoint["endpointId"] is not None
        assert len(endpoint["capabilities"]) > 0


def test_rejected_token_returns_error_response(event_factory):
    device_source = MagicMock()
    device_source.get_devices.side_effect = CloudAPIStatusError(403)
    event = event_factory(correlationToken="corr-9")

    with patch("lambda_function._router", SkillRouter(device_source)):
        response = lambda_function.lambda_handler(event, None)

    assert response["event"]["header"]["name"] == "ErrorResponse"
    assert response["event"]["header"]["correlationToken"] == "corr-9"
    assert response["event"]["payload"]["type"] == "INVALID_AUTHORIZATION_CREDENTIAL"
    assert "403" in response["event"]["payload"]["message"]


def test_router_is_built_once():
    with patch("lambda_function._router", None), \
            patch("lambda_function.make_provider_client", return_value=MockProviderClient()) as mock_factory:
        first = lambda_function.get_router()
        second = lambda_function.get_router()

    assert first is second
    mock_factory.assert_called_once()
