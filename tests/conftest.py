"""
Shared fixtures: a patched requests.get for the ExchangeRate-API client and a
helper that builds fake responses.
"""

from unittest.mock import Mock

import pytest
import requests


def make_response(payload=None, status_error=None, json_error=None) -> Mock:
    """Fake requests.Response: .json() returns `payload` unless `json_error` is set."""
    response = Mock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def mock_requests_get(mocker):
    return mocker.patch("forex_fetcher.api.exchangerate.requests.get")


@pytest.fixture
def http_404():
    return requests.HTTPError("404 Client Error: Not Found")
