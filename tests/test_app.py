"""
End-to-end checks of app.py through Streamlit's AppTest harness, with
requests.get patched so nothing leaves the machine.
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import requests
from streamlit.testing.v1 import AppTest

from conftest import make_response

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    at.run()
    yield at
    if "runner" in at.session_state:
        at.session_state["runner"].wait_idle(timeout=5)


def _settle(at):
    """Let every background fetch finish, then redraw once."""
    at.session_state["runner"].wait_idle(timeout=5)
    at.run()


def _rate_lines(at):
    return [m.value for m in at.markdown if m.value.startswith("Rate:")]


def test_initial_render(app):
    assert not app.exception
    assert app.title[0].value == "Forex Rate Fetcher"
    assert app.selectbox(key="base_currency").value == "USD"
    assert app.selectbox(key="target_currency").value == "EUR"
    assert _rate_lines(app) == ["Rate: Not fetched"]


def test_fetch_rate_updates_label_and_keeps_it_on_failure(app, mock_requests_get):
    # Arrange
    mock_requests_get.return_value = make_response({"conversion_rates": {"EUR": 0.92}})
    app.text_input(key="api_key").input("secret")

    # Act: successful fetch
    app.button(key="fetch_rate").click().run()
    _settle(app)

    # Assert
    assert not app.exception
    assert _rate_lines(app) == ["Rate: 0.92"]
    assert mock_requests_get.call_args[0][0].endswith("/secret/latest/USD")

    # Act: the API now fails
    mock_requests_get.return_value = None
    mock_requests_get.side_effect = requests.ConnectionError("connection refused")
    app.button(key="fetch_rate").click().run()
    _settle(app)

    # Assert: previous rate still shown, error surfaced as a caption
    assert _rate_lines(app) == ["Rate: 0.92"]
    assert any("connection refused" in c.value for c in app.caption)


def test_fetch_history_fills_trend(app, mock_requests_get):
    today = datetime.now(timezone.utc).date()
    days = [today - timedelta(days=i) for i in range(31)]
    mock_requests_get.return_value = make_response({"rates": {d.isoformat(): {"EUR": 0.9} for d in days}})

    app.button(key="fetch_history").click().run()
    _settle(app)

    state = app.session_state["app_state"]
    assert not app.exception
    assert len(state.historical_rates) == 31
    assert state.trend == (0.9,) * 31
    assert mock_requests_get.call_count == 31
