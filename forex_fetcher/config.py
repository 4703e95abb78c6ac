"""
Forex Rate Fetcher: constants shared by the clients and the Streamlit view.
Kept in one place so app.py stays free of magic numbers / magic strings.
"""

import os

# ---------------------------------------------------------------------------
# ExchangeRate-API
# ---------------------------------------------------------------------------
API_BASE_URL = "https://v6.exchangerate-api.com/v6"
API_GET_TIMEOUT = 30  # seconds, per request

# Trailing window for the history fetch (inclusive on both ends -> 31 days)
HISTORY_DAYS = 30

# ---------------------------------------------------------------------------
# Form defaults
# ---------------------------------------------------------------------------
APP_TITLE = "Forex Rate Fetcher"
DEFAULT_BASE = "USD"
DEFAULT_TARGET = "EUR"

# ---------------------------------------------------------------------------
# UI
# ---------------------------------------------------------------------------
POLL_INTERVAL_SECONDS = 1  # fragment re-run cadence; one result drained per run
CHART_HEIGHT = 320  # roughly a 2:1 plot in the centered layout

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
