# forex_fetcher/api/exchangerate.py
from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
from typing import List, NamedTuple, Optional

import requests

from forex_fetcher.config import API_BASE_URL, API_GET_TIMEOUT, HISTORY_DAYS
from forex_fetcher.currencies import CurrencyPair
from forex_fetcher.logging_config import get_logger

logger = get_logger(__name__)


class RateClientError(Exception):
    """Base for everything the ExchangeRate-API clients raise."""


class NetworkOrDecodeError(RateClientError):
    """Transport failure, HTTP error status, or a body we can't decode."""


class PairNotFound(RateClientError):
    """Well-formed response that doesn't quote the requested target."""


class RateSample(NamedTuple):
    date: date
    rate: float


class ExchangeRateClient:
    def __init__(self, api_key: str):
        self.api_key = api_key

    def _get(self, path: str, params: Optional[dict] = None) -> dict:
        # the key is part of the path; log the path only
        logger.debug("GET %s params=%s", path, params)
        try:
            r = requests.get(f"{API_BASE_URL}/{self.api_key}/{path}", params=params, timeout=API_GET_TIMEOUT)
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as exc:
            raise NetworkOrDecodeError(self._describe(exc)) from exc
        if not isinstance(data, dict):
            raise NetworkOrDecodeError(f"Unexpected response body: {type(data).__name__}")
        return data

    def _describe(self, exc: Exception) -> str:
        """Error text with the API key scrubbed (requests puts the full URL in its messages)."""
        response = getattr(exc, "response", None)
        if isinstance(exc, requests.HTTPError) and response is not None:
            return f"HTTP {response.status_code} {response.reason or ''}".strip()
        msg = str(exc)
        if self.api_key:
            msg = msg.replace(self.api_key, "***")
        return f"{type(exc).__name__}: {msg}"

    def latest(self, base: str = "USD") -> dict:
        return self._get(f"latest/{base}")

    def point_rate(self, pair: CurrencyPair) -> float:
        data = self.latest(pair.base)
        rates = data.get("conversion_rates")
        if not isinstance(rates, dict):
            raise NetworkOrDecodeError("Response has no conversion_rates object")
        if pair.target not in rates:
            raise PairNotFound(f"Currency pair not found: {pair}")
        try:
            return float(rates[pair.target])
        except (TypeError, ValueError) as exc:
            raise NetworkOrDecodeError(f"Bad rate for {pair.target}: {rates[pair.target]!r}") from exc

    def history(self, pair: CurrencyPair, today: Optional[date] = None) -> List[RateSample]:
        """
        One sample per calendar day over the trailing window, oldest first.

        Each day issues its own request for the *whole* window and picks that
        day out of the returned map; days the API doesn't quote are skipped.
        Any failed request aborts the call, nothing partial is returned.
        """
        end_date = today or datetime.now(timezone.utc).date()
        start_date = end_date - timedelta(days=HISTORY_DAYS)
        params = {"start_date": start_date.isoformat(), "end_date": end_date.isoformat()}

        samples: List[RateSample] = []
        for i in range(HISTORY_DAYS + 1):
            day = start_date + timedelta(days=i)
            data = self._get(f"history/{pair.base}/{pair.target}", params=params)
            rates = data.get("rates")
            if not isinstance(rates, dict):
                raise NetworkOrDecodeError("Response has no rates object")

            day_rates = rates.get(day.isoformat())
            if not isinstance(day_rates, dict) or pair.target not in day_rates:
                continue
            try:
                samples.append(RateSample(day, float(day_rates[pair.target])))
            except (TypeError, ValueError) as exc:
                raise NetworkOrDecodeError(f"Bad rate for {day}: {day_rates[pair.target]!r}") from exc

        logger.info("History %s: %d samples between %s and %s", pair, len(samples), start_date, end_date)
        return samples


def fetch_point_rate(api_key: str, pair: CurrencyPair) -> float:
    return ExchangeRateClient(api_key).point_rate(pair)


def fetch_history(api_key: str, pair: CurrencyPair, today: Optional[date] = None) -> List[RateSample]:
    return ExchangeRateClient(api_key).history(pair, today=today)
