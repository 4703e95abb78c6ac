"""Form state for the Forex Rate Fetcher and the per-frame update step.

The view keeps one AppState per browser session in st.session_state and
replaces it on every frame: widgets feed `edit`, drained fetch results feed
`apply_result`. Both return a new state and leave the old one untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from forex_fetcher.api.exchangerate import RateSample
from forex_fetcher.config import DEFAULT_BASE, DEFAULT_TARGET
from forex_fetcher.currencies import CurrencyPair
from forex_fetcher.tasks import TaskKind, TaskResult


@dataclass(frozen=True)
class AppState:
    api_key: str = ""
    base_currency: str = DEFAULT_BASE
    target_currency: str = DEFAULT_TARGET
    rate: Optional[float] = None
    # one value per history sample, accumulated across history fetches;
    # the index stands in for the date
    trend: Tuple[float, ...] = ()
    historical_rates: Tuple[RateSample, ...] = ()
    # pair the historical_rates were fetched for, not the current selection
    history_pair: Optional[CurrencyPair] = None
    last_error: Optional[str] = None

    @property
    def pair(self) -> CurrencyPair:
        return CurrencyPair(self.base_currency, self.target_currency)


def edit(state: AppState, **fields) -> AppState:
    """Copy of `state` with form fields (api_key, base/target currency) replaced."""
    return replace(state, **fields)


def apply_result(state: AppState, result: TaskResult) -> AppState:
    # a failed fetch never clears what is already on screen
    if not result.ok:
        return replace(state, last_error=f"{result.kind.value.capitalize()} fetch for {result.pair} failed: {result.error}")

    if result.kind is TaskKind.RATE:
        return replace(state, rate=result.value, last_error=None)

    samples = tuple(result.value)
    return replace(
        state,
        historical_rates=samples,
        history_pair=result.pair,
        trend=state.trend + tuple(s.rate for s in samples),
        last_error=None,
    )


def rate_label(state: AppState) -> str:
    if state.rate is None:
        return "Rate: Not fetched"
    return f"Rate: {state.rate}"


def history_title(state: AppState) -> str:
    return f"Historical Rates ({state.history_pair})"
