# app.py — Forex Rate Fetcher (ExchangeRate-API latest rate + 30-day history)
from functools import partial

import streamlit as st

from forex_fetcher import charts
from forex_fetcher.api.exchangerate import fetch_history, fetch_point_rate
from forex_fetcher.config import APP_TITLE, DEFAULT_BASE, DEFAULT_TARGET, POLL_INTERVAL_SECONDS
from forex_fetcher.currencies import CURRENCIES
from forex_fetcher.logging_config import get_logger
from forex_fetcher.state import AppState, apply_result, edit, history_title, rate_label
from forex_fetcher.tasks import TaskKind, TaskRunner
from forex_fetcher.utils import index_frame, samples_to_frame

logger = get_logger("forex_fetcher.app")

# ================ Page config & header ================
st.set_page_config(page_title=APP_TITLE, layout="centered")
st.title(APP_TITLE)
st.caption("Paste an ExchangeRate-API key, pick a pair, fetch the latest rate or the last 30 days.")

# ========================= Init state & defaults =========================
# One AppState + one TaskRunner per browser session; widget keys seeded once.
if "app_state" not in st.session_state:
    st.session_state.app_state = AppState()
    st.session_state.runner = TaskRunner()
    st.session_state.api_key = ""
    st.session_state.base_currency = DEFAULT_BASE
    st.session_state.target_currency = DEFAULT_TARGET
    logger.info("New session")


# ============================ Form (one frame per run) ============================
@st.fragment(run_every=POLL_INTERVAL_SECONDS)
def forex_form():
    runner: TaskRunner = st.session_state.runner

    api_key = st.text_input("API Key", key="api_key", type="password")
    c1, c2 = st.columns(2)
    with c1:
        base = st.selectbox("Base Currency", CURRENCIES, key="base_currency")
    with c2:
        target = st.selectbox("Target Currency", CURRENCIES, key="target_currency")

    state = edit(st.session_state.app_state, api_key=api_key, base_currency=base, target_currency=target)

    b1, b2 = st.columns(2)
    with b1:
        if st.button("Fetch Rate", key="fetch_rate"):
            runner.submit(TaskKind.RATE, state.pair, partial(fetch_point_rate, state.api_key, state.pair), scope=state.api_key)
    with b2:
        if st.button("Fetch Historical Rates", key="fetch_history"):
            runner.submit(TaskKind.HISTORY, state.pair, partial(fetch_history, state.api_key, state.pair), scope=state.api_key)

    # drain at most one finished fetch per frame
    result = runner.poll()
    if result is not None:
        state = apply_result(state, result)
    st.session_state.app_state = state

    # ---------- Render ----------
    st.markdown(rate_label(state))
    if state.last_error:
        st.caption(f"⚠️ {state.last_error}")
    pending = runner.in_flight()
    if pending:
        st.caption("Fetching " + ", ".join(f"{kind.value} {pair}" for pair, kind in pending) + "…")

    if state.trend:
        fig = charts.line(index_frame(state.trend), x="sample", y="rate", title="Trend")
        st.plotly_chart(fig, use_container_width=True)

    if state.historical_rates:
        df = samples_to_frame(state.historical_rates)
        fig = charts.line(df, x="sample", y="rate", title=history_title(state), hover_data=["time"])
        st.plotly_chart(fig, use_container_width=True)


forex_form()
