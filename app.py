"""Streamlit dashboard for the deposit vs stablecoin adoption ABM."""

import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st

# Ensure the project package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent))

from stablecoin_abm.analytics import adoption_summary, bank_snapshot, household_snapshot
from stablecoin_abm.config import DEFAULT_PARAMS, SLIDER_RANGES
from stablecoin_abm.model import AdoptionModel
from stablecoin_abm.visualization import (
    plot_adoption,
    plot_coin_fraction_distribution,
    plot_totals,
)

logging.basicConfig(level=logging.INFO)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Stablecoin Adoption ABM",
    page_icon="🏦",
    layout="wide",
)

# ── Presets ──────────────────────────────────────────────────────────────────

PRESETS = {
    "Default": {},
    "Loyal Depositors": {
        "bank_attractiveness": 0.9,
        "initial_coin_utility": 0.05,
        "social_influence": 0.1,
    },
    "Viral Stablecoin": {
        "bank_attractiveness": 0.3,
        "initial_coin_utility": 0.6,
        "social_influence": 0.9,
    },
    "Bank Scare": {
        "bank_confidence_threshold": 0.95,
        "fear_factor": 6.0,
        "social_influence": 0.7,
    },
}

_GROUPS = {
    "Population": ["n_households", "n_banks", "initial_deposits",
                   "initial_coin_utility"],
    "Payments": ["transactions_per_tick", "bank_attractiveness"],
    "Reallocation": ["social_influence", "bank_confidence_threshold",
                     "fear_factor"],
    "Wages": ["unemployment_rate", "yearly_salary"],
}


def _apply_preset(name: str) -> None:
    """Write preset overrides (merged with defaults) into session state slider keys."""
    merged = {**DEFAULT_PARAMS, **PRESETS.get(name, {})}
    for k in SLIDER_RANGES:
        default_type = type(SLIDER_RANGES[k][0])
        st.session_state[k] = default_type(merged[k])
    st.session_state["preset"] = name


def _slider(key: str) -> float | int:
    """Create a sidebar slider from SLIDER_RANGES and return its value."""
    mn, mx, step = SLIDER_RANGES[key]
    kwargs: dict = dict(min_value=mn, max_value=mx, step=step, key=key)
    if key not in st.session_state:
        kwargs["value"] = type(mn)(DEFAULT_PARAMS[key])
    return st.slider(key, **kwargs)


@st.cache_data(show_spinner=False)
def run_simulation(params_frozen: tuple) -> tuple[pd.DataFrame, pd.DataFrame,
                                                 pd.DataFrame, dict]:
    """setup + go: run until the ceiling or the step limit. Cached on params."""
    model = AdoptionModel(dict(params_frozen))
    results = model.run(display=False)
    data = results.variables.AdoptionModel
    return (data, household_snapshot(model.households),
            bank_snapshot(model.banks), dict(results.reporters.iloc[0]))


# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Stablecoin Adoption ABM")

st.sidebar.markdown("**Presets**")
preset_cols = st.sidebar.columns(len(PRESETS))
for i, name in enumerate(PRESETS):
    if preset_cols[i].button(name, use_container_width=True):
        _apply_preset(name)

st.sidebar.caption(f"Active: **{st.session_state.get('preset', 'Default')}**")

values = {}
for group, keys in _GROUPS.items():
    with st.sidebar.expander(group, expanded=True):
        for key in keys:
            values[key] = _slider(key)

with st.sidebar.expander("Simulation", expanded=True):
    steps = st.number_input("max ticks", min_value=1, max_value=20000,
                            value=DEFAULT_PARAMS["steps"], step=100)
    seed = st.number_input("seed (0 = random)", min_value=0, value=0, step=1)

run_clicked = st.sidebar.button("▶  Setup & Go", type="primary",
                                use_container_width=True)

# ── Build params and run ────────────────────────────────────────────────────

if run_clicked:
    params = {
        **values,
        "steps": int(steps),
    }
    if seed:
        params["seed"] = int(seed)
    with st.spinner("Running simulation..."):
        data, snapshot, banks, reporters = run_simulation(tuple(sorted(params.items())))
    st.session_state["data"] = data
    st.session_state["snapshot"] = snapshot
    st.session_state["banks"] = banks
    st.session_state["reporters"] = reporters

# ── Main area ────────────────────────────────────────────────────────────────

if "data" not in st.session_state:
    st.info("Configure parameters in the sidebar, then click **▶  Setup & Go**.")
    st.stop()

data: pd.DataFrame = st.session_state["data"]
snapshot: pd.DataFrame = st.session_state["snapshot"]
banks: pd.DataFrame = st.session_state["banks"]
reporters: dict = st.session_state["reporters"]

col1, col2, col3 = st.columns(3)
col1.metric("Total Deposits", f"{data['total_deposits'].iloc[-1]:,.0f}")
col2.metric("Total Stablecoin", f"{data['total_coin_balance'].iloc[-1]:,.0f}")
col3.metric("Ticks", int(reporters["ticks"]),
            "ceiling reached" if reporters["ceiling_reached"] else None)

st.markdown("### Deposits vs Stablecoin")
fig1, ax1 = plt.subplots(figsize=(12, 3.5))
plot_totals(data, ax=ax1)
fig1.tight_layout()
st.pyplot(fig1)
plt.close(fig1)

st.markdown("### Adoption")
fig2, ax2 = plt.subplots(figsize=(12, 3.5))
plot_adoption(data, ax=ax2)
fig2.tight_layout()
st.pyplot(fig2)
plt.close(fig2)

st.markdown("### Household Portfolios")
fig3, ax3 = plt.subplots(figsize=(8, 3.5))
plot_coin_fraction_distribution(snapshot, ax=ax3)
fig3.tight_layout()
st.pyplot(fig3)
plt.close(fig3)

with st.expander("Run Summary"):
    summary = adoption_summary(data)
    summary_df = pd.DataFrame(
        {k: [f"{v:.6f}" if isinstance(v, float) else v]
         for k, v in summary.items()}
    ).T
    summary_df.columns = ["Value"]
    st.dataframe(summary_df, use_container_width=True)
    st.markdown("**Banks**")
    st.dataframe(banks, use_container_width=True)
    st.markdown("**Households**")
    st.dataframe(snapshot, use_container_width=True)
