"""Streamlit UI for the States Ranker."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pandas as pd
import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent))

from src.ranker.config import settings  # noqa: E402
from src.ranker.engine import load_states, rank_states  # noqa: E402
from src.ranker.models import ScoredState, WeightConfig  # noqa: E402

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="States Ranker", layout="wide")
st.title("States Ranker")

_INTRO = """\
The ranker adds up the score each state gets from every attribute.  If you
prioritize **Low Crime**, the safest state can still lose to a state with a
higher combined score.

Prioritizing an attribute doubles its score and halves every attribute you did
not prioritize.  The **weight** next to each attribute scales it further
(0 to 2).
"""

GROUPS: list[tuple[str, list[tuple[str, str]]]] = [
    ("Cultural", [
        ("conservativeness", "Conservativeness (2020 voter data)"),
        ("low_crime", "Low crime"),
        ("education", "Education"),
        ("population_density", "Population density"),
    ]),
    ("Economical", [
        ("cost", "Low housing cost"),
        ("property_appreciation", "High property appreciation"),
        ("property_taxes", "Low property taxes"),
    ]),
    ("Aesthetics", [
        ("coastal", "Coastal states"),
        ("beauty", "Natural beauty"),
        ("average_temp", "Average temperature (°F)"),
    ]),
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _attribute_controls(attr: str, label: str, config: WeightConfig) -> dict[str, object]:
    entry = config.attribute(attr)
    cols = st.columns([3, 1])
    prioritized = cols[0].checkbox(label, value=entry.prioritized, key=f"{attr}-prioritized")
    weight = cols[1].number_input(
        "Weight",
        min_value=settings.weight_min,
        max_value=settings.weight_max,
        value=float(entry.weight),
        step=0.1,
        key=f"{attr}-weight",
        label_visibility="collapsed",
    )
    return {f"{attr}.prioritized": prioritized, f"{attr}.weight": weight}


def _ideal_control(label: str, value: float, key: str) -> float:
    return st.number_input(
        label,
        min_value=settings.ideal_min,
        max_value=settings.ideal_max,
        value=float(value),
        step=1.0,
        key=key,
    )


def _results_frame(ranked: list[ScoredState]) -> pd.DataFrame:
    rows = []
    for place, s in enumerate(ranked, 1):
        row = {"Place": place, "State": s.name, "Score": round(s.score, 2)}
        row.update({k: round(v, 2) for k, v in s.breakdown.model_dump().items()})
        rows.append(row)
    return pd.DataFrame(rows).set_index("Place")


def _render_state(place: int, s: ScoredState) -> None:
    b = s.breakdown
    with st.expander(f"#{place} {s.name} - {s.score:.2f}"):
        cols = st.columns(3)
        with cols[0]:
            st.markdown("**Cultural**")
            st.markdown(f"Conservativeness: #{s.conservativeness:g} of 50 - {b.conservativeness:.2f}")
            st.markdown(f"Crime: #{s.crime_rate:g} of 50 (1 = most crime) - {b.low_crime:.2f}")
            st.markdown(f"Education: #{s.education:g} of 50 - {b.education:.2f}")
            st.markdown(f"Population / sq mi: {s.population_per_square_mile:g} - {b.population_density:.2f}")
        with cols[1]:
            st.markdown("**Economical**")
            st.markdown(f"Housing cost: #{s.cost:g} of 50 - {b.cost:.2f}")
            st.markdown(
                f"Property appreciation: {s.property_appreciation:g}% "
                f"(#{s.appreciation_rank + 1}) - {b.property_appreciation:.2f}"
            )
            st.markdown(f"Property taxes: #{s.property_taxes:g} of 50 - {b.property_taxes:.2f}")
        with cols[2]:
            st.markdown("**Aesthetics**")
            st.markdown(f"Coastal: {'yes' if s.is_coastal else 'no'} - {b.coastal:.2f}")
            st.markdown(f"Natural beauty: #{s.beauty:g} of 50 - {b.beauty:.2f}")
            st.markdown(f"Average temp: {s.average_temp:g}°F - {b.average_temp:.2f}")


# ---------------------------------------------------------------------------
# Sidebar - the query string is the source of truth for the config
# ---------------------------------------------------------------------------

current = WeightConfig.from_flat(st.query_params.to_dict())
raw: dict[str, object] = {}

with st.sidebar:
    st.header("Priorities / Score weight")
    for group, attrs in GROUPS:
        st.subheader(group)
        for attr, label in attrs:
            raw.update(_attribute_controls(attr, label, current))
            if attr == "population_density":
                raw["ideal_population_density"] = _ideal_control(
                    "Best population per square mile",
                    current.ideal_population_density,
                    "ideal-population-density",
                )
            elif attr == "average_temp":
                raw["ideal_average_temp"] = _ideal_control(
                    "Best average temperature",
                    current.ideal_average_temp,
                    "ideal-average-temp",
                )

config = WeightConfig.from_flat(raw)
st.query_params.from_dict(config.to_flat())


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

st.markdown(_INTRO)
ranked = rank_states(load_states(), config)

st.subheader("Result")
st.dataframe(_results_frame(ranked), use_container_width=True)

st.subheader("Breakdown")
for place, scored in enumerate(ranked, 1):
    _render_state(place, scored)
