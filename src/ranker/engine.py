"""Top-level orchestrator: ties all components together.

Pipeline:
  1. Load / receive state records
  2. Rank every state by property appreciation     (once per state list)
  3. Score every state against the weight config   (per-attribute breakdown)
  4. Sort descending by score, ties in input order
  5. Return results
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from src.ranker.models import ScoredState, StateRecord, WeightConfig
from src.ranker.scoring.appreciation import compute_appreciation_ranks
from src.ranker.scoring.composite import score_breakdown

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


def load_states() -> list[StateRecord]:
    path = DATA_DIR / "states.json"
    with open(path) as f:
        raw = json.load(f)
    return [StateRecord(**s) for s in raw]


def load_states_from_json(data: list[dict]) -> list[StateRecord]:
    return [StateRecord(**s) for s in data]


def rank_states(
    states: Sequence[StateRecord],
    config: WeightConfig | None = None,
) -> list[ScoredState]:
    if config is None:
        config = WeightConfig()

    ranks = compute_appreciation_ranks(states)

    indexed: list[tuple[int, ScoredState]] = []
    for idx, state in enumerate(states):
        breakdown = score_breakdown(state, config, ranks)
        indexed.append((idx, ScoredState(
            **state.model_dump(),
            score=breakdown.total,
            appreciation_rank=ranks[state.name],
            breakdown=breakdown,
        )))

    indexed.sort(key=lambda item: (-item[1].score, item[0]))
    ranked = [scored for _, scored in indexed]

    if ranked:
        logger.info(
            "Ranked %d states (prioritizing=%s): top=%s (%.2f)",
            len(ranked),
            "on" if config.any_prioritized else "off",
            ranked[0].name, ranked[0].score,
        )
    return ranked
