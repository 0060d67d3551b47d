"""Property-appreciation rank: the ordinal used in place of the raw percentage."""

from __future__ import annotations

from typing import Sequence

from src.ranker.models import StateRecord


def compute_appreciation_ranks(states: Sequence[StateRecord]) -> dict[str, int]:
    """Map state name -> 0-based rank by descending ``property_appreciation``.

    Rank 0 is the highest appreciation.  Equal percentages keep their input
    order.  Depends only on the state list, never on the weight config.
    """
    ordered = sorted(states, key=lambda s: s.property_appreciation, reverse=True)
    return {state.name: rank for rank, state in enumerate(ordered)}
