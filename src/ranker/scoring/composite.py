"""Composite scorer: sum of every per-attribute score for one state."""

from __future__ import annotations

import logging
from typing import Mapping

from src.ranker.models import ScoreBreakdown, StateRecord, WeightConfig
from src.ranker.scoring.attributes import (
    score_average_temp,
    score_coastal,
    score_direct,
    score_flipped,
    score_population_density,
)

logger = logging.getLogger(__name__)


def score_breakdown(
    state: StateRecord,
    config: WeightConfig,
    appreciation_ranks: Mapping[str, int],
) -> ScoreBreakdown:
    breakdown = ScoreBreakdown(
        cost=score_flipped(state.cost, "cost", config),
        beauty=score_flipped(state.beauty, "beauty", config),
        conservativeness=score_flipped(state.conservativeness, "conservativeness", config),
        average_temp=score_average_temp(state.average_temp, config),
        coastal=score_coastal(state.is_coastal, config),
        education=score_flipped(state.education, "education", config),
        population_density=score_population_density(
            state.population_per_square_mile, config,
        ),
        # crime_rate is already "larger is safer"; not flipped
        low_crime=score_direct(state.crime_rate, "low_crime", config),
        property_taxes=score_flipped(state.property_taxes, "property_taxes", config),
        property_appreciation=score_flipped(
            appreciation_ranks[state.name], "property_appreciation", config,
        ),
    )
    logger.debug(
        "Score %s: cost=%.2f beauty=%.2f cons=%.2f temp=%.2f coastal=%.2f "
        "edu=%.2f density=%.2f crime=%.2f taxes=%.2f appr=%.2f -> %.2f",
        state.name, breakdown.cost, breakdown.beauty, breakdown.conservativeness,
        breakdown.average_temp, breakdown.coastal, breakdown.education,
        breakdown.population_density, breakdown.low_crime,
        breakdown.property_taxes, breakdown.property_appreciation,
        breakdown.total,
    )
    return breakdown


def score_state(
    state: StateRecord,
    config: WeightConfig,
    appreciation_ranks: Mapping[str, int],
) -> float:
    return score_breakdown(state, config, appreciation_ranks).total
