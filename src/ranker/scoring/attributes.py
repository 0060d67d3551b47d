"""Per-attribute scores.

Every attribute contributes ``transformed_value * attribute_multiplier``.
Rank-style attributes (1 = best) are flipped against the scale ceiling so
that a better rank yields a larger number.  Temperature and population
density are scored by their distance from the caller's ideal value.
"""

from __future__ import annotations

from src.ranker.config import settings
from src.ranker.models import AttributeKey, WeightConfig


def attribute_multiplier(attr: AttributeKey, config: WeightConfig) -> float:
    """Three-tier multiplier: boost the prioritized, discount the rest.

    Once any attribute is prioritized, every non-prioritized attribute drops
    to half strength.  With nothing prioritized the multiplier is the raw
    weight.
    """
    m = settings.multipliers
    entry = config.attribute(attr)
    if entry.prioritized:
        return entry.weight * m.prioritized
    if config.any_prioritized:
        return entry.weight * m.deprioritized
    return entry.weight * m.neutral


def flip(value: float) -> float:
    return settings.scale_ceiling - value


def score_direct(value: float, attr: AttributeKey, config: WeightConfig) -> float:
    return value * attribute_multiplier(attr, config)


def score_flipped(value: float, attr: AttributeKey, config: WeightConfig) -> float:
    return flip(value) * attribute_multiplier(attr, config)


def score_average_temp(value: float, config: WeightConfig) -> float:
    distance = abs(value - config.ideal_average_temp)
    return flip(distance) * attribute_multiplier("average_temp", config)


def score_population_density(value: float, config: WeightConfig) -> float:
    distance = abs(value - config.ideal_population_density)
    flipped = max(flip(distance), settings.population_density_floor)
    return flipped * attribute_multiplier("population_density", config)


def score_coastal(is_coastal: bool, config: WeightConfig) -> float:
    bonus = settings.coastal_bonus if is_coastal else settings.inland_bonus
    return bonus * attribute_multiplier("coastal", config)
