"""Pydantic v2 data models, the data contracts flowing through the system."""

from __future__ import annotations

import logging
import math
from typing import Any, Literal, Mapping

from pydantic import BaseModel, Field, field_validator

from src.ranker.config import settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

AttributeKey = Literal[
    "conservativeness",
    "low_crime",
    "education",
    "population_density",
    "cost",
    "property_appreciation",
    "property_taxes",
    "coastal",
    "beauty",
    "average_temp",
]

ATTRIBUTES: tuple[AttributeKey, ...] = (
    "conservativeness",
    "low_crime",
    "education",
    "population_density",
    "cost",
    "property_appreciation",
    "property_taxes",
    "coastal",
    "beauty",
    "average_temp",
)

# camelCase option names used in query strings
ATTRIBUTE_ALIASES: dict[str, AttributeKey] = {
    "conservativeness": "conservativeness",
    "lowCrime": "low_crime",
    "education": "education",
    "populationDensity": "population_density",
    "cost": "cost",
    "propertyAppreciation": "property_appreciation",
    "propertyTaxes": "property_taxes",
    "coastal": "coastal",
    "beauty": "beauty",
    "averageTemp": "average_temp",
}
_CAMEL: dict[str, str] = {attr: alias for alias, attr in ATTRIBUTE_ALIASES.items()}

_IDEAL_KEYS: dict[str, str] = {
    "idealAverageTemp": "ideal_average_temp",
    "ideal_average_temp": "ideal_average_temp",
    "idealPopulationDensity": "ideal_population_density",
    "ideal_population_density": "ideal_population_density",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _bounded(value: Any, low: float, high: float, default: float, label: str) -> float:
    """Coerce *value* to a float in [low, high], falling back to *default*."""
    if value is None or value == "":
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Non-numeric %s %r, using default %s", label, value, default)
        return default
    if math.isnan(number) or not low <= number <= high:
        logger.warning(
            "%s %r outside [%s, %s], using default %s",
            label, value, low, high, default,
        )
        return default
    return number


def _format_number(value: float) -> str:
    """Shortest string that parses back to exactly *value*."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


# ---------------------------------------------------------------------------
# State data
# ---------------------------------------------------------------------------

class StateRecord(BaseModel):
    name: str = Field(alias="stateName")
    conservativeness: float = Field(alias="conservative")
    beauty: float
    cost: float
    average_temp: float = Field(alias="averageTemp")
    property_taxes: float = Field(alias="propertyTaxes")
    population_per_square_mile: float = Field(alias="populationPerSquareMile")
    crime_rate: float = Field(alias="crimeRate")  # 1 = highest crime
    education: float
    is_coastal: bool = Field(alias="costal")
    property_appreciation: float = Field(alias="propertyAppreciation")

    model_config = {"frozen": True, "populate_by_name": True}


# ---------------------------------------------------------------------------
# Weight configuration
# ---------------------------------------------------------------------------

class AttributeWeight(BaseModel):
    prioritized: bool = False
    weight: float = Field(default_factory=lambda: settings.default_weight)

    model_config = {"frozen": True}

    @field_validator("prioritized", mode="before")
    @classmethod
    def _coerce_prioritized(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() == "true"
        if value is not None:
            logger.warning("Unreadable prioritized flag %r, treating as false", value)
        return False

    @field_validator("weight", mode="before")
    @classmethod
    def _coerce_weight(cls, value: Any) -> float:
        return _bounded(
            value, settings.weight_min, settings.weight_max,
            settings.default_weight, "weight",
        )


class WeightConfig(BaseModel):
    """Per-attribute priorities and weights plus the two ideal reference values.

    Built fresh from user input for every scoring request.  Bad input never
    raises: each malformed field falls back to its default.
    """

    conservativeness: AttributeWeight = Field(default_factory=AttributeWeight)
    low_crime: AttributeWeight = Field(default_factory=AttributeWeight, alias="lowCrime")
    education: AttributeWeight = Field(default_factory=AttributeWeight)
    population_density: AttributeWeight = Field(
        default_factory=AttributeWeight, alias="populationDensity",
    )
    cost: AttributeWeight = Field(default_factory=AttributeWeight)
    property_appreciation: AttributeWeight = Field(
        default_factory=AttributeWeight, alias="propertyAppreciation",
    )
    property_taxes: AttributeWeight = Field(
        default_factory=AttributeWeight, alias="propertyTaxes",
    )
    coastal: AttributeWeight = Field(default_factory=AttributeWeight)
    beauty: AttributeWeight = Field(default_factory=AttributeWeight)
    average_temp: AttributeWeight = Field(default_factory=AttributeWeight, alias="averageTemp")

    ideal_average_temp: float = Field(
        default_factory=lambda: settings.default_ideal_average_temp,
        alias="idealAverageTemp",
    )
    ideal_population_density: float = Field(
        default_factory=lambda: settings.default_ideal_population_density,
        alias="idealPopulationDensity",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator(*ATTRIBUTES, mode="before")
    @classmethod
    def _coerce_attribute(cls, value: Any) -> Any:
        if isinstance(value, (AttributeWeight, Mapping)):
            return value
        if value is not None:
            logger.warning("Unreadable attribute weight %r, using defaults", value)
        return AttributeWeight()

    @field_validator("ideal_average_temp", mode="before")
    @classmethod
    def _coerce_ideal_temp(cls, value: Any) -> float:
        return _bounded(
            value, settings.ideal_min, settings.ideal_max,
            settings.default_ideal_average_temp, "ideal_average_temp",
        )

    @field_validator("ideal_population_density", mode="before")
    @classmethod
    def _coerce_ideal_density(cls, value: Any) -> float:
        return _bounded(
            value, settings.ideal_min, settings.ideal_max,
            settings.default_ideal_population_density, "ideal_population_density",
        )

    @property
    def any_prioritized(self) -> bool:
        return any(self.attribute(attr).prioritized for attr in ATTRIBUTES)

    def attribute(self, attr: AttributeKey) -> AttributeWeight:
        return getattr(self, attr)

    @classmethod
    def from_flat(cls, params: Mapping[str, Any]) -> WeightConfig:
        """Build a config from flat options such as ``cost.weight`` or ``idealAverageTemp``.

        Attribute names may be camelCase (``lowCrime``) or snake_case
        (``low_crime``).  Unknown keys are ignored.
        """
        data: dict[str, Any] = {}
        for key, value in params.items():
            name, _, option = key.partition(".")
            if option:
                attr = ATTRIBUTE_ALIASES.get(name, name)
                if attr in ATTRIBUTES and option in ("prioritized", "weight"):
                    data.setdefault(attr, {})[option] = value
            elif key in _IDEAL_KEYS:
                data[_IDEAL_KEYS[key]] = value
        return cls(**data)

    def to_flat(self) -> dict[str, str]:
        """Inverse of :meth:`from_flat`, keeping only non-default options."""
        flat: dict[str, str] = {}
        for attr in ATTRIBUTES:
            entry = self.attribute(attr)
            if entry.prioritized:
                flat[f"{_CAMEL[attr]}.prioritized"] = "true"
            if entry.weight != settings.default_weight:
                flat[f"{_CAMEL[attr]}.weight"] = _format_number(entry.weight)
        if self.ideal_average_temp != settings.default_ideal_average_temp:
            flat["idealAverageTemp"] = _format_number(self.ideal_average_temp)
        if self.ideal_population_density != settings.default_ideal_population_density:
            flat["idealPopulationDensity"] = _format_number(self.ideal_population_density)
        return flat


# ---------------------------------------------------------------------------
# Scoring / output types
# ---------------------------------------------------------------------------

class ScoreBreakdown(BaseModel):
    cost: float = 0.0
    beauty: float = 0.0
    conservativeness: float = 0.0
    average_temp: float = 0.0
    coastal: float = 0.0
    education: float = 0.0
    population_density: float = 0.0
    low_crime: float = 0.0
    property_taxes: float = 0.0
    property_appreciation: float = 0.0

    model_config = {"frozen": True}

    @property
    def total(self) -> float:
        return (
            self.cost
            + self.beauty
            + self.conservativeness
            + self.average_temp
            + self.coastal
            + self.education
            + self.population_density
            + self.low_crime
            + self.property_taxes
            + self.property_appreciation
        )


class ScoredState(StateRecord):
    score: float
    appreciation_rank: int
    breakdown: ScoreBreakdown
