"""Configuration: multipliers, scale constants, input bounds."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class Multipliers(BaseModel):
    prioritized: float = Field(default=2.0, ge=0.0)
    neutral: float = Field(default=1.0, ge=0.0)
    deprioritized: float = Field(default=0.5, ge=0.0)


class Settings(BaseSettings):
    multipliers: Multipliers = Multipliers()

    # Rank-style attributes run 1..50; flipping subtracts from this ceiling.
    scale_ceiling: float = 50.0
    population_density_floor: float = 0.0
    coastal_bonus: float = 25.0
    inland_bonus: float = 0.0

    default_weight: float = 1.0
    weight_min: float = 0.0
    weight_max: float = 2.0

    default_ideal_average_temp: float = 55.0
    default_ideal_population_density: float = 50.0
    ideal_min: float = 20.0
    ideal_max: float = 80.0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "RANKER_",
        "env_nested_delimiter": "__",
    }


settings = Settings()
