"""Tests for the data models: mostly the fail-soft config parsing."""

from __future__ import annotations

import logging

from src.ranker.models import ATTRIBUTES, AttributeWeight, StateRecord, WeightConfig


class TestAttributeWeight:
    def test_defaults(self):
        w = AttributeWeight()
        assert w.prioritized is False
        assert w.weight == 1.0

    def test_numeric_string(self):
        assert AttributeWeight(weight="1.5").weight == 1.5

    def test_bounds_inclusive(self):
        assert AttributeWeight(weight=0).weight == 0.0
        assert AttributeWeight(weight=2).weight == 2.0

    def test_non_numeric_falls_back(self):
        assert AttributeWeight(weight="heavy").weight == 1.0

    def test_out_of_range_falls_back(self):
        assert AttributeWeight(weight=5).weight == 1.0
        assert AttributeWeight(weight=-0.1).weight == 1.0
        assert AttributeWeight(weight=float("nan")).weight == 1.0

    def test_empty_falls_back(self):
        assert AttributeWeight(weight="").weight == 1.0
        assert AttributeWeight(weight=None).weight == 1.0

    def test_prioritized_parsing(self):
        assert AttributeWeight(prioritized="true").prioritized is True
        assert AttributeWeight(prioritized="TRUE").prioritized is True
        assert AttributeWeight(prioritized="false").prioritized is False
        assert AttributeWeight(prioritized="yes").prioritized is False
        assert AttributeWeight(prioritized=None).prioritized is False

    def test_unreadable_prioritized_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.ranker.models"):
            assert AttributeWeight(prioritized=1).prioritized is False
            assert AttributeWeight(prioritized=["true"]).prioritized is False
        assert len(caplog.records) == 2
        assert "prioritized" in caplog.records[0].getMessage()

    def test_missing_prioritized_is_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="src.ranker.models"):
            assert AttributeWeight(prioritized=None).prioritized is False
        assert caplog.records == []


class TestWeightConfig:
    def test_defaults(self):
        config = WeightConfig()
        assert config.ideal_average_temp == 55
        assert config.ideal_population_density == 50
        assert not config.any_prioritized
        for attr in ATTRIBUTES:
            assert config.attribute(attr) == AttributeWeight()

    def test_any_prioritized(self):
        config = WeightConfig(coastal=AttributeWeight(prioritized=True))
        assert config.any_prioritized

    def test_ideal_out_of_range_falls_back(self):
        config = WeightConfig(ideal_average_temp=100, ideal_population_density="dense")
        assert config.ideal_average_temp == 55
        assert config.ideal_population_density == 50

    def test_ideal_in_range(self):
        config = WeightConfig(ideal_average_temp="60", ideal_population_density=20)
        assert config.ideal_average_temp == 60
        assert config.ideal_population_density == 20

    def test_unreadable_attribute_falls_back(self):
        config = WeightConfig(cost="very important")
        assert config.cost == AttributeWeight()

    def test_camel_case_aliases(self):
        config = WeightConfig(lowCrime={"prioritized": True}, idealAverageTemp=70)
        assert config.low_crime.prioritized
        assert config.ideal_average_temp == 70


class TestFlatOptions:
    def test_from_flat(self):
        config = WeightConfig.from_flat({
            "cost.prioritized": "true",
            "cost.weight": "1.5",
            "lowCrime.weight": "x",
            "population_density.weight": "0.5",
            "idealAverageTemp": "60",
            "utm_source": "newsletter",
            "cost.colour": "red",
        })
        assert config.cost == AttributeWeight(prioritized=True, weight=1.5)
        assert config.low_crime.weight == 1.0
        assert config.population_density.weight == 0.5
        assert config.ideal_average_temp == 60
        assert config.ideal_population_density == 50

    def test_from_flat_empty(self):
        assert WeightConfig.from_flat({}) == WeightConfig()

    def test_to_flat_skips_defaults(self):
        assert WeightConfig().to_flat() == {}

    def test_to_flat(self):
        config = WeightConfig(
            property_taxes=AttributeWeight(prioritized=True, weight=0.5),
            ideal_population_density=30,
        )
        assert config.to_flat() == {
            "propertyTaxes.prioritized": "true",
            "propertyTaxes.weight": "0.5",
            "idealPopulationDensity": "30",
        }
        assert WeightConfig.from_flat(config.to_flat()) == config

    def test_to_flat_keeps_full_precision(self):
        config = WeightConfig(
            cost=AttributeWeight(weight=1.2345678),
            beauty=AttributeWeight(weight=0.1),
            ideal_average_temp=61.123456789,
        )
        flat = config.to_flat()
        assert flat["cost.weight"] == "1.2345678"
        assert flat["beauty.weight"] == "0.1"
        assert WeightConfig.from_flat(flat) == config


class TestStateRecord:
    def test_original_keys(self):
        record = StateRecord(
            stateName="Ohio", conservative=20, beauty=42, cost=15,
            averageTemp=50.7, propertyTaxes=44, populationPerSquareMile=288,
            crimeRate=21, education=34, costal=True, propertyAppreciation=7.1,
        )
        assert record.name == "Ohio"
        assert record.conservativeness == 20
        assert record.is_coastal is True
