"""Tests for suitability scoring: adjustments, clamping, rating thresholds."""

import pytest

from shoresquad.advisory.scoring import (
    condition_adjustment,
    humidity_adjustment,
    rating_for,
    score,
    suitability,
    temperature_adjustment,
)
from shoresquad.config.schema import ConditionRule, ScoringConfig
from shoresquad.models.advisory import SuitabilityRating


class TestConditionAdjustment:
    @pytest.mark.parametrize(
        "condition,expected",
        [
            ("Fair (Day)", 3),
            ("Sunny", 3),
            ("Partly Cloudy (Night)", 2),
            ("Cloudy", 1),
            ("Light Rain", -3),
            ("Passing Showers", -3),
            ("Thundery", -5),
            ("Windy", 0),
            ("Hazy", 0),
        ],
    )
    def test_default_rules(self, condition, expected):
        assert condition_adjustment(condition, ScoringConfig().condition_rules) == expected

    def test_first_match_wins(self):
        # "showers" is checked before "thundery"
        assert condition_adjustment("Thundery Showers", ScoringConfig().condition_rules) == -3

    def test_case_insensitive(self):
        assert condition_adjustment("PARTLY CLOUDY", ScoringConfig().condition_rules) == 2

    def test_custom_rules_keep_order(self):
        rules = [
            ConditionRule(keywords=["windy"], adjustment=-2),
            ConditionRule(keywords=["fair"], adjustment=4),
        ]
        assert condition_adjustment("Fair and Windy", rules) == -2


class TestBandAdjustments:
    @pytest.mark.parametrize(
        "temp,expected",
        [(23.9, 0), (24, 1), (28, 1), (32, 1), (32.5, -1), (35, -1), (18, 0)],
    )
    def test_temperature(self, temp, expected):
        assert temperature_adjustment(temp, ScoringConfig()) == expected

    @pytest.mark.parametrize(
        "humidity,expected",
        [(55, 1), (69.9, 1), (70, 0), (85, 0), (85.1, -1), (95, -1)],
    )
    def test_humidity(self, humidity, expected):
        assert humidity_adjustment(humidity, ScoringConfig()) == expected


class TestScore:
    def test_partly_cloudy_ideal_temp(self):
        assert score("Partly Cloudy", 30, 75) == 8

    def test_cloudy_is_lower_tier_than_partly_cloudy(self):
        assert score("Cloudy", 30, 75) == 7

    def test_best_case_hits_ceiling(self):
        assert score("Sunny", 28, 60) == 10

    def test_clamps_at_zero(self):
        # 5 - 5 - 1 - 1 = -2
        assert score("Thundery", 35, 90) == 0

    def test_clamps_at_ten(self):
        config = ScoringConfig(base_score=8)
        assert score("Sunny", 28, 60, config) == 10

    def test_output_always_in_range(self):
        conditions = ["Fair", "Cloudy", "Showers", "Thundery", "Hazy", ""]
        for condition in conditions:
            for temp in (15, 24, 30, 32, 40):
                for humidity in (40, 70, 80, 85, 99):
                    assert 0 <= score(condition, temp, humidity) <= 10

    def test_idempotent(self):
        first = (score("Partly Cloudy", 31, 88), suitability("Partly Cloudy", 31, 88))
        second = (score("Partly Cloudy", 31, 88), suitability("Partly Cloudy", 31, 88))
        assert first == second


class TestRating:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (10, SuitabilityRating.EXCELLENT),
            (8, SuitabilityRating.EXCELLENT),
            (7, SuitabilityRating.GOOD),
            (6, SuitabilityRating.GOOD),
            (5, SuitabilityRating.FAIR),
            (4, SuitabilityRating.FAIR),
            (3, SuitabilityRating.POOR),
            (0, SuitabilityRating.POOR),
        ],
    )
    def test_thresholds(self, value, expected):
        assert rating_for(value) == expected

    def test_out_of_range_is_clamped(self):
        assert rating_for(-4) == SuitabilityRating.POOR
        assert rating_for(14) == SuitabilityRating.EXCELLENT

    def test_ratings_are_ordered(self):
        ordinals = [r.ordinal for r in SuitabilityRating]
        assert ordinals == sorted(ordinals)
        assert SuitabilityRating.POOR.ordinal < SuitabilityRating.EXCELLENT.ordinal

    def test_suitability_end_to_end(self):
        assert suitability("Afternoon thundery showers", 33, 95) == SuitabilityRating.POOR
        assert suitability("Fair", 31, 65) == SuitabilityRating.EXCELLENT
