"""Cleanup suitability scorer: condition, high temperature, humidity -> rating.

Pure functions. The condition adjustment is an ordered rule list from
config (first keyword match wins); temperature and humidity adjustments
are banded. The final score is clamped before the rating lookup.
"""

from shoresquad.config.schema import ConditionRule, ScoringConfig
from shoresquad.models.advisory import SuitabilityRating

_DEFAULT_SCORING = ScoringConfig()


def condition_adjustment(condition: str, rules: list[ConditionRule]) -> int:
    """Adjustment from the first rule with a keyword in the condition text."""
    lowered = condition.lower()
    for rule in rules:
        if any(keyword.lower() in lowered for keyword in rule.keywords):
            return rule.adjustment
    return 0


def temperature_adjustment(temp_high: float, config: ScoringConfig) -> int:
    if config.ideal_temp_low <= temp_high <= config.ideal_temp_high:
        return 1
    if temp_high > config.ideal_temp_high:
        return -1
    return 0


def humidity_adjustment(humidity: float, config: ScoringConfig) -> int:
    if humidity < config.humidity_low:
        return 1
    if humidity > config.humidity_high:
        return -1
    return 0


def score(
    condition: str,
    temp_high: float,
    humidity: float,
    config: ScoringConfig = _DEFAULT_SCORING,
) -> int:
    """Compute the clamped suitability score."""
    raw = (
        config.base_score
        + condition_adjustment(condition, config.condition_rules)
        + temperature_adjustment(temp_high, config)
        + humidity_adjustment(humidity, config)
    )
    return max(config.min_score, min(config.max_score, raw))


def rating_for(value: int, config: ScoringConfig = _DEFAULT_SCORING) -> SuitabilityRating:
    clamped = max(config.min_score, min(config.max_score, value))
    if clamped >= config.excellent_at:
        return SuitabilityRating.EXCELLENT
    if clamped >= config.good_at:
        return SuitabilityRating.GOOD
    if clamped >= config.fair_at:
        return SuitabilityRating.FAIR
    return SuitabilityRating.POOR


def suitability(
    condition: str,
    temp_high: float,
    humidity: float,
    config: ScoringConfig = _DEFAULT_SCORING,
) -> SuitabilityRating:
    return rating_for(score(condition, temp_high, humidity, config), config)
