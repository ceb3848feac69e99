"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator

from shoresquad.config.defaults import (
    DEFAULT_AREA_SUBSTRINGS,
    DEFAULT_CONDITION_RULES,
    DEFAULT_FOCUS_AREA_NAME,
    DEFAULT_INTERVAL_MINUTES,
    DEFAULT_STATION_IDS,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_USER_AGENT,
    FALLBACK_MESSAGE,
    NEA_BASE_URL,
)
from shoresquad.models.advisory import WeatherIcon


class FallbackPolicy(StrEnum):
    RESET = "reset"                    # show the generic placeholder
    KEEP_LAST_GOOD = "keep-last-good"  # leave the last successful render up


class FeedConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NEA_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT


class FocusAreaConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = DEFAULT_FOCUS_AREA_NAME
    area_substrings: list[str] = Field(
        default_factory=lambda: list(DEFAULT_AREA_SUBSTRINGS), min_length=1
    )
    station_ids: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STATION_IDS), min_length=1
    )
    default_temperature_c: int = DEFAULT_TEMPERATURE_C


class ConditionRule(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    keywords: list[str] = Field(min_length=1)
    adjustment: int


def _default_condition_rules() -> list[ConditionRule]:
    return [
        ConditionRule(keywords=list(keywords), adjustment=adjustment)
        for keywords, adjustment in DEFAULT_CONDITION_RULES
    ]


class ScoringConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_score: int = 5
    min_score: int = 0
    max_score: int = 10
    ideal_temp_low: float = 24.0
    ideal_temp_high: float = 32.0
    humidity_low: float = Field(default=70.0, ge=0.0, le=100.0)
    humidity_high: float = Field(default=85.0, ge=0.0, le=100.0)
    excellent_at: int = 8
    good_at: int = 6
    fair_at: int = 4
    condition_rules: list[ConditionRule] = Field(
        default_factory=_default_condition_rules
    )

    @model_validator(mode="after")
    def _check_ordering(self) -> "ScoringConfig":
        if self.min_score > self.max_score:
            raise ValueError("min_score must not exceed max_score")
        if self.ideal_temp_low > self.ideal_temp_high:
            raise ValueError("ideal_temp_low must not exceed ideal_temp_high")
        if self.humidity_low > self.humidity_high:
            raise ValueError("humidity_low must not exceed humidity_high")
        if not self.fair_at <= self.good_at <= self.excellent_at:
            raise ValueError("rating thresholds must be fair_at <= good_at <= excellent_at")
        return self


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    temperature_format: str = "{value}°C"
    humidity_format: str = "{value}%"
    wind_format: str = "{value} km/h"
    calm_wind_label: str = "Light"
    date_format: str = "%a, %d %b"
    max_outlook_days: int = Field(default=5, ge=1, le=10)

    @field_validator("temperature_format", "humidity_format", "wind_format")
    @classmethod
    def _check_template(cls, template: str) -> str:
        try:
            template.format(value=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"format must use only the {{value}} placeholder: {template!r}"
            ) from e
        return template


class FallbackConfig(BaseModel):
    model_config = {"extra": "forbid"}

    policy: FallbackPolicy = FallbackPolicy.RESET
    icon: WeatherIcon = WeatherIcon.SUN
    message: str = FALLBACK_MESSAGE


class ScheduleConfig(BaseModel):
    model_config = {"extra": "forbid"}

    interval_minutes: int = Field(default=DEFAULT_INTERVAL_MINUTES, ge=1)


class AdvisoryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    feeds: FeedConfig = FeedConfig()
    focus_area: FocusAreaConfig = FocusAreaConfig()
    scoring: ScoringConfig = ScoringConfig()
    display: DisplayConfig = DisplayConfig()
    fallback: FallbackConfig = FallbackConfig()
    schedule: ScheduleConfig = ScheduleConfig()
