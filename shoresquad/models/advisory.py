"""Advisory data models: ratings, icons, and the per-run result value."""

from dataclasses import dataclass, field
from enum import StrEnum


class SuitabilityRating(StrEnum):
    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"

    @property
    def ordinal(self) -> int:
        return list(SuitabilityRating).index(self)


class WeatherIcon(StrEnum):
    """Font Awesome icon classes used by the page widgets."""

    LIGHTNING = "fa-bolt"
    HEAVY_RAIN = "fa-cloud-rain"
    LIGHT_RAIN = "fa-cloud-drizzle"
    CLOUD = "fa-cloud"
    PARTLY_CLOUDY = "fa-cloud-sun"
    HAZE = "fa-smog"
    SUN = "fa-sun"


@dataclass(frozen=True)
class CurrentConditions:
    temperature_display: str
    weather_condition: str


@dataclass(frozen=True)
class CurrentDisplay:
    temperature_display: str
    icon: WeatherIcon
    recommendation: str
    condition_slug: str = ""  # e.g. "partly-cloudy-(day)"


@dataclass(frozen=True)
class DailyOutlook:
    date: str  # display string, e.g. "Tue, 20 Oct"
    weather_condition: str
    temp_high: str
    temp_low: str
    humidity: str
    wind: str
    icon: WeatherIcon
    suitability: SuitabilityRating


@dataclass(frozen=True)
class AdvisoryResult:
    run_seq: int
    generated_at: str
    current: CurrentDisplay
    outlook: tuple[DailyOutlook, ...] = field(default_factory=tuple)
    is_fallback: bool = False
    error: str | None = None
