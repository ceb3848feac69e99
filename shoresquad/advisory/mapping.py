"""Condition text -> icon and recommendation copy.

The two tables overlap but are ordered independently: "Partly Cloudy" hits
the plain "cloudy" icon rule first, while the copy table checks
"partly cloudy" before "cloudy". Keep each order as is.
"""

import re

from shoresquad.models.advisory import CurrentConditions, CurrentDisplay, WeatherIcon

ICON_RULES: tuple[tuple[tuple[str, ...], WeatherIcon], ...] = (
    (("thundery", "thunder"), WeatherIcon.LIGHTNING),
    (("heavy rain", "heavy shower"), WeatherIcon.HEAVY_RAIN),
    (("rain", "shower"), WeatherIcon.LIGHT_RAIN),
    (("cloudy",), WeatherIcon.CLOUD),
    (("partly cloudy", "fair"), WeatherIcon.PARTLY_CLOUDY),
    (("hazy", "mist"), WeatherIcon.HAZE),
)
DEFAULT_ICON = WeatherIcon.SUN

RECOMMENDATION_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("thundery", "heavy rain"), "Not ideal for cleanup"),
    (("rain", "shower"), "Consider postponing"),
    (("fair", "sunny"), "Perfect for cleanup!"),
    (("partly cloudy",), "Great conditions!"),
    (("cloudy",), "Good for cleanup!"),
    (("hazy",), "Okay, but stay hydrated"),
)
DEFAULT_RECOMMENDATION = "Check conditions!"


def _first_match(condition: str, rules, default):
    lowered = condition.lower()
    for keywords, outcome in rules:
        if any(keyword in lowered for keyword in keywords):
            return outcome
    return default


def icon_for(condition: str) -> WeatherIcon:
    return _first_match(condition, ICON_RULES, DEFAULT_ICON)


def recommendation_for(condition: str) -> str:
    return _first_match(condition, RECOMMENDATION_RULES, DEFAULT_RECOMMENDATION)


def condition_slug(condition: str) -> str:
    """Lower-case the condition and join words with dashes ("Partly Cloudy (Day)" -> "partly-cloudy-(day)")."""
    return re.sub(r"\s+", "-", condition.lower())


def current_display(conditions: CurrentConditions) -> CurrentDisplay:
    condition = conditions.weather_condition
    return CurrentDisplay(
        temperature_display=conditions.temperature_display,
        icon=icon_for(condition),
        recommendation=recommendation_for(condition),
        condition_slug=condition_slug(condition),
    )
