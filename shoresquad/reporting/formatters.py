"""Output formatters for advisory results."""

import json
from html import escape

from shoresquad.models.advisory import AdvisoryResult, CurrentDisplay, DailyOutlook


def format_current_text(c: CurrentDisplay) -> str:
    """Plain text current conditions for logging."""
    return f"Now: {c.temperature_display} [{c.icon.value}] {c.recommendation}"


def format_outlook_text(outlook: list[DailyOutlook]) -> str:
    if not outlook:
        return "Outlook: unavailable"
    lines = ["=== Beach Cleanup Forecast ==="]
    for day in outlook:
        lines.append(
            f"{day.date}: {day.weather_condition} | "
            f"{day.temp_high}/{day.temp_low} | RH {day.humidity} | "
            f"wind {day.wind} | {day.suitability.value}"
        )
    return "\n".join(lines)


def _outlook_dict(day: DailyOutlook) -> dict:
    return {
        "date": day.date,
        "weather": day.weather_condition,
        "temp_high": day.temp_high,
        "temp_low": day.temp_low,
        "humidity": day.humidity,
        "wind": day.wind,
        "icon": day.icon.value,
        "cleanup_suitability": day.suitability.value,
    }


def current_to_dict(c: CurrentDisplay) -> dict:
    return {
        "temp": c.temperature_display,
        "icon": c.icon.value,
        "desc": c.recommendation,
        "condition": c.condition_slug,
    }


def outlook_to_list(outlook: list[DailyOutlook]) -> list[dict]:
    return [_outlook_dict(day) for day in outlook]


def format_result_json(r: AdvisoryResult) -> str:
    """JSON result for programmatic consumption."""
    data = {
        "run_seq": r.run_seq,
        "generated_at": r.generated_at,
        "is_fallback": r.is_fallback,
        "error": r.error,
        "current": current_to_dict(r.current),
        "forecast": outlook_to_list(list(r.outlook)),
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_forecast_html(outlook: list[DailyOutlook]) -> str:
    """Forecast grid markup for the page's weather widget. Empty when no outlook."""
    if not outlook:
        return ""
    days = "".join(
        '<div class="forecast-day">'
        f'<div class="forecast-date">{escape(day.date)}</div>'
        f'<div class="forecast-icon"><i class="fas {day.icon.value}"></i></div>'
        '<div class="forecast-temps">'
        f'<span class="temp-high">{escape(day.temp_high)}</span>'
        f'<span class="temp-low">{escape(day.temp_low)}</span>'
        "</div>"
        f'<div class="forecast-weather">{escape(day.weather_condition)}</div>'
        f'<div class="cleanup-rating {day.suitability.value.lower()}">'
        f"{day.suitability.value}</div>"
        "</div>"
        for day in outlook
    )
    return (
        "<h3>5-Day Beach Cleanup Forecast</h3>"
        f'<div class="forecast-grid">{days}</div>'
    )
