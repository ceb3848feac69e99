"""Normalizer: picks the focus-area observation and builds daily outlooks from raw NEA payloads."""

import logging
import math
from datetime import date, datetime

from shoresquad.advisory.mapping import icon_for
from shoresquad.advisory.scoring import suitability
from shoresquad.config.schema import AdvisoryConfig, DisplayConfig
from shoresquad.ingest.errors import MalformedResponse
from shoresquad.models.advisory import CurrentConditions, DailyOutlook
from shoresquad.models.common import parse_timestamp

logger = logging.getLogger(__name__)


def select_current_batch(items: list, now: datetime) -> dict:
    """Return the latest batch stamped at or before now.

    Falls back to the first batch when none qualifies (future-only data,
    clock skew, unparseable stamps).
    """
    if not isinstance(items, list) or not items:
        raise MalformedResponse("Feed returned no items")

    best: dict | None = None
    best_ts: datetime | None = None
    for item in items:
        if not isinstance(item, dict):
            continue
        ts = parse_timestamp(item.get("timestamp"))
        if ts is None or ts > now:
            continue
        if best_ts is None or ts > best_ts:
            best, best_ts = item, ts

    if best is not None:
        return best
    if not isinstance(items[0], dict):
        raise MalformedResponse("First item is not an object")
    logger.debug("No batch at or before %s, using first batch", now.isoformat())
    return items[0]


def select_area_forecast(batch: dict, area_substrings: list[str]) -> dict:
    """Pick the area entry matching the first substring that matches anything.

    Substrings are tried in priority order against every area name,
    case-insensitively. Without any match the first entry is used.
    """
    forecasts = batch.get("forecasts")
    if not isinstance(forecasts, list) or not forecasts:
        raise MalformedResponse("Forecast batch has no area forecasts")

    for substring in area_substrings:
        needle = substring.lower()
        for entry in forecasts:
            if isinstance(entry, dict) and needle in str(entry.get("area", "")).lower():
                return entry

    if not isinstance(forecasts[0], dict):
        raise MalformedResponse("Area forecast entry is not an object")
    return forecasts[0]


def select_station_temperature(
    payload: dict, station_ids: list[str], now: datetime
) -> float | None:
    """Reading of the first preferred station present in the current batch, else None.

    A payload without usable batches or readings counts as no reading.
    """
    items = payload.get("items") if isinstance(payload, dict) else None
    if not isinstance(items, list) or not items:
        return None

    try:
        batch = select_current_batch(items, now)
    except MalformedResponse:
        logger.warning("Temperature feed has no usable batch")
        return None
    readings = batch.get("readings")
    if not isinstance(readings, list):
        logger.warning("Temperature batch has no readings list")
        return None
    by_station: dict[str, float] = {}
    for reading in readings:
        if not isinstance(reading, dict):
            continue
        value = reading.get("value")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            by_station.setdefault(str(reading.get("station_id")), float(value))

    for station_id in station_ids:
        if station_id in by_station:
            return by_station[station_id]
    return None


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (28.5 -> 29)."""
    return math.floor(value + 0.5)


def format_temperature(value: float, display: DisplayConfig) -> str:
    return display.temperature_format.format(value=round_half_up(value))


def normalize_current(
    forecast_payload: dict,
    temperature_payload: dict | None,
    config: AdvisoryConfig,
    now: datetime,
) -> CurrentConditions:
    """Build the focus area's current conditions.

    A missing temperature payload or station reading falls back to the
    configured default temperature.
    """
    batch = select_current_batch(forecast_payload.get("items"), now)
    entry = select_area_forecast(batch, config.focus_area.area_substrings)
    condition = entry.get("forecast")
    if not isinstance(condition, str):
        raise MalformedResponse("Area forecast entry has no forecast text")

    value = None
    if temperature_payload is not None:
        value = select_station_temperature(
            temperature_payload, config.focus_area.station_ids, now
        )
    if value is None:
        logger.info(
            "No reading from stations %s, using default %d",
            config.focus_area.station_ids, config.focus_area.default_temperature_c,
        )
        value = config.focus_area.default_temperature_c

    logger.debug("Current conditions for %s: %s", entry.get("area"), condition)
    return CurrentConditions(
        temperature_display=format_temperature(value, config.display),
        weather_condition=condition,
    )


def build_daily_outlooks(payload: dict, config: AdvisoryConfig) -> tuple[DailyOutlook, ...]:
    """Map the first few day entries, in received order, to DailyOutlook records."""
    items = payload.get("items")
    if not isinstance(items, list) or not items or not isinstance(items[0], dict):
        raise MalformedResponse("Four-day forecast returned no items")

    days = items[0].get("forecasts")
    if not isinstance(days, list) or not days:
        raise MalformedResponse("Four-day forecast has no day entries")

    limit = config.display.max_outlook_days
    return tuple(_daily_outlook(day, config) for day in days[:limit])


def _daily_outlook(day: dict, config: AdvisoryConfig) -> DailyOutlook:
    display = config.display
    try:
        condition = day["forecast"]
        temp_high = _number(day["temperature"]["high"], "temperature.high")
        temp_low = _number(day["temperature"]["low"], "temperature.low")
        humidity = _number(day["relative_humidity"]["high"], "relative_humidity.high")
        day_date = date.fromisoformat(str(day["date"])[:10])
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponse(f"Malformed day entry: {e}") from e
    if not isinstance(condition, str):
        raise MalformedResponse("Day entry has no forecast text")

    return DailyOutlook(
        date=day_date.strftime(display.date_format),
        weather_condition=condition,
        temp_high=format_temperature(temp_high, display),
        temp_low=format_temperature(temp_low, display),
        humidity=display.humidity_format.format(value=round_half_up(humidity)),
        wind=_format_wind(day.get("wind"), display),
        icon=icon_for(condition),
        suitability=suitability(condition, temp_high, humidity, config.scoring),
    )


def _format_wind(wind: dict | None, display: DisplayConfig) -> str:
    if not wind:
        return display.calm_wind_label
    try:
        high = _number(wind["speed"]["high"], "wind.speed.high")
    except (KeyError, TypeError, ValueError):
        return display.calm_wind_label
    return display.wind_format.format(value=round_half_up(high))


def _number(value: object, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} is not numeric: {value!r}")
    return float(value)
