"""NEA environment API client (data.gov.sg). No retries: the next scheduled run retries."""

import logging

import httpx

from shoresquad.config.defaults import DEFAULT_USER_AGENT, NEA_BASE_URL
from shoresquad.ingest.errors import DataUnavailable, MalformedResponse

logger = logging.getLogger(__name__)

TWO_HOUR_FORECAST_PATH = "/environment/2-hour-weather-forecast"
AIR_TEMPERATURE_PATH = "/environment/air-temperature"
FOUR_DAY_FORECAST_PATH = "/environment/4-day-weather-forecast"


class NeaClient:
    def __init__(
        self,
        base_url: str = NEA_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    def get_two_hour_forecast(self) -> dict:
        """Near-term forecast: timestamped batches of per-area conditions."""
        return self._get(TWO_HOUR_FORECAST_PATH)

    def get_air_temperature(self) -> dict:
        """Live readings: timestamped batches of per-station temperatures."""
        return self._get(AIR_TEMPERATURE_PATH)

    def get_four_day_forecast(self) -> dict:
        """Multi-day outlook: one batch with an ordered list of day entries."""
        return self._get(FOUR_DAY_FORECAST_PATH)

    def _get(self, path: str) -> dict:
        url = f"{self.base_url}{path}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, headers=headers)
        except httpx.RequestError as e:
            logger.warning("NEA request failed: %s -> %s", path, e)
            raise DataUnavailable(f"Request failed: {e}", feed=path) from e

        if not resp.is_success:
            logger.warning("NEA %s returned %d", path, resp.status_code)
            raise DataUnavailable(
                f"HTTP {resp.status_code} from {path}",
                feed=path,
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("NEA %s returned a non-JSON body", path)
            raise MalformedResponse(f"Invalid JSON from {path}", feed=path) from e

        if not isinstance(data, dict):
            raise MalformedResponse(
                f"Expected a JSON object from {path}, got {type(data).__name__}",
                feed=path,
            )
        return data
