"""Conditions fetcher: pulls the NEA feeds and hands them to the normalizer."""

import logging
from datetime import datetime

from shoresquad.config.schema import AdvisoryConfig
from shoresquad.ingest.errors import DataUnavailable
from shoresquad.ingest.nea_client import NeaClient
from shoresquad.ingest.normalizer import build_daily_outlooks, normalize_current
from shoresquad.models.advisory import CurrentConditions, DailyOutlook
from shoresquad.models.common import utc_now

logger = logging.getLogger(__name__)


class ConditionsFetcher:
    def __init__(self, client: NeaClient, config: AdvisoryConfig):
        self.client = client
        self.config = config

    def fetch_current(self, now: datetime | None = None) -> CurrentConditions:
        """Current conditions for the focus area.

        The condition feed is required; the temperature feed is fetched after
        it and degrades to the default temperature when unavailable or unusable.
        """
        if now is None:
            now = utc_now()

        forecast_payload = self.client.get_two_hour_forecast()

        temperature_payload: dict | None
        try:
            temperature_payload = self.client.get_air_temperature()
        except DataUnavailable as e:
            logger.warning("Temperature feed unavailable, using default: %s", e)
            temperature_payload = None

        return normalize_current(forecast_payload, temperature_payload, self.config, now)

    def fetch_outlook(self) -> tuple[DailyOutlook, ...]:
        payload = self.client.get_four_day_forecast()
        outlook = build_daily_outlooks(payload, self.config)
        logger.info("Built %d-day outlook", len(outlook))
        return outlook
