"""Health checker: reachability of each NEA feed."""

import logging

from shoresquad.ingest.errors import DataUnavailable
from shoresquad.ingest.nea_client import NeaClient
from shoresquad.models.reporting import HealthStatus

logger = logging.getLogger(__name__)


class HealthChecker:
    def __init__(self, client: NeaClient):
        self.client = client

    def check(self) -> HealthStatus:
        return HealthStatus(
            two_hour_forecast_reachable=self._reachable(self.client.get_two_hour_forecast),
            air_temperature_reachable=self._reachable(self.client.get_air_temperature),
            four_day_forecast_reachable=self._reachable(self.client.get_four_day_forecast),
        )

    def _reachable(self, fetch) -> bool:
        try:
            fetch()
            return True
        except DataUnavailable as e:
            logger.info("Health check failed: %s", e)
            return False
