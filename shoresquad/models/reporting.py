"""Operational health models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HealthStatus:
    two_hour_forecast_reachable: bool
    air_temperature_reachable: bool
    four_day_forecast_reachable: bool

    @property
    def all_ok(self) -> bool:
        return (
            self.two_hour_forecast_reachable
            and self.air_temperature_reachable
            and self.four_day_forecast_reachable
        )
