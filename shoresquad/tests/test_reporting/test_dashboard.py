"""Tests for the advisory HTTP API."""

import pytest
from fastapi.testclient import TestClient

from shoresquad.dashboard import create_app
from shoresquad.display.applier import MemoryDisplay
from shoresquad.models.advisory import (
    CurrentDisplay,
    DailyOutlook,
    SuitabilityRating,
    WeatherIcon,
)

DAY = DailyOutlook(
    date="Thu, 22 Oct",
    weather_condition="Fair",
    temp_high="31°C",
    temp_low="24°C",
    humidity="65%",
    wind="15 km/h",
    icon=WeatherIcon.PARTLY_CLOUDY,
    suitability=SuitabilityRating.EXCELLENT,
)


@pytest.fixture
def display() -> MemoryDisplay:
    return MemoryDisplay()


@pytest.fixture
def client(display: MemoryDisplay) -> TestClient:
    return TestClient(create_app(display))


class TestAdvisoryApi:
    def test_current_before_first_run(self, client):
        resp = client.get("/api/weather/current")
        assert resp.status_code == 503

    def test_current(self, client, display):
        display.update_current(
            CurrentDisplay("30°C", WeatherIcon.PARTLY_CLOUDY, "Perfect for cleanup!", "fair")
        )
        resp = client.get("/api/weather/current")
        assert resp.status_code == 200
        body = resp.json()
        assert body["temp"] == "30°C"
        assert body["icon"] == "fa-cloud-sun"
        assert body["updated_at"] is not None

    def test_forecast(self, client, display):
        display.update_forecast([DAY])
        resp = client.get("/api/weather/forecast")
        assert resp.status_code == 200
        assert resp.json()[0]["cleanup_suitability"] == "Excellent"

    def test_forecast_html(self, client, display):
        display.update_forecast([DAY])
        resp = client.get("/api/weather/forecast.html")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "forecast-grid" in resp.text

    def test_forecast_empty(self, client):
        assert client.get("/api/weather/forecast").json() == []
