"""Advisory API: serves the latest applied advisory to the static site."""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from shoresquad.display.applier import MemoryDisplay
from shoresquad.reporting.formatters import (
    current_to_dict,
    format_forecast_html,
    outlook_to_list,
)


def create_app(display: MemoryDisplay) -> FastAPI:
    app = FastAPI(title="ShoreSquad Weather Advisory", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/api/weather/current")
    def get_current():
        """Current conditions widget payload."""
        if display.current is None:
            raise HTTPException(status_code=503, detail="No advisory yet")
        return {**current_to_dict(display.current), "updated_at": display.updated_at}

    @app.get("/api/weather/forecast")
    def get_forecast():
        return outlook_to_list(display.outlook)

    @app.get("/api/weather/forecast.html")
    def get_forecast_html():
        return HTMLResponse(format_forecast_html(display.outlook))

    return app
