"""Weather dashboard: FastAPI JSON API over the weather service."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from weatherboard.config.schema import AppConfig
from weatherboard.ingest.cwa_client import CwaClient
from weatherboard.models.common import ALL_REGIONS
from weatherboard.reporting.display import REGION_LABELS
from weatherboard.reporting.formatters import city_to_dict
from weatherboard.service.scheduler import RefreshScheduler
from weatherboard.service.weather_service import REGION_FILTERS, WeatherService
from weatherboard.transform.regions import REGION_CATALOG


class RegionSelection(BaseModel):
    region: str


def create_app(
    config: AppConfig,
    service: WeatherService | None = None,
    schedule: bool = True,
) -> FastAPI:
    if service is None:
        service = WeatherService(
            CwaClient.from_config(config.feed),
            default_region=config.display.default_region,
        )
    scheduler = RefreshScheduler(
        service,
        interval_seconds=config.schedule.refresh_interval_minutes * 60,
        refresh_on_start=config.schedule.refresh_on_start,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if schedule:
            scheduler.start()
        try:
            yield
        finally:
            await scheduler.stop()

    app = FastAPI(title="Weather Dashboard", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.service = service
    app.state.scheduler = scheduler

    def _status() -> dict:
        state = service.state
        summary = service.last_summary
        return {
            "status": state.status.value,
            "is_loading": state.is_loading,
            "error": state.error,
            "selected_region": state.selected_region,
            "updated_at": state.updated_at,
            "city_count": len(state.cities),
            "skipped": summary.skipped if summary else [],
        }

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/status")
    async def get_status():
        """Service state: loading flag, last error, selected region."""
        return _status()

    @app.get("/api/cities")
    async def get_cities(region: str | None = None):
        """Cities for the given region, or for the selected one."""
        if region is None:
            cities = service.filtered_cities
        else:
            try:
                cities = service.filtered_view(region)
            except ValueError as e:
                raise HTTPException(400, str(e)) from e
        return [city_to_dict(c) for c in cities]

    @app.get("/api/regions")
    async def get_regions():
        return [
            {
                "id": r,
                "label": REGION_LABELS[r],
                "cities": [
                    n for n, reg in REGION_CATALOG.items()
                    if r == ALL_REGIONS or reg == r
                ],
            }
            for r in REGION_FILTERS
        ]

    # ── Control endpoints ───────────────────────────────────────────

    @app.put("/api/region")
    async def select_region(selection: RegionSelection):
        try:
            service.selected_region = selection.region
        except ValueError as e:
            raise HTTPException(400, str(e)) from e
        return {"selected_region": service.selected_region}

    @app.post("/api/refresh")
    async def refresh_weather():
        """Run a refresh cycle now and report the resulting state."""
        await service.refresh_weather()
        return _status()

    return app
