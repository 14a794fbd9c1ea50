# soil_server/main.py
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from soil_server.database import settings
from soil_server.init_db import init_database
from soil_server.services.scheduler import start_scheduler, stop_scheduler
from soil_server.state import TelemetryState

# Routers
from soil_server.routers import health_router, sensors_router, phases_router
from soil_server.routers import water_usage_router, reports_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Soil Moisture Server",
        description="Telemetry collection point for a soil-moisture monitoring device",
        version="1.0.0",
    )
    app.state.ready = False
    app.state.telemetry = TelemetryState(max_events=settings.event_log_max_entries)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount router
    app.include_router(health_router)            # /healthz
    app.include_router(sensors_router)           # /update, /data, /log, /today-log
    app.include_router(phases_router)            # /set-phase, /current-phase, /phase-logs
    app.include_router(water_usage_router)       # /water-usage-today
    app.include_router(reports_router)           # /upload-report, /report/{id}, ...

    os.makedirs(settings.image_dir, exist_ok=True)
    app.mount("/images", StaticFiles(directory=settings.image_dir), name="images")

    # Startup: schema + default phase, then ready, then scheduler
    @app.on_event("startup")
    async def _startup():
        init_database()
        app.state.ready = True
        logger.info("Database initialized, server ready")
        if settings.scheduler_enabled and settings.event_log_daily_rollover:
            start_scheduler(app.state.telemetry)

    @app.on_event("shutdown")
    async def _shutdown():
        stop_scheduler()

    return app


app = create_app()
