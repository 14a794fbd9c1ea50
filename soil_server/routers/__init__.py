from .health import router as health_router
from .sensors import router as sensors_router
from .phases import router as phases_router
from .water_usage import router as water_usage_router
from .reports import router as reports_router

__all__ = [
    "health_router",
    "sensors_router",
    "phases_router",
    "water_usage_router",
    "reports_router"
]
