from soil_server.database import Base
from .report import Report
from .phase import PhaseLog
from .water_usage import DailyWaterUsage

__all__ = [
    "Base",
    "Report",
    "PhaseLog",
    "DailyWaterUsage"
]
