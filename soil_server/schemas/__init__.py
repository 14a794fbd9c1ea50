from .sensor import SensorSnapshot, SnapshotAccepted, LogPayload, EventLogEntry, LogAccepted
from .phase import PhaseCreate, PhaseResponse, CurrentPhaseResponse, PhaseLogResponse
from .report import ReportResponse, ReportWriteResponse, ReportDeleteResponse
from .water_usage import WaterUsageResponse

__all__ = [
    "SensorSnapshot",
    "SnapshotAccepted",
    "LogPayload",
    "EventLogEntry",
    "LogAccepted",
    "PhaseCreate",
    "PhaseResponse",
    "CurrentPhaseResponse",
    "PhaseLogResponse",
    "ReportResponse",
    "ReportWriteResponse",
    "ReportDeleteResponse",
    "WaterUsageResponse"
]
