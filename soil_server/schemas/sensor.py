from pydantic import BaseModel
from typing import Optional, Any

NOT_AVAILABLE = "N/A"

class SensorSnapshot(BaseModel):
    averageMoisture: Optional[str] = None
    relayStatus: Optional[str] = None
    sensor1: Optional[str] = None
    sensor2: Optional[str] = None
    sensor3: Optional[str] = None
    sensor4: Optional[str] = None
    sensor5: Optional[str] = None
    sensor6: Optional[str] = None
    sensor7: Optional[str] = None
    sensor8: Optional[str] = None
    sensor9: Optional[str] = None

class SnapshotAccepted(BaseModel):
    message: str = "Data received"
    data: SensorSnapshot

class LogPayload(BaseModel):
    moisture: Optional[Any] = None
    relayStatus: Optional[Any] = None
    lastSensor: Optional[Any] = None

class EventLogEntry(BaseModel):
    time: str
    moisture: Optional[Any] = None
    relayStatus: Optional[Any] = None
    lastSensor: Optional[Any] = None

class LogAccepted(BaseModel):
    message: str = "Log received"
    entry: EventLogEntry
