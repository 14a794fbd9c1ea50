# Device-facing endpoints: latest snapshot and event log
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException

from soil_server.exceptions import InvalidInputError
from soil_server.schemas.sensor import SensorSnapshot, SnapshotAccepted, LogPayload, EventLogEntry, LogAccepted
from soil_server.state import TelemetryState, get_telemetry_state

router = APIRouter(tags=["sensors"])

# ---------- Ingest: the controller pushes readings as query parameters ----------
@router.get("/update", response_model=SnapshotAccepted)
def update(
    moisture: Optional[str] = None,
    status: Optional[str] = None,
    sensor1: Optional[str] = None,
    sensor2: Optional[str] = None,
    sensor3: Optional[str] = None,
    sensor4: Optional[str] = None,
    sensor5: Optional[str] = None,
    sensor6: Optional[str] = None,
    sensor7: Optional[str] = None,
    sensor8: Optional[str] = None,
    sensor9: Optional[str] = None,
    state: TelemetryState = Depends(get_telemetry_state),
):
    sensors = {
        "sensor1": sensor1, "sensor2": sensor2, "sensor3": sensor3,
        "sensor4": sensor4, "sensor5": sensor5, "sensor6": sensor6,
        "sensor7": sensor7, "sensor8": sensor8, "sensor9": sensor9,
    }
    try:
        snapshot = state.update_snapshot(moisture, status, sensors)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Data received", "data": snapshot}

@router.get("/data", response_model=SensorSnapshot)
def get_data(state: TelemetryState = Depends(get_telemetry_state)):
    """Latest sensor snapshot"""
    return state.read_snapshot()

# ---------- Event log ----------
@router.post("/log", response_model=LogAccepted)
def append_log(payload: LogPayload, state: TelemetryState = Depends(get_telemetry_state)):
    # the server clock is authoritative; any time sent by the device is ignored
    entry = state.append_event(payload.moisture, payload.relayStatus, payload.lastSensor)
    return {"message": "Log received", "entry": entry}

@router.get("/today-log", response_model=List[EventLogEntry])
def get_today_log(state: TelemetryState = Depends(get_telemetry_state)):
    return state.read_events()
