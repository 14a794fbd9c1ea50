"""
In-process telemetry state: latest sensor snapshot and the event log buffer
"""
from collections import deque
from typing import Any, Dict, List, Optional
import logging
import threading

from fastapi import Request

from soil_server.database import utc_timestamp
from soil_server.exceptions import InvalidInputError
from soil_server.schemas.sensor import SensorSnapshot, EventLogEntry, NOT_AVAILABLE

logger = logging.getLogger(__name__)

SENSOR_KEYS = [f"sensor{i}" for i in range(1, 10)]

class TelemetryState:
    """Owns the latest snapshot and the event log.

    Nothing here is persisted; a restart starts from an all-unset snapshot and
    an empty log. The event log is a ring buffer of ``max_events`` entries and
    is also cleared by the daily rollover job.
    """

    def __init__(self, max_events: int = 5000):
        self._lock = threading.Lock()
        self._snapshot = SensorSnapshot()
        self._events: deque = deque(maxlen=max_events if max_events > 0 else None)
        self._last_time: Optional[str] = None

    def update_snapshot(self, moisture: Optional[str], status: Optional[str],
                        sensors: Optional[Dict[str, Optional[str]]] = None) -> SensorSnapshot:
        if moisture is None or status is None:
            raise InvalidInputError("Invalid data")

        sensors = sensors or {}
        snapshot = SensorSnapshot(
            averageMoisture=moisture,
            relayStatus=status,
            **{key: sensors.get(key) or NOT_AVAILABLE for key in SENSOR_KEYS},
        )
        with self._lock:
            self._snapshot = snapshot
        logger.info(f"Updated sensor data: {snapshot.model_dump()}")
        return snapshot

    def read_snapshot(self) -> SensorSnapshot:
        with self._lock:
            return self._snapshot

    def append_event(self, moisture: Any = None, relay_status: Any = None,
                     last_sensor: Any = None) -> EventLogEntry:
        with self._lock:
            timestamp = utc_timestamp()
            # ISO strings in the same format compare chronologically
            if self._last_time is not None and timestamp < self._last_time:
                timestamp = self._last_time
            self._last_time = timestamp
            entry = EventLogEntry(
                time=timestamp,
                moisture=moisture,
                relayStatus=relay_status,
                lastSensor=last_sensor,
            )
            self._events.append(entry)
        logger.info(f"Log received: {entry.model_dump()}")
        return entry

    def read_events(self) -> List[EventLogEntry]:
        with self._lock:
            return list(self._events)

    def clear_events(self) -> int:
        with self._lock:
            dropped = len(self._events)
            self._events.clear()
        return dropped

def get_telemetry_state(request: Request) -> TelemetryState:
    return request.app.state.telemetry
