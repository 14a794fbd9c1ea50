"""
Phase timeline: append-only record of cultivation phases
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Any, Dict, List, Optional
from datetime import datetime
import logging

from soil_server.database import utc_timestamp
from soil_server.exceptions import InvalidInputError, InvalidFormatError, NotFoundError, StorageError
from soil_server.models.phase import PhaseLog

logger = logging.getLogger(__name__)

def _parse_start_date(start_date: Any) -> datetime:
    if not isinstance(start_date, str):
        raise InvalidFormatError("Invalid startDate format")
    try:
        return datetime.fromisoformat(start_date.strip())
    except ValueError:
        raise InvalidFormatError("Invalid startDate format")

def set_phase(db: Session, phase: Optional[str], start_date: Any) -> Dict[str, object]:
    """Append a new phase record; prior records are never touched"""
    if not phase or not start_date:
        raise InvalidInputError("Phase and startDate are required")
    _parse_start_date(start_date)

    record = PhaseLog(phase=phase, start_date=start_date)
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error inserting phase log: {str(e)}")
        raise StorageError("Failed to set phase")

    logger.info(f"Phase set to {phase} starting from {start_date}")
    return {"id": record.id, "phase": record.phase, "startDate": record.start_date}

def current_phase(db: Session) -> Dict[str, str]:
    """Most recently inserted phase, regardless of its start date"""
    try:
        record = db.query(PhaseLog).order_by(PhaseLog.id.desc()).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching current phase: {str(e)}")
        raise StorageError("Failed to fetch current phase")

    if not record:
        raise NotFoundError("No phase data found")
    return {"phase": record.phase, "startDate": record.start_date}

def phase_history(db: Session) -> List[PhaseLog]:
    try:
        return db.query(PhaseLog).order_by(PhaseLog.start_date.desc()).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching phase logs: {str(e)}")
        raise StorageError("Failed to fetch phase logs")

def seed_default_phase(db: Session, default_phase: str) -> bool:
    """Insert ``default_phase`` starting now if the timeline is empty"""
    if db.query(PhaseLog).count() > 0:
        return False

    db.add(PhaseLog(phase=default_phase, start_date=utc_timestamp()))
    db.commit()
    logger.info("Inserted default phase into phase_logs")
    return True
