from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from soil_server.database import get_db
from soil_server.exceptions import InvalidInputError, NotFoundError, StorageError
from soil_server.schemas.phase import PhaseCreate, PhaseResponse, CurrentPhaseResponse, PhaseLogResponse
from soil_server.services import phases

router = APIRouter(tags=["phases"])

@router.post("/set-phase", response_model=PhaseResponse)
def set_phase(payload: PhaseCreate, db: Session = Depends(get_db)):
    """Start a new phase"""
    try:
        return phases.set_phase(db, payload.phase, payload.startDate)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/current-phase", response_model=CurrentPhaseResponse)
def get_current_phase(db: Session = Depends(get_db)):
    """Get the most recently set phase"""
    try:
        return phases.current_phase(db)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/phase-logs", response_model=List[PhaseLogResponse])
def get_phase_logs(db: Session = Depends(get_db)):
    """Get all phases, latest start date first"""
    try:
        return phases.phase_history(db)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
