from pydantic import BaseModel
from typing import Optional, Any

class PhaseCreate(BaseModel):
    phase: Optional[str] = None
    startDate: Optional[Any] = None  # anything but text is rejected as a bad format

class PhaseResponse(BaseModel):
    id: int
    phase: str
    startDate: str

class CurrentPhaseResponse(BaseModel):
    phase: str
    startDate: str

class PhaseLogResponse(BaseModel):
    phase: str
    start_date: str
    
    class Config:
        from_attributes = True
