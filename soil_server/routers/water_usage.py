from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from soil_server.database import get_db
from soil_server.exceptions import StorageError
from soil_server.schemas.water_usage import WaterUsageResponse
from soil_server.services.water_usage import usage_for_today

router = APIRouter(tags=["water-usage"])

@router.get("/water-usage-today", response_model=WaterUsageResponse)
def get_water_usage_today(db: Session = Depends(get_db)):
    """Water used today, 0 when nothing has been recorded yet"""
    try:
        return {"waterUsage": usage_for_today(db)}
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
