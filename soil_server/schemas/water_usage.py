from pydantic import BaseModel

class WaterUsageResponse(BaseModel):
    waterUsage: float = 0
