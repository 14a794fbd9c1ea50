from pydantic import BaseModel
from typing import Optional

class ReportResponse(BaseModel):
    id: int
    title: str
    report_date: str
    image: Optional[str] = None
    description: Optional[str] = None
    
    class Config:
        from_attributes = True

class ReportWriteResponse(BaseModel):
    message: str
    report: ReportResponse

class ReportDeleteResponse(BaseModel):
    message: str = "Report deleted successfully"
    id: int
