from fastapi import APIRouter, Depends, HTTPException, File, Form, UploadFile
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from soil_server.database import get_db, settings
from soil_server.exceptions import InvalidInputError, NotFoundError, StorageError
from soil_server.schemas.report import ReportResponse, ReportWriteResponse, ReportDeleteResponse
from soil_server.services import reports
from soil_server.services.uploads import stage_upload

logger = logging.getLogger(__name__)
router = APIRouter(tags=["reports"])

@router.post("/upload-report", response_model=ReportWriteResponse)
def upload_report(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    reportDate: Optional[str] = Form(None),
    reportImage: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """Save a new report with an optional image"""
    image = stage_upload(reportImage, settings.image_dir)
    try:
        report = reports.create_report(db, title, reportDate, description, image)
    except StorageError as e:
        reports.discard_image(settings.image_dir, image)
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Report saved successfully", "report": report}

@router.get("/weekly-reports", response_model=List[ReportResponse])
def get_weekly_reports(db: Session = Depends(get_db)):
    """Get all reports"""
    try:
        return reports.list_reports(db)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/report/{report_id}", response_model=ReportResponse)
def get_report(report_id: int, db: Session = Depends(get_db)):
    """Get report by ID"""
    try:
        return reports.get_report(db, report_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

@router.put("/update-report/{report_id}", response_model=ReportWriteResponse)
def update_report(
    report_id: int,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    reportDate: Optional[str] = Form(None),
    reportImage: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
):
    """Update a report; the current image is kept unless a new one is sent"""
    logger.info(f"PUT request received for report ID: {report_id}")
    image = stage_upload(reportImage, settings.image_dir)
    try:
        report = reports.update_report(db, report_id, title, reportDate, description, image)
    except InvalidInputError as e:
        reports.discard_image(settings.image_dir, image)
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        reports.discard_image(settings.image_dir, image)
        raise HTTPException(status_code=404, detail=str(e))
    except StorageError as e:
        reports.discard_image(settings.image_dir, image)
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Report updated successfully", "report": report}

@router.delete("/delete-report/{report_id}", response_model=ReportDeleteResponse)
def delete_report(report_id: int, db: Session = Depends(get_db)):
    """Delete a report and, best-effort, its image"""
    try:
        reports.delete_report(db, report_id, settings.image_dir)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": "Report deleted successfully", "id": report_id}
