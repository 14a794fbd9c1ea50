"""
Report archive: weekly inspection reports and their attached image files.

A report owns at most one image, stored as a bare filename inside the image
directory. Record and file are not updated atomically:

- updating with a new image keeps the previous file on disk (it is no longer
  referenced by anything);
- deleting removes the file best-effort before removing the row, so a failed
  removal leaves an orphaned file but never blocks the delete.
"""
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
import logging
import os

from soil_server.exceptions import InvalidInputError, NotFoundError, StorageError
from soil_server.models.report import Report

logger = logging.getLogger(__name__)

def discard_image(image_dir: str, filename: Optional[str]) -> bool:
    """Best-effort removal of an image file; failures are only logged"""
    if not filename:
        return False
    try:
        os.remove(os.path.join(image_dir, filename))
        return True
    except OSError as e:
        logger.error(f"Failed to delete image {filename}: {e}")
        return False

def create_report(db: Session, title: Optional[str], report_date: Optional[str],
                  description: Optional[str], image: Optional[str] = None) -> Report:
    # Fields are not checked here; the table's NOT NULL constraints are the
    # only guard, so a missing title or date surfaces as a storage error.
    report = Report(title=title, report_date=report_date, image=image, description=description)
    try:
        db.add(report)
        db.commit()
        db.refresh(report)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving report: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Report {report.id} saved (image={image})")
    return report

def get_report(db: Session, report_id: int) -> Report:
    try:
        report = db.query(Report).filter(Report.id == report_id).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching report {report_id}: {str(e)}")
        raise StorageError("Failed to retrieve the report.")

    if not report:
        raise NotFoundError("Report not found.")
    return report

def list_reports(db: Session) -> List[Report]:
    try:
        return db.query(Report).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error listing reports: {str(e)}")
        raise StorageError(str(e))

def update_report(db: Session, report_id: int, title: Optional[str], report_date: Optional[str],
                  description: Optional[str], image: Optional[str] = None) -> Report:
    """Overwrite a report's fields.

    ``image`` replaces the stored reference when given; when omitted the
    existing reference is kept. The replaced file is left on disk.
    """
    if not title or not report_date or not description:
        raise InvalidInputError("Title, date, and description are required.")

    try:
        report = db.query(Report).filter(Report.id == report_id).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching report {report_id}: {str(e)}")
        raise StorageError("Failed to retrieve the current report.")

    if not report:
        raise NotFoundError("Report not found.")

    if image and report.image and image != report.image:
        logger.warning(f"Report {report_id} image replaced, {report.image} left on disk")

    report.title = title
    report.report_date = report_date
    report.description = description
    report.image = image or report.image
    try:
        db.commit()
        db.refresh(report)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating report {report_id}: {str(e)}")
        raise StorageError("Failed to update the report in the database.")

    logger.info(f"Report {report_id} updated")
    return report

def delete_report(db: Session, report_id: int, image_dir: str) -> int:
    """Remove the report's image (best-effort) and then the report itself.

    Returns the number of rows deleted; an unknown id deletes nothing and is
    not an error.
    """
    try:
        report = db.query(Report).filter(Report.id == report_id).first()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching report {report_id}: {str(e)}")
        raise StorageError(str(e))

    if report and report.image:
        discard_image(image_dir, report.image)

    try:
        deleted = db.query(Report).filter(Report.id == report_id).delete()
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting report {report_id}: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Report {report_id} deleted ({deleted} row)")
    return deleted
