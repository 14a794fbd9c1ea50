"""
Daily water-usage ledger
"""
from sqlalchemy import String, cast, func
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from soil_server.exceptions import StorageError
from soil_server.models.water_usage import DailyWaterUsage

logger = logging.getLogger(__name__)

def store_today(dialect_name: str):
    # "today" is whatever the store considers the local date, as "YYYY-MM-DD"
    # text to match the String date column
    if dialect_name == "sqlite":
        return func.date("now", "localtime")
    return cast(func.current_date(), String)

def usage_for_today(db: Session) -> float:
    try:
        row = (
            db.query(DailyWaterUsage)
            .filter(DailyWaterUsage.date == store_today(db.get_bind().dialect.name))
            .first()
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error fetching today's water usage: {str(e)}")
        raise StorageError("Internal Server Error")

    return row.water_usage if row else 0

def insert_water_usage(db: Session, date: str, water_usage: float) -> DailyWaterUsage:
    row = DailyWaterUsage(date=date, water_usage=water_usage)
    try:
        db.add(row)
        db.commit()
        db.refresh(row)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error inserting water usage for {date}: {str(e)}")
        raise StorageError(str(e))

    logger.info(f"Recorded water usage {water_usage} for {date}")
    return row
