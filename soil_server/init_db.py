"""
Database initialization: schema creation and default phase seeding.

Runs to completion before the application reports itself ready, so any
handler reading the phase timeline always finds at least one record.
"""
import logging

from soil_server.database import SessionLocal, engine, settings
from soil_server.models import Base
from soil_server.services.phases import seed_default_phase

logger = logging.getLogger(__name__)

def init_database():
    """Create tables, then seed the default phase if the timeline is empty"""

    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        if not seed_default_phase(db, settings.default_phase):
            logger.info("Phase timeline already initialized")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
