from datetime import datetime, timezone
from typing import List

from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker
from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./moisture.db")
    image_dir: str = os.getenv("IMAGE_DIR", "public/images")
    default_phase: str = os.getenv("DEFAULT_PHASE", "vegetative")

    event_log_max_entries: int = int(os.getenv("EVENT_LOG_MAX_ENTRIES", "5000"))
    event_log_daily_rollover: bool = os.getenv("EVENT_LOG_DAILY_ROLLOVER", "true").lower() == "true"
    scheduler_enabled: bool = os.getenv("SCHEDULER_ENABLED", "true").lower() == "true"

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

settings = Settings()

engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if "sqlite" in settings.database_url else {}
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_utc_datetime() -> datetime:
    return datetime.now(timezone.utc)

def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a trailing Z"""
    return get_utc_datetime().isoformat(timespec="milliseconds").replace("+00:00", "Z")
