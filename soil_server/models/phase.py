from sqlalchemy import Column, Integer, String
from soil_server.database import Base

class PhaseLog(Base):
    __tablename__ = "phase_logs"
    
    id = Column(Integer, primary_key=True, index=True)
    phase = Column(String, nullable=False)  # "vegetative", "flowering", ...
    start_date = Column(String, nullable=False)  # ISO-8601 as supplied by the caller
