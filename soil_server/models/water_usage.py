from sqlalchemy import Column, Integer, String, Float
from soil_server.database import Base

class DailyWaterUsage(Base):
    __tablename__ = "daily_water_usage"
    
    id = Column(Integer, primary_key=True, index=True)
    date = Column(String, nullable=False, index=True)  # local calendar date, "YYYY-MM-DD"
    water_usage = Column(Float, nullable=False)
