from sqlalchemy import Column, Integer, String, Text
from soil_server.database import Base

class Report(Base):
    __tablename__ = "weekly_reports"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    report_date = Column(String, nullable=False)  # "2024-06-01", stored as submitted
    image = Column(String, nullable=True)  # filename inside IMAGE_DIR, owned by this report
    description = Column(Text)
