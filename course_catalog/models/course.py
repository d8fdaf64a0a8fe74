from sqlalchemy import Column, String, Text, Float, DateTime, func
from course_catalog.db.session import Base
from course_catalog.models.user import new_id

class Course(Base):
    __tablename__ = "courses"
    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    image = Column(String(1024), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
