import enum
import uuid

from sqlalchemy import Column, String, DateTime, Enum, func
from course_catalog.db.session import Base

class Role(str, enum.Enum):
    user = "user"
    admin = "admin"

def new_id() -> str:
    return uuid.uuid4().hex

class User(Base):
    __tablename__ = "users"
    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(Role, native_enum=False, length=20), nullable=False, default=Role.user)
    created_at = Column(DateTime, server_default=func.now())
