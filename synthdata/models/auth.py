# models/auth.py
from sqlalchemy import Column, String, Boolean, DateTime
from synthdata.utils.database import DatabaseUtils
from synthdata.utils.helpers import new_id, utcnow


class User(DatabaseUtils.Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=utcnow)
