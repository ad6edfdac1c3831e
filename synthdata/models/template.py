# models/template.py
from sqlalchemy import Column, String, Text, Boolean, DateTime, JSON
from synthdata.utils.database import DatabaseUtils
from synthdata.utils.helpers import new_id, utcnow


class Template(DatabaseUtils.Base):
    __tablename__ = "templates"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text, default="")
    category = Column(String(100), default="")
    schema_json = Column(JSON, nullable=False, default=list)
    is_public = Column(Boolean, default=True)
    created_at = Column(DateTime, default=utcnow)
