# models/project.py
from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from synthdata.utils.database import DatabaseUtils
from synthdata.utils.helpers import new_id, utcnow


class Project(DatabaseUtils.Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, default="")
    industry = Column(String(50), default="fintech")
    created_at = Column(DateTime, default=utcnow, index=True)

    datasets = relationship("Dataset", back_populates="project")

    def __repr__(self):
        return f"<Project(id={self.id}, name='{self.name}', industry='{self.industry}')>"
