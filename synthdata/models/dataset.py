# models/dataset.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from synthdata.utils.database import DatabaseUtils
from synthdata.utils.helpers import new_id, utcnow


class Dataset(DatabaseUtils.Base):
    __tablename__ = "datasets"

    id = Column(String(36), primary_key=True, default=new_id)
    project_id = Column(String(36), ForeignKey("projects.id"), index=True, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, default="")
    schema_json = Column(JSON, nullable=False, default=list)
    row_count = Column(Integer, nullable=False, default=0)
    data_type = Column(String(50), default="tabular")
    status = Column(String(50), default="uploaded")
    source = Column(String(50), default="file")
    created_at = Column(DateTime, default=utcnow, index=True)

    project = relationship("Project", back_populates="datasets")
    generations = relationship("SyntheticGeneration", back_populates="dataset")
