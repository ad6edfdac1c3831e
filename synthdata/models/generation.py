# models/generation.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from synthdata.utils.database import DatabaseUtils
from synthdata.utils.helpers import new_id, utcnow


class SyntheticGeneration(DatabaseUtils.Base):
    __tablename__ = "synthetic_generations"

    id = Column(String(36), primary_key=True, default=new_id)
    dataset_id = Column(String(36), ForeignKey("datasets.id"), index=True, nullable=False)
    user_id = Column(String(36), ForeignKey("users.id"), index=True, nullable=False)
    model_type = Column(String(50), nullable=False)
    parameters = Column(JSON, nullable=False, default=dict)
    row_count = Column(Integer, nullable=False)
    status = Column(String(50), default="completed")
    started_at = Column(DateTime)
    completed_at = Column(DateTime)
    created_at = Column(DateTime, default=utcnow, index=True)

    dataset = relationship("Dataset", back_populates="generations")
    privacy_metrics = relationship("PrivacyMetrics", order_by="PrivacyMetrics.id")
    utility_metrics = relationship("UtilityMetrics", order_by="UtilityMetrics.id")
    compliance_reports = relationship("ComplianceReport", order_by="ComplianceReport.id")
