# models/metrics.py
from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey, JSON
from synthdata.utils.database import DatabaseUtils
from synthdata.utils.helpers import utcnow


class PrivacyMetrics(DatabaseUtils.Base):
    __tablename__ = "privacy_metrics"

    id = Column(Integer, primary_key=True, index=True)
    generation_id = Column(String(36), ForeignKey("synthetic_generations.id"), index=True, nullable=False)
    epsilon = Column(Float, nullable=False)
    k_anonymity = Column(Integer, nullable=False)
    privacy_risk_score = Column(Float, nullable=False)
    leakage_probability = Column(Float, nullable=False)
    metrics_json = Column(JSON, default=dict)
    created_at = Column(DateTime, default=utcnow)


class UtilityMetrics(DatabaseUtils.Base):
    __tablename__ = "utility_metrics"

    id = Column(Integer, primary_key=True, index=True)
    generation_id = Column(String(36), ForeignKey("synthetic_generations.id"), index=True, nullable=False)
    fidelity_score = Column(Float, nullable=False)
    similarity_score = Column(Float, nullable=False)
    correlation_preservation = Column(Float, nullable=False)
    distribution_similarity = Column(Float, nullable=False)
    ml_efficacy_score = Column(Float, nullable=False)
    metrics_json = Column(JSON, default=dict)
    created_at = Column(DateTime, default=utcnow)


class ComplianceReport(DatabaseUtils.Base):
    __tablename__ = "compliance_reports"

    id = Column(Integer, primary_key=True, index=True)
    generation_id = Column(String(36), ForeignKey("synthetic_generations.id"), index=True, nullable=False)
    report_type = Column(String(50), nullable=False)
    compliance_status = Column(String(50), nullable=False)
    report_data = Column(JSON, nullable=False, default=dict)
    generated_at = Column(DateTime, default=utcnow)
