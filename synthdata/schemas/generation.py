from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime
from synthdata.enums.generation import ModelType


class GenerationParameters(BaseModel):
    model_type: ModelType = ModelType.ctgan
    row_count: int = Field(10000, ge=100, le=1_000_000)
    epsilon: float = Field(1.0, ge=0.1, le=10)
    k_anonymity: int = Field(5, ge=2, le=20)

    class Config:
        protected_namespaces = ()


class GenerationCreate(GenerationParameters):
    dataset_id: str


class PrivacyMetricsResponse(BaseModel):
    epsilon: float
    k_anonymity: int
    privacy_risk_score: float
    leakage_probability: float
    metrics_json: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        from_attributes = True


class UtilityMetricsResponse(BaseModel):
    fidelity_score: float
    similarity_score: float
    correlation_preservation: float
    distribution_similarity: float
    ml_efficacy_score: float
    metrics_json: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        from_attributes = True


class ComplianceReportResponse(BaseModel):
    report_type: str
    compliance_status: str
    report_data: Dict[str, Any]
    generated_at: datetime

    class Config:
        from_attributes = True


class DatasetName(BaseModel):
    name: str

    class Config:
        from_attributes = True


class GenerationResponse(BaseModel):
    id: str
    dataset_id: str
    user_id: str
    model_type: str
    parameters: Dict[str, Any]
    row_count: int
    status: str
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    dataset: Optional[DatasetName] = None
    privacy_metrics: List[PrivacyMetricsResponse] = Field(default_factory=list)
    utility_metrics: List[UtilityMetricsResponse] = Field(default_factory=list)
    compliance_reports: List[ComplianceReportResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True
        protected_namespaces = ()
