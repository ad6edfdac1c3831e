from enum import Enum


class ModelType(str, Enum):
    ctgan = "ctgan"
    tvae = "tvae"
    gaussian_copula = "gaussian_copula"


class GenerationStatus(str, Enum):
    completed = "completed"


class ReportType(str, Enum):
    kenya_dpa = "kenya_dpa"


class ComplianceStatus(str, Enum):
    compliant = "compliant"
