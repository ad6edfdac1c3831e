from .auth import User
from .project import Project
from .dataset import Dataset
from .template import Template
from .generation import SyntheticGeneration
from .metrics import PrivacyMetrics, UtilityMetrics, ComplianceReport

__all__ = [
    "User",
    "Project",
    "Dataset",
    "Template",
    "SyntheticGeneration",
    "PrivacyMetrics",
    "UtilityMetrics",
    "ComplianceReport",
]
