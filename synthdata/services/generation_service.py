# services/generation_service.py
import random
from datetime import timedelta
from typing import List, Optional
from loguru import logger
from sqlalchemy.orm import Session, joinedload, selectinload

from synthdata.config import settings
from synthdata.enums.generation import ComplianceStatus, GenerationStatus, ReportType
from synthdata.models.dataset import Dataset
from synthdata.models.generation import SyntheticGeneration
from synthdata.models.metrics import ComplianceReport, PrivacyMetrics, UtilityMetrics
from synthdata.schemas.generation import GenerationParameters
from synthdata.utils.helpers import format_number, new_id, utcnow
from synthdata.utils.metrics import metrics_manager

# Placeholder score intervals, (low, high)
PRIVACY_RANGES = {
    "privacy_risk_score": (0.05, 0.15),
    "leakage_probability": (0.001, 0.006),
}
UTILITY_RANGES = {
    "fidelity_score": (0.85, 0.95),
    "similarity_score": (0.88, 0.96),
    "correlation_preservation": (0.90, 0.98),
    "distribution_similarity": (0.87, 0.96),
    "ml_efficacy_score": (0.82, 0.94),
}


def _draw(rng: random.Random, bounds) -> float:
    low, high = bounds
    return low + rng.random() * (high - low)


def draw_privacy_metrics(params: GenerationParameters, rng: random.Random) -> dict:
    return {
        "epsilon": params.epsilon,
        "k_anonymity": params.k_anonymity,
        **{field: _draw(rng, bounds) for field, bounds in PRIVACY_RANGES.items()},
        "metrics_json": {
            "differential_privacy": True,
            "anonymization_level": "high",
        },
    }


def draw_utility_metrics(rng: random.Random) -> dict:
    return {
        **{field: _draw(rng, bounds) for field, bounds in UTILITY_RANGES.items()},
        "metrics_json": {
            "statistical_tests_passed": 15,
            "total_statistical_tests": 18,
        },
    }


def build_compliance_report(params: GenerationParameters, generated_at) -> dict:
    valid_until = generated_at + timedelta(days=settings.REPORT_VALIDITY_DAYS)
    return {
        "report_type": ReportType.kenya_dpa.value,
        "compliance_status": ComplianceStatus.compliant.value,
        "generated_at": generated_at,
        "report_data": {
            "regulation": settings.REPORT_REGULATION,
            "privacy_guarantees": f"ε-differential privacy with ε={format_number(params.epsilon)}",
            "anonymization": f"k-anonymity with k={format_number(params.k_anonymity)}",
            "data_minimization": True,
            "purpose_limitation": True,
            "generated_at": generated_at.isoformat(),
            "valid_until": valid_until.isoformat(),
        },
    }


class GenerationService:

    def __init__(self, db: Session, rng: Optional[random.Random] = None):
        self.db = db
        self.rng = rng or random.Random()

    def _with_relations(self):
        return self.db.query(SyntheticGeneration).options(
            joinedload(SyntheticGeneration.dataset),
            selectinload(SyntheticGeneration.privacy_metrics),
            selectinload(SyntheticGeneration.utility_metrics),
            selectinload(SyntheticGeneration.compliance_reports),
        )

    def list_generations(self, user_id: str) -> List[SyntheticGeneration]:
        """Returns the user's generations, newest first, with dataset and metrics loaded."""
        return (
            self._with_relations()
            .filter(SyntheticGeneration.user_id == user_id)
            .order_by(SyntheticGeneration.created_at.desc())
            .all()
        )

    def get_generation(self, user_id: str, generation_id: str) -> Optional[SyntheticGeneration]:
        return (
            self._with_relations()
            .filter(SyntheticGeneration.id == generation_id, SyntheticGeneration.user_id == user_id)
            .first()
        )

    def create_generation(self, user_id: str, dataset: Dataset, params: GenerationParameters) -> SyntheticGeneration:
        """
        Records a completed generation run together with its privacy metrics,
        utility metrics and compliance report.

        No model is trained: the run is marked completed immediately and the
        scores are bounded random draws. All four rows are written in one
        transaction, so a failure leaves none of them behind.
        """
        now = utcnow()
        generation_id = new_id()
        try:
            generation = SyntheticGeneration(
                id=generation_id,
                dataset_id=dataset.id,
                user_id=user_id,
                model_type=params.model_type.value,
                parameters=params.model_dump(mode="json", include=set(GenerationParameters.model_fields)),
                row_count=params.row_count,
                status=GenerationStatus.completed.value,
                started_at=now,
                completed_at=now,
                created_at=now,
            )
            self.db.add(generation)
            self.db.flush()

            self.db.add_all([
                PrivacyMetrics(generation_id=generation_id, **draw_privacy_metrics(params, self.rng)),
                UtilityMetrics(generation_id=generation_id, **draw_utility_metrics(self.rng)),
                ComplianceReport(generation_id=generation_id, **build_compliance_report(params, now)),
            ])
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            metrics_manager.GENERATION_FAILURES.inc()
            logger.error(f"Generation for dataset {dataset.id} rolled back: {e}")
            raise

        metrics_manager.GENERATIONS_CREATED.inc()
        logger.info(
            f"Generation {generation_id} recorded: {params.model_type.value}, "
            f"{params.row_count} rows, ε={params.epsilon}, k={params.k_anonymity}"
        )
        return self.get_generation(user_id, generation_id)
