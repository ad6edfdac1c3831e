import random
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import SQLAlchemyError

from synthdata.models import ComplianceReport, PrivacyMetrics, SyntheticGeneration, UtilityMetrics
from synthdata.schemas.generation import GenerationParameters
from synthdata.services import generation_service
from synthdata.services.generation_service import (
    PRIVACY_RANGES,
    UTILITY_RANGES,
    build_compliance_report,
    draw_privacy_metrics,
    draw_utility_metrics,
)
from synthdata.utils.helpers import format_number


class FixedRandom(random.Random):
    def __init__(self, value):
        super().__init__()
        self.value = value

    def random(self):
        return self.value


def _within(value, bounds):
    low, high = bounds
    return low <= value <= high


def test_repeated_draws_stay_within_their_intervals():
    rng = random.Random(2024)
    params = GenerationParameters()
    for _ in range(2000):
        privacy = draw_privacy_metrics(params, rng)
        utility = draw_utility_metrics(rng)
        for field, bounds in PRIVACY_RANGES.items():
            assert _within(privacy[field], bounds), field
        for field, bounds in UTILITY_RANGES.items():
            assert _within(utility[field], bounds), field


@pytest.mark.parametrize("value", [0.0, 0.999999999])
def test_draws_at_the_edges_of_the_generator(value):
    rng = FixedRandom(value)
    privacy = draw_privacy_metrics(GenerationParameters(), rng)
    utility = draw_utility_metrics(rng)

    for field, bounds in PRIVACY_RANGES.items():
        assert _within(privacy[field], bounds)
    for field, bounds in UTILITY_RANGES.items():
        assert _within(utility[field], bounds)


def test_privacy_metrics_echo_requested_parameters():
    privacy = draw_privacy_metrics(GenerationParameters(epsilon=0.5, k_anonymity=8), random.Random(1))

    assert privacy["epsilon"] == 0.5
    assert privacy["k_anonymity"] == 8
    assert privacy["metrics_json"] == {"differential_privacy": True, "anonymization_level": "high"}


@pytest.mark.parametrize("epsilon, k, eps_text", [(1.0, 5, "1"), (2.5, 10, "2.5"), (0.1, 2, "0.1"), (10, 20, "10")])
def test_report_embeds_epsilon_and_k(epsilon, k, eps_text):
    now = datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc)
    report = build_compliance_report(GenerationParameters(epsilon=epsilon, k_anonymity=k), now)

    data = report["report_data"]
    assert data["privacy_guarantees"] == f"ε-differential privacy with ε={eps_text}"
    assert data["anonymization"] == f"k-anonymity with k={k}"
    assert report["compliance_status"] == "compliant"
    assert report["report_type"] == "kenya_dpa"


def test_report_is_valid_for_exactly_365_days():
    now = datetime(2024, 2, 29, 12, 0, tzinfo=timezone.utc)
    data = build_compliance_report(GenerationParameters(), now)["report_data"]

    generated = datetime.fromisoformat(data["generated_at"])
    valid_until = datetime.fromisoformat(data["valid_until"])
    assert valid_until - generated == timedelta(days=365)
    assert data["regulation"] == "Kenya Data Protection Act, 2019"
    assert data["data_minimization"] and data["purpose_limitation"]


def test_format_number_uses_shortest_form():
    assert format_number(1.0) == "1"
    assert format_number(0.5) == "0.5"
    assert format_number(5) == "5"


@pytest.mark.parametrize("epsilon, eps_text", [
    (1.2345678, "1.2345678"),
    (0.123456789, "0.123456789"),
    (2.0000001, "2.0000001"),
    (9.99, "9.99"),
])
def test_report_keeps_every_digit_of_epsilon(epsilon, eps_text):
    now = datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc)
    data = build_compliance_report(GenerationParameters(epsilon=epsilon), now)["report_data"]

    assert format_number(epsilon) == eps_text
    assert data["privacy_guarantees"] == f"ε-differential privacy with ε={eps_text}"


def _generate(client, headers, dataset_id, **params):
    return client.post("/generations/", json={"dataset_id": dataset_id, **params}, headers=headers)


def test_generation_is_recorded_as_completed_with_metrics(client, auth_headers, dataset):
    response = _generate(client, auth_headers, dataset["id"], model_type="tvae", row_count=5000,
                         epsilon=1.5, k_anonymity=7)

    assert response.status_code == 201
    generation = response.json()
    assert generation["status"] == "completed"
    assert generation["model_type"] == "tvae"
    assert generation["row_count"] == 5000
    assert generation["parameters"] == {"model_type": "tvae", "row_count": 5000, "epsilon": 1.5, "k_anonymity": 7}
    assert generation["started_at"] == generation["completed_at"]
    assert generation["dataset"]["name"] == dataset["name"]
    assert len(generation["privacy_metrics"]) == 1
    assert len(generation["utility_metrics"]) == 1
    assert len(generation["compliance_reports"]) == 1
    assert generation["privacy_metrics"][0]["epsilon"] == 1.5
    assert "ε=1.5" in generation["compliance_reports"][0]["report_data"]["privacy_guarantees"]


def test_generations_are_listed_newest_first(client, auth_headers, other_headers, dataset):
    first = _generate(client, auth_headers, dataset["id"], row_count=1000).json()
    second = _generate(client, auth_headers, dataset["id"], row_count=2000).json()

    listed = client.get("/generations/", headers=auth_headers).json()

    assert [g["id"] for g in listed] == [second["id"], first["id"]]
    assert client.get("/generations/", headers=other_headers).json() == []
    assert client.get(f"/generations/{first['id']}", headers=auth_headers).json()["row_count"] == 1000
    assert client.get(f"/generations/{first['id']}", headers=other_headers).status_code == 404


@pytest.mark.parametrize("params", [
    {"row_count": 99},
    {"row_count": 1_000_001},
    {"epsilon": 0.05},
    {"epsilon": 10.5},
    {"k_anonymity": 1},
    {"k_anonymity": 21},
    {"model_type": "diffusion"},
])
def test_out_of_bounds_parameters_are_rejected(client, auth_headers, dataset, params):
    assert _generate(client, auth_headers, dataset["id"], **params).status_code == 422


def test_generation_for_unknown_dataset_is_not_found(client, auth_headers):
    assert _generate(client, auth_headers, "missing").status_code == 404


def test_failed_generation_leaves_no_rows_behind(client, auth_headers, dataset, db, monkeypatch):
    def broken_report(params, generated_at):
        raise SQLAlchemyError("compliance_reports insert failed")

    monkeypatch.setattr(generation_service, "build_compliance_report", broken_report)

    response = _generate(client, auth_headers, dataset["id"])

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"
    for model in (SyntheticGeneration, PrivacyMetrics, UtilityMetrics, ComplianceReport):
        assert db.query(model).count() == 0
