from datetime import datetime
from typing import Dict, Optional

from synthdata.utils.helpers import format_number


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _datetime(value: str) -> str:
    return _parse(value).strftime("%Y-%m-%d %H:%M:%S")


def _date(value: str) -> str:
    return _parse(value).strftime("%Y-%m-%d")


def _compliant(flag) -> str:
    return "Compliant" if flag else "Not Compliant"


def first(rows) -> Optional[Dict]:
    return rows[0] if rows else None


def report_filename(generation: Dict) -> str:
    return f"compliance-report-{generation['id'][:8]}.txt"


def format_compliance_report(generation: Dict) -> Optional[str]:
    """
    Renders the plain-text compliance report for a generation as returned by
    `GET /generations`. Returns None when the generation has no report.
    """
    report = first(generation.get("compliance_reports"))
    if not report:
        return None
    data = report["report_data"]
    privacy = first(generation.get("privacy_metrics"))
    utility = first(generation.get("utility_metrics"))
    dataset_name = (generation.get("dataset") or {}).get("name", "")

    if privacy:
        privacy_block = "\n".join([
            f"Differential Privacy Epsilon: {format_number(privacy['epsilon'])}",
            f"K-Anonymity Level: {privacy['k_anonymity']}",
            f"Privacy Risk Score: {privacy['privacy_risk_score'] * 100:.2f}%",
            f"Leakage Probability: {privacy['leakage_probability'] * 100:.3f}%",
        ])
    else:
        privacy_block = "No metrics available"

    if utility:
        utility_block = "\n".join([
            f"Fidelity Score: {utility['fidelity_score'] * 100:.1f}%",
            f"Similarity Score: {utility['similarity_score'] * 100:.1f}%",
            f"Correlation Preservation: {utility['correlation_preservation'] * 100:.1f}%",
            f"Distribution Similarity: {utility['distribution_similarity'] * 100:.1f}%",
            f"ML Efficacy Score: {utility['ml_efficacy_score'] * 100:.1f}%",
        ])
    else:
        utility_block = "No metrics available"

    return f"""KENYA DATA PROTECTION ACT COMPLIANCE REPORT
===========================================

Generated: {_datetime(report['generated_at'])}
Report Type: {report['report_type']}
Status: {report['compliance_status'].upper()}

Dataset Information:
-------------------
Name: {dataset_name}
Synthetic Rows: {generation['row_count']:,}
Model: {generation['model_type'].upper()}

Privacy Guarantees:
------------------
{data['privacy_guarantees']}
Anonymization: {data['anonymization']}

Compliance Criteria:
-------------------
✓ Data Minimization: {_compliant(data.get('data_minimization'))}
✓ Purpose Limitation: {_compliant(data.get('purpose_limitation'))}

Privacy Metrics:
---------------
{privacy_block}

Utility Metrics:
---------------
{utility_block}

Valid Until: {_date(data['valid_until'])}

---
This report certifies that the synthetic dataset meets the requirements
of the Kenya Data Protection Act, 2019."""
