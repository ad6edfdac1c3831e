import streamlit as st
import pandas as pd
import plotly.express as px

from synthdata_ui.api_client import ApiError
from synthdata_ui.context import SessionContext
from synthdata_ui.navigation import DashboardState, View, view_key
from synthdata_ui.reports import first, format_compliance_report, report_filename

UTILITY_LABELS = {
    "fidelity_score": "Fidelity Score",
    "similarity_score": "Similarity Score",
    "correlation_preservation": "Correlation Preservation",
    "distribution_similarity": "Distribution Similarity",
    "ml_efficacy_score": "ML Efficacy Score",
}


def _label(generation: dict) -> str:
    created = pd.to_datetime(generation["created_at"]).strftime("%Y-%m-%d")
    name = (generation.get("dataset") or {}).get("name", "Unknown dataset")
    return f"{name} • {created} • {generation['row_count']:,} rows • {generation['model_type']}"


def _privacy(generation: dict):
    privacy = first(generation.get("privacy_metrics"))
    title, badge = st.columns([3, 1])
    title.subheader("🛡️ Privacy Metrics")
    if not privacy:
        st.caption("No metrics available")
        return
    if privacy["privacy_risk_score"] < 0.15:
        badge.success("High Privacy")
    top_left, top_right = st.columns(2)
    top_left.metric("Differential Privacy (ε)", f"{privacy['epsilon']:.2f}", help="Lower is more private")
    top_right.metric("K-Anonymity", privacy["k_anonymity"], help="Minimum group size")
    bottom_left, bottom_right = st.columns(2)
    bottom_left.metric("Privacy Risk Score", f"{privacy['privacy_risk_score'] * 100:.2f}%",
                       help="Re-identification risk")
    bottom_right.metric("Leakage Probability", f"{privacy['leakage_probability'] * 100:.3f}%",
                        help="Information leakage")


def _utility(generation: dict):
    utility = first(generation.get("utility_metrics"))
    title, badge = st.columns([3, 1])
    title.subheader("📊 Utility Metrics")
    if not utility:
        st.caption("No metrics available")
        return
    if utility["fidelity_score"] > 0.85:
        badge.info("High Fidelity")
    for field, label in UTILITY_LABELS.items():
        st.progress(min(utility[field], 1.0), text=f"{label}: {utility[field] * 100:.1f}%")

    df = pd.DataFrame({"metric": list(UTILITY_LABELS.values()),
                       "score": [utility[field] for field in UTILITY_LABELS]})
    fig = px.bar(df, x="metric", y="score", range_y=[0, 1], title="Utility scores")
    st.plotly_chart(fig, use_container_width=True)


def _compliance(generation: dict):
    st.subheader("📄 Compliance Report")
    report = first(generation.get("compliance_reports"))
    if not report:
        st.caption("No compliance report available")
        return
    generated = pd.to_datetime(report["generated_at"]).strftime("%Y-%m-%d")
    st.success(f"Kenya Data Protection Act Compliant\n\nGenerated: {generated}")
    st.download_button(
        "⬇️ Download Compliance Report",
        data=format_compliance_report(generation),
        file_name=report_filename(generation),
        mime="text/plain",
        key=view_key(View.METRICS, f"download_{generation['id']}"),
    )


def main(ctx: SessionContext, state: DashboardState):
    with st.spinner("Loading metrics..."):
        try:
            generations = ctx.api.list_generations()
        except ApiError as e:
            st.error(e.message)
            return

    if not generations:
        st.subheader("No Data Generated Yet")
        st.info("Generate synthetic data to view privacy and utility metrics")
        return

    st.header("Privacy & Utility Metrics")
    st.caption("Analyze the quality and privacy guarantees of your synthetic data")

    history, details = st.columns([1, 2])
    with history:
        st.subheader("Generation History")
        index = st.radio(
            "Generation",
            range(len(generations)),
            format_func=lambda i: _label(generations[i]),
            key=view_key(View.METRICS, "selected"),
            label_visibility="collapsed",
        )
    selected = generations[index or 0]
    with details:
        with st.container(border=True):
            _privacy(selected)
        with st.container(border=True):
            _utility(selected)
        with st.container(border=True):
            _compliance(selected)
