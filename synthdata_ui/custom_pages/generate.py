import time
import streamlit as st

from synthdata_ui.api_client import ApiError
from synthdata_ui.config import GENERATION_REDIRECT_DELAY
from synthdata_ui.context import SessionContext
from synthdata_ui.navigation import DashboardState, View, view_key

NO_DATASET_TITLE = "No Dataset Selected"
NO_DATASET_MESSAGE = "Please upload a dataset first"

MIN_ROWS = 100
MAX_ROWS = 1_000_000
DEFAULT_ROWS = 1000

MODEL_TYPES = {
    "ctgan": "CTGAN (Conditional Tabular GAN)",
    "tvae": "TVAE (Tabular VAE)",
    "gaussian_copula": "Gaussian Copula",
}


def _source_dataset(dataset: dict):
    st.subheader("Source Dataset")
    name_col, rows_col, cols_col, type_col = st.columns(4)
    name_col.metric("Name", dataset["name"])
    rows_col.metric("Original Row Count", f"{dataset['row_count']:,}")
    cols_col.metric("Columns", len(dataset.get("schema_json") or []))
    type_col.metric("Type", "Tabular")


def default_row_count(source_rows: int) -> int:
    """Source row count, raised to DEFAULT_ROWS and capped at MAX_ROWS."""
    return min(max(source_rows, DEFAULT_ROWS), MAX_ROWS)


def _generation_form(ctx: SessionContext, state: DashboardState, dataset: dict):
    with st.form(view_key(View.GENERATE, "form")):
        st.subheader("⚙️ Generation Settings")
        model_type = st.selectbox("Model Type", list(MODEL_TYPES), format_func=MODEL_TYPES.get,
                                  help="CTGAN recommended for complex tabular data")
        row_count = st.number_input("Number of Rows to Generate", min_value=MIN_ROWS, max_value=MAX_ROWS,
                                    value=default_row_count(dataset["row_count"]), step=1000)

        st.subheader("📈 Privacy Parameters")
        epsilon = st.number_input("Epsilon (ε) - Differential Privacy", min_value=0.1, max_value=10.0,
                                  value=1.0, step=0.1,
                                  help="Lower values = higher privacy (recommended: 0.5 - 2.0)")
        k_anonymity = st.number_input("k-Anonymity Level", min_value=2, max_value=20, value=5, step=1,
                                      help="Each record indistinguishable from at least k-1 others "
                                           "(recommended: 5-10)")
        submitted = st.form_submit_button("✨ Generate Synthetic Dataset", use_container_width=True)

    st.info("**Note:** Generation may take several minutes depending on dataset size and complexity. "
            "Privacy and utility metrics will be automatically computed.")

    if not submitted:
        return
    try:
        with st.spinner("Generating Synthetic Data..."):
            ctx.api.create_generation(dataset["id"], model_type, int(row_count), float(epsilon), int(k_anonymity))
    except ApiError as e:
        st.error(e.message or "Generation failed")
        return

    st.success("Synthetic Data Generated Successfully")
    st.caption("Redirecting to metrics dashboard...")
    time.sleep(GENERATION_REDIRECT_DELAY)
    state.complete_generation()
    st.rerun()


def main(ctx: SessionContext, state: DashboardState):
    if not state.selected_dataset_id:
        st.subheader(NO_DATASET_TITLE)
        st.info(NO_DATASET_MESSAGE)
        return

    with st.spinner("Loading dataset..."):
        try:
            dataset = ctx.api.get_dataset(state.selected_dataset_id)
        except ApiError as e:
            st.error(e.message)
            return

    st.header("Generate Synthetic Data")
    st.caption("Configure privacy parameters and generate synthetic dataset")
    _source_dataset(dataset)
    _generation_form(ctx, state, dataset)
