import time
import streamlit as st
import pandas as pd

from synthdata_ui.api_client import ApiError
from synthdata_ui.config import CSV_MIME_TYPE, UPLOAD_REDIRECT_DELAY
from synthdata_ui.context import SessionContext
from synthdata_ui.navigation import DashboardState, View, view_key

NO_PROJECT_TITLE = "No Project Selected"
NO_PROJECT_MESSAGE = "Please select or create a project first"


def create_from_file(ctx: SessionContext, project_id: str, uploaded_file, name: str, description: str) -> dict:
    """Checks the file type before any request, then uploads the CSV."""
    if uploaded_file is None:
        raise ValueError("Please choose a CSV file")
    if uploaded_file.type != CSV_MIME_TYPE:
        raise ValueError("Please upload a CSV file")
    if not name.strip():
        raise ValueError("Dataset name is required")
    return ctx.api.upload_dataset(
        project_id, name.strip(), description, uploaded_file.name, uploaded_file.getvalue(), uploaded_file.type
    )


def finish(state: DashboardState, dataset: dict):
    st.success("Dataset Uploaded Successfully")
    st.caption("Redirecting to generation...")
    time.sleep(UPLOAD_REDIRECT_DELAY)
    state.complete_upload(dataset["id"])
    st.rerun()


def _upload_form(ctx: SessionContext, state: DashboardState):
    st.subheader("Upload CSV File")
    uploaded = st.file_uploader("CSV File", type=["csv"], key=view_key(View.UPLOAD, "file"))
    default_name = uploaded.name.replace(".csv", "") if uploaded else ""

    with st.form(view_key(View.UPLOAD, "form")):
        name = st.text_input("Dataset Name", value=default_name, placeholder="M-Pesa Transactions Q4 2024")
        description = st.text_area(
            "Description", height=68, placeholder="Mobile money transaction data for Q4 2024"
        )
        submitted = st.form_submit_button("Upload Dataset", disabled=uploaded is None)

    if not submitted:
        return
    try:
        with st.spinner("Uploading..."):
            dataset = create_from_file(ctx, state.selected_project_id, uploaded, name, description)
    except ValueError as e:
        st.error(str(e))
        return
    except ApiError as e:
        st.error(e.message or "Upload failed")
        return
    finish(state, dataset)


def _templates(ctx: SessionContext, state: DashboardState):
    st.subheader("✨ Use a Template")
    st.caption("Start with pre-configured schemas for common Kenyan fintech use cases")
    try:
        templates = ctx.api.list_templates()
    except ApiError as e:
        st.error(e.message)
        return

    columns = st.columns(3)
    for index, template in enumerate(templates):
        with columns[index % 3].container(border=True):
            st.markdown(f"**{template['name']}**")
            st.write(template["description"])
            st.caption(template["category"])
            with st.expander("Schema"):
                st.dataframe(pd.DataFrame(template["schema_json"]), hide_index=True)
            if st.button("Use template", key=view_key(View.UPLOAD, f"template_{template['id']}")):
                try:
                    dataset = ctx.api.create_dataset_from_template(state.selected_project_id, template["id"])
                except ApiError as e:
                    st.error(e.message or "Template creation failed")
                    return
                finish(state, dataset)


def main(ctx: SessionContext, state: DashboardState):
    if not state.selected_project_id:
        st.subheader(NO_PROJECT_TITLE)
        st.info(NO_PROJECT_MESSAGE)
        return

    st.header("Upload Dataset")
    st.caption("Upload your CSV data or use a pre-built template")
    _upload_form(ctx, state)
    st.divider()
    _templates(ctx, state)
