import streamlit as st
import pandas as pd

from synthdata_ui.api_client import ApiError
from synthdata_ui.context import SessionContext
from synthdata_ui.navigation import DashboardState, View, view_key

INDUSTRIES = {
    "fintech": "Fintech",
    "banking": "Banking",
    "insurance": "Insurance",
    "telco": "Telecommunications",
    "healthcare": "Healthcare",
}


def _create_form(ctx: SessionContext, state: DashboardState):
    with st.form(view_key(View.PROJECTS, "create_form"), clear_on_submit=True):
        name = st.text_input("Project Name", placeholder="Loans Pilot")
        description = st.text_area("Description", height=80)
        industry = st.selectbox("Industry", list(INDUSTRIES), format_func=INDUSTRIES.get)
        submitted = st.form_submit_button("Create Project")

    if not submitted:
        return
    if not name.strip():
        st.error("Project name is required")
        return
    # Persistence failures are left to the shell's error boundary
    project = ctx.api.create_project(name.strip(), description, industry)
    st.session_state[view_key(View.PROJECTS, "show_form")] = False
    state.open_project(project["id"])
    st.rerun()


def main(ctx: SessionContext, state: DashboardState):
    st.header("Projects")
    st.caption("Manage your synthetic data projects")

    show_key = view_key(View.PROJECTS, "show_form")
    if st.button("➕ New Project"):
        st.session_state[show_key] = True
    if st.session_state.get(show_key):
        _create_form(ctx, state)

    try:
        projects = ctx.api.list_projects()
    except ApiError as e:
        st.error(e.message)
        return

    if not projects:
        st.info("No projects yet. Create your first project to get started.")
        return

    for project in projects:
        with st.container(border=True):
            left, right = st.columns([4, 1])
            left.subheader(project["name"])
            if project.get("description"):
                left.write(project["description"])
            created = pd.to_datetime(project["created_at"]).strftime("%Y-%m-%d")
            left.caption(f"📅 {created} • {INDUSTRIES.get(project['industry'], project['industry'])}")
            if right.button("Open", key=view_key(View.PROJECTS, f"open_{project['id']}")):
                state.open_project(project["id"])
                st.rerun()
