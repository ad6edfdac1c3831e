from typing import Callable, Dict
import streamlit as st

from synthdata_ui.api_client import ApiError
from synthdata_ui.context import SessionContext
from synthdata_ui.custom_pages import generate, metrics, projects, settings, upload
from synthdata_ui.navigation import VIEW_LABELS, DashboardState, View, reset_view_state

ViewHandler = Callable[[SessionContext, DashboardState], None]

# One handler per view
VIEW_HANDLERS: Dict[View, ViewHandler] = {
    View.PROJECTS: projects.main,
    View.UPLOAD: upload.main,
    View.GENERATE: generate.main,
    View.METRICS: metrics.main,
    View.SETTINGS: settings.main,
}


def render_view(ctx: SessionContext, state: DashboardState) -> None:
    VIEW_HANDLERS[state.view](ctx, state)


def render_stats(ctx: SessionContext) -> None:
    try:
        stats = ctx.api.get_stats()
    except ApiError as e:
        st.warning(f"Could not load dashboard counts: {e.message}")
        return
    total_projects, total_datasets, total_generations, recent = st.columns(4)
    total_projects.metric("Total Projects", stats["total_projects"])
    total_datasets.metric("Datasets", stats["total_datasets"])
    total_generations.metric("Generations", stats["total_generations"])
    recent.metric("Recent Activity", stats["recent_activity"])


def render_tabs(state: DashboardState) -> None:
    columns = st.columns(len(View))
    for column, view in zip(columns, View):
        if column.button(VIEW_LABELS[view], key=f"nav_{view.value}", use_container_width=True,
                         type="primary" if state.view == view else "secondary"):
            if view != state.view:
                previous = state.navigate(view)
                reset_view_state(st.session_state, previous)
                st.rerun()
