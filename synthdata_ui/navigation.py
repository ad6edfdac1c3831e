from dataclasses import dataclass
from enum import Enum
from typing import Optional


class View(str, Enum):
    PROJECTS = "projects"
    UPLOAD = "upload"
    GENERATE = "generate"
    METRICS = "metrics"
    SETTINGS = "settings"


VIEW_LABELS = {
    View.PROJECTS: "🗂️ Projects",
    View.UPLOAD: "📤 Upload Data",
    View.GENERATE: "✨ Generate",
    View.METRICS: "🛡️ Metrics",
    View.SETTINGS: "⚙️ Settings",
}


@dataclass
class DashboardState:
    """Active view plus the project and dataset ids threaded between views."""
    view: View = View.PROJECTS
    selected_project_id: Optional[str] = None
    selected_dataset_id: Optional[str] = None

    def navigate(self, view: View) -> View:
        """Switches view and returns the one being left."""
        previous, self.view = self.view, view
        return previous

    def open_project(self, project_id: str) -> None:
        self.selected_project_id = project_id
        self.navigate(View.UPLOAD)

    def complete_upload(self, dataset_id: str) -> None:
        self.selected_dataset_id = dataset_id
        self.navigate(View.GENERATE)

    def complete_generation(self) -> None:
        self.navigate(View.METRICS)


def view_key(view: View, name: str) -> str:
    """Session-state key for a widget or value local to one view."""
    return f"{view.value}__{name}"


def reset_view_state(session_state, view: View) -> None:
    """Drops every session-state entry that belongs to `view`."""
    prefix = f"{view.value}__"
    for key in [key for key in list(session_state.keys()) if str(key).startswith(prefix)]:
        del session_state[key]
