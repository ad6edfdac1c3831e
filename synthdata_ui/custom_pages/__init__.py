from . import generate, metrics, projects, settings, upload

__all__ = ["generate", "metrics", "projects", "settings", "upload"]
