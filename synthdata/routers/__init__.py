from .auth import router as auth_router
from .dashboard import router as dashboard_router
from .datasets import router as datasets_router
from .generations import router as generations_router
from .projects import router as projects_router
from .templates import router as templates_router

# Centralized configuration of all routers
ROUTERS = [
    {"router": auth_router, "prefix": "/auth", "tags": ["Authentication"]},
    {"router": projects_router, "prefix": "/projects", "tags": ["Projects"]},
    {"router": datasets_router, "prefix": "/datasets", "tags": ["Datasets"]},
    {"router": templates_router, "prefix": "/templates", "tags": ["Templates"]},
    {"router": generations_router, "prefix": "/generations", "tags": ["Generations"]},
    {"router": dashboard_router, "prefix": "/dashboard", "tags": ["Dashboard"]},
]
