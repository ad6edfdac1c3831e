import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from prometheus_fastapi_instrumentator import Instrumentator
from synthdata.routers import ROUTERS
from synthdata.services.template_service import TemplateService
from synthdata.utils.database import DatabaseUtils
from synthdata.utils.metrics import metrics_manager
from synthdata.config import settings


class AppLauncher:
    def __init__(self):
        self.metrics_manager = metrics_manager
        self.app = FastAPI(
            title=settings.APP_TITLE,
            version=settings.APP_VERSION,
            description="API for projects, dataset schemas and synthetic-data generation records "
                        "with privacy, utility and compliance metrics",
            docs_url="/docs",
            redoc_url="/redoc",
            openapi_url="/openapi.json",
            swagger_ui_parameters={
                "defaultModelsExpandDepth": -1,
                "defaultTagsExpandDepth": 0,
            },
        )

    def setup(self):
        self._setup_middleware()
        self._setup_routers()
        self._setup_health()
        self._setup_events()
        return self.app

    def _setup_middleware(self):
        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        Instrumentator(
            excluded_handlers=["^/metrics", "^/redoc", "^/openapi.json", "^/docs"],
            should_group_status_codes=True,
            should_ignore_untemplated=True,
        ).instrument(self.app, metric_namespace="synthdata").expose(self.app)

        @self.app.middleware("http")
        async def custom_metrics_middleware(request: Request, call_next):
            start_time = time.time()
            response = await call_next(request)
            self.metrics_manager.observe_request(time.time() - start_time)
            return response

    def _setup_routers(self):
        for route_config in ROUTERS:
            self.app.include_router(
                route_config["router"], prefix=route_config["prefix"], tags=route_config["tags"]
            )

    def _setup_health(self):
        @self.app.get("/health", tags=["Health"])
        def health():
            return {"status": "ok"}

    def _setup_events(self):
        @self.app.on_event("startup")
        def startup_event():
            logger.info("Application starting...")
            DatabaseUtils.init_db()
            if settings.SEED_TEMPLATES:
                with DatabaseUtils.db_session() as db:
                    TemplateService(db).seed_defaults()
            logger.info(f"System metrics at startup: {self.metrics_manager.get_system_metrics()}")

        @self.app.on_event("shutdown")
        def shutdown_event():
            logger.info("Application shutting down...")


app = AppLauncher().setup()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
