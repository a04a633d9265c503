"""Entry point for the task list FastAPI application."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routers import api_router, health_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .db import close_document_store, init_document_store
from .deps import SettingsDependency
from .errors import register_exception_handlers
from .schemas.system import RootResponse


def _normalise_prefix(raw_prefix: str) -> str:
    router_prefix = raw_prefix.strip()
    if router_prefix and not router_prefix.startswith("/"):
        router_prefix = f"/{router_prefix}"
    router_prefix = router_prefix.rstrip("/")
    return "" if router_prefix == "/" else router_prefix


def create_app() -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = get_settings()
    configure_logging(settings)

    router_prefix = _normalise_prefix(settings.api_prefix)
    openapi_url = "/openapi.json" if not router_prefix else f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Personal task lists backed by MongoDB.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
    )

    application.state.settings = settings

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    if router_prefix:
        application.include_router(api_router, prefix=router_prefix)
    else:
        application.include_router(api_router)

    application.include_router(health_router)

    register_exception_handlers(application)

    @application.on_event("startup")
    async def _initialise_document_store() -> None:
        await init_document_store()

    @application.on_event("shutdown")
    async def _dispose_document_store() -> None:
        await close_document_store()

    @application.get("/", response_model=RootResponse, summary="Service metadata")
    async def read_root(runtime_settings: SettingsDependency) -> RootResponse:
        """Expose minimal service metadata at the root endpoint."""

        return RootResponse(
            name=runtime_settings.project_name,
            environment=runtime_settings.environment,
            version=runtime_settings.version,
            api_prefix=router_prefix,
        )

    return application


app = create_app()


def run() -> None:
    """Console entry point declared as ``tasklists-app``."""

    settings: Settings = get_settings()
    uvicorn.run(
        "tasklists.app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
