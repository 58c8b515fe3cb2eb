from typing import Optional
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from gateway.app.core.backend import ModelBackend, VertexAIBackend
from gateway.app.core.config import Settings, settings as default_settings
from gateway.app.core.logging import setup_logging
from gateway.app.core.observability import ObservabilityMiddleware
from gateway.app.core.pipeline import GenerationPipeline
from gateway.app.api import generate, status
import logging

logger = logging.getLogger(__name__)


def create_app(
    backend: Optional[ModelBackend] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the gateway app around an injected model backend.

    Without a backend, a Vertex AI backend is built from settings. CORS is
    handled inside the generation pipeline, so no CORS middleware is added.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    if backend is None:
        backend = VertexAIBackend(
            project=settings.project_id,
            location=settings.location,
            timeout_sec=settings.request_timeout_sec,
        )

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.pipeline = GenerationPipeline.from_settings(backend, settings)

    app.add_middleware(ObservabilityMiddleware)
    app.add_exception_handler(StarletteHTTPException, generate.http_error_handler)

    app.include_router(status.router)
    app.include_router(generate.router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(f"Starting {settings.app_name}")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Project: {settings.project_id} Location: {settings.location}")
        logger.info(f"Default model: {settings.default_model_id}")
        logger.info(f"Prediction timeout: {settings.request_timeout_sec}s")
        logger.info("Gateway startup complete")

    return app


app = create_app()
