"""Resource API - FastAPI with SQLAlchemy."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import time
import uuid

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from shared.logging_config import bind_request_context, clear_request_context, setup_logging

from . import __version__, routers
from .config import Settings, get_settings
from .database import create_engine, create_session_maker, init_models
from .schemas import Envelope


async def correlation_middleware(request: Request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID", f"req_{uuid.uuid4().hex[:8]}")
    bind_request_context(correlation_id, request.method, request.url.path)

    start = time.time()
    logger = structlog.get_logger()

    try:
        response = await call_next(request)
        duration_ms = (time.time() - start) * 1000

        if response.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "http_request_failed",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )
        else:
            logger.info(
                "http_request", status_code=response.status_code, duration_ms=round(duration_ms, 2)
            )

        response.headers["X-Correlation-ID"] = correlation_id
        return response
    except Exception as e:
        duration_ms = (time.time() - start) * 1000
        logger.error(
            "http_request_exception",
            error=str(e),
            error_type=type(e).__name__,
            duration_ms=round(duration_ms, 2),
            exc_info=True,
        )
        raise
    finally:
        clear_request_context()


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies and query strings with a 400 envelope."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        detail = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        detail = "malformed input"

    structlog.get_logger().warning("request_validation_failed", detail=detail)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=Envelope(success=False, message=f"Invalid request: {detail}").model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with its own engine and session factory."""
    settings = settings or get_settings()
    engine = create_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        setup_logging(
            service_name=settings.service_name,
            log_format=settings.log_format,
            log_level=settings.log_level,
        )
        if settings.create_schema:
            await init_models(engine)
        yield
        await engine.dispose()

    app = FastAPI(
        title="Resource Management API",
        description="CRUD service for resource records with filtering and statistics",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)

    app.middleware("http")(correlation_middleware)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    @app.get("/")
    async def root():
        """Root endpoint - API information."""
        return {
            "name": "Resource Management API",
            "version": __version__,
            "description": "CRUD service for resource records with filtering and statistics",
            "endpoints": {
                "resources": "/resources",
                "statistics": "/resources/stats",
            },
            "status": "running",
        }

    app.include_router(routers.health.router)
    app.include_router(routers.resources.router)
    return app


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
