"""
User Gateway - Main Application
Forwards user CRUD requests to the data service and enriches user profiles
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from app.config import Settings, get_settings
from app.models.envelope import Envelope
from app.routes import health, users
from app.utils.data_service_client import DataServiceClient
from app.utils.logger import configure_logging

logger = structlog.get_logger(__name__)

ENDPOINTS = [
    "GET /health",
    "GET /api/users",
    "GET /api/users/:id",
    "POST /api/users",
    "PUT /api/users/:id",
    "DELETE /api/users/:id",
    "GET /api/users/:id/profile",
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the gateway application around one settings value"""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info("Starting User Gateway")
        settings.log_config()
        await app.state.data_service.start()
        logger.info(
            "User Gateway running",
            port=settings.port,
            data_service_url=settings.data_service_url,
        )

        yield

        await app.state.data_service.stop()
        logger.info("User Gateway shutdown complete")

    app = FastAPI(
        title="User Gateway",
        description="API gateway forwarding user requests to the data service",
        version=settings.service_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.data_service = DataServiceClient(
        base_url=settings.data_service_url,
        timeout=settings.data_service_timeout,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests"""
        logger.info(
            "Request received",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown"
        )

        response = await call_next(request)

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies are rejected before reaching the data service"""
        logger.warning("Invalid request body", path=request.url.path, errors=str(exc.errors()))
        return JSONResponse(
            status_code=400,
            content=Envelope(
                success=False,
                message="Invalid request body",
                error=str(exc.errors()),
            ).to_content(),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            method=request.method,
            path=request.url.path,
            exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content=Envelope(
                success=False,
                message="Internal server error",
                error=str(exc) or type(exc).__name__,
            ).to_content(),
        )

    # Register routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])

    @app.get("/")
    async def root():
        """Welcome endpoint listing the supported routes"""
        return {
            "message": "Welcome to the User Gateway (API Gateway)",
            "endpoints": ENDPOINTS,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
