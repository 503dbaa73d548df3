"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cardwise.config import configure_logging, get_settings
from cardwise.database import create_local_schema, dispose_engine, initialize_database
from cardwise.domain.common.exceptions import DomainError
from cardwise.exceptions import CardwiseError
from cardwise.infrastructure.learning.routers import flashcards, topic_flashcards

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    create_local_schema(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT, version=settings.VERSION)
    yield
    dispose_engine()
    logger.info("application_stopped")


async def cardwise_error_handler(request: Request, exc: CardwiseError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(CardwiseError, cardwise_error_handler)  # type: ignore[arg-type]
    application.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]

    application.include_router(topic_flashcards.router, prefix=settings.API_V1_PREFIX)
    application.include_router(flashcards.router, prefix=settings.API_V1_PREFIX)

    @application.get("/")
    def root() -> dict[str, str]:
        return {"message": "Welcome to cardwise API"}

    @application.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    @application.get(f"{settings.API_V1_PREFIX}/")
    def api_root() -> dict[str, str]:
        return {
            "message": "cardwise API v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return application


app = create_app()
