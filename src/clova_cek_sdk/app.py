"""FastAPI application factory for CEK skills."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .errors import InvalidApplicationIdError, InvalidSignatureError, VerificationError
from .routes import health, skill
from .services.skill import SkillConfigurator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info(f"Starting {settings.service_name} in {settings.environment} mode")
    yield
    logger.info(f"Shutting down {settings.service_name}")


async def verification_error_handler(request: Request, exc: VerificationError) -> JSONResponse:
    """Reject unverified requests: 403 for a bad signature or application id, 400 otherwise."""
    forbidden = isinstance(exc, (InvalidSignatureError, InvalidApplicationIdError))
    return JSONResponse(
        status_code=403 if forbidden else 400,
        content={"detail": str(exc)},
    )


def create_app(
    configurator: SkillConfigurator,
    application_id: str | None = None,
    path: str = "/clova",
) -> FastAPI:
    """
    Create the app serving a configured skill.

    Args:
        configurator: Skill with its request handlers registered
        application_id: Extension ID to verify requests against, or None to skip verification
        path: Route of the skill webhook
    """
    app = FastAPI(
        title="Clova CEK Skill",
        description="Clova Extension Kit skill webhook",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.add_exception_handler(VerificationError, verification_error_handler)

    app.include_router(health.router)
    app.include_router(skill.build_router(configurator, application_id=application_id, path=path))

    return app
