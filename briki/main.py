"""Briki plans API.

Serves the insurance plan catalogue and records plan interactions (views,
selections, comparisons, checkouts) for the Briki web application. The browser
app, authentication and the chat assistant live elsewhere; this service only
owns plans and interactions.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from briki.core.config import settings
from briki.core.logging import configure_logging
from briki.routers import interactions, plans
from briki.schemas.envelope import failure
from briki.scripts.startup_bootstrap import bootstrap

logger = logging.getLogger(__name__)

SERVICE_NAME = "briki-api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    logger.info("Briki API starting env=%s version=%s", settings.app_env, settings.app_version)
    await run_in_threadpool(bootstrap)
    yield
    logger.info("Briki API shutting down")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=failure(str(exc.detail)), headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', 'invalid')}" for err in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=failure("Invalid request", message=details or None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure("Internal server error"),
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Briki Plans API",
        version=settings.app_version,
        description="Insurance plan catalogue and plan interaction tracking.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(plans.router)
    app.include_router(interactions.router)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "service": SERVICE_NAME,
            "version": settings.app_version,
            "environment": settings.app_env,
        }

    return app


app = create_app()


def main() -> None:
    uvicorn.run("briki.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
