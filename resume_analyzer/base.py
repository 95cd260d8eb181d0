from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api import health_check, v1_router
from .agent.exceptions import ProviderError, StrategyError
from .core import settings, setup_logging
from .core.exceptions import (
    catch_unhandled_exceptions,
    provider_exception_handler,
    service_exception_handler,
    strategy_exception_handler,
    validation_exception_handler,
)
from .services.exceptions import ServiceError

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def create_app() -> FastAPI:
    """
    configure and create the FastAPI application instance.
    """
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
    )

    # Middleware added later wraps middleware added earlier, so CORS
    # headers also land on the 500s produced by the catch-all.
    app.middleware("http")(catch_unhandled_exceptions)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.add_exception_handler(ServiceError, service_exception_handler)
    app.add_exception_handler(ProviderError, provider_exception_handler)
    app.add_exception_handler(StrategyError, strategy_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(health_check)
    app.include_router(v1_router)

    return app
