import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from ..agent.exceptions import (
    ProviderError,
    ConfigurationError,
    RateLimitError,
    QuotaExceededError,
    StrategyError,
)
from ..services.exceptions import ServiceError

logger = logging.getLogger(__name__)

# Most specific first; ProviderError itself is the catch-all.
_PROVIDER_STATUS = (
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (RateLimitError, status.HTTP_429_TOO_MANY_REQUESTS),
    (QuotaExceededError, status.HTTP_402_PAYMENT_REQUIRED),
    (ProviderError, status.HTTP_502_BAD_GATEWAY),
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
    logger.error(f"Error in {request.url.path}: {exc.message}")
    return _error_response(exc.status_code, exc.message)


async def provider_exception_handler(request: Request, exc: ProviderError) -> JSONResponse:
    status_code = next(
        code for exc_type, code in _PROVIDER_STATUS if isinstance(exc, exc_type)
    )
    logger.error(f"AI provider error in {request.url.path}: {exc.message}")
    return _error_response(status_code, exc.message)


async def strategy_exception_handler(request: Request, exc: StrategyError) -> JSONResponse:
    logger.error(f"Unusable AI output in {request.url.path}: {exc.detail}")
    return _error_response(status.HTTP_502_BAD_GATEWAY, exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        detail = " ".join(part for part in (location, errors[0].get("msg", "")) if part)
        if detail:
            message = f"{message}: {detail}"
    logger.warning(f"Request validation failed for {request.url.path}: {errors}")
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error in {request.url.path}: {exc}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Unknown error"
    )


async def catch_unhandled_exceptions(request: Request, call_next) -> Response:
    """
    HTTP middleware turning any exception the routes did not handle into a
    500 ``{"error": ...}`` response. Registered before CORSMiddleware so
    that the CORS layer wraps it and still decorates the response.
    """
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)
