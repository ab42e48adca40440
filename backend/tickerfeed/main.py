import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tickerfeed.api.routes import router
from tickerfeed.config.settings import settings
from tickerfeed.errors import ValidationError

logger = logging.getLogger(__name__)

INVALID_BODY = "Invalid request body"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    # httpx logs full request URLs, which carry provider tokens.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": ", ".join(settings.cors_allow_origins),
        "Access-Control-Allow-Headers": ", ".join(settings.cors_allow_headers),
    }


async def apply_cors_headers(request: Request, call_next) -> Response:
    """Answer every preflight and stamp CORS headers on every response."""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=cors_headers())
    response = await call_next(request)
    response.headers.update(cors_headers())
    return response


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=cors_headers(),
    )


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(400, exc.message)


async def _handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Rejected request body on %s: %s", request.url.path, exc.errors())
    return _error_response(400, INVALID_BODY)


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path)
    return _error_response(500, str(exc) or "Unknown error")


def create_app() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(title="tickerfeed")
    app.middleware("http")(apply_cors_headers)
    app.add_exception_handler(ValidationError, _handle_validation_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
    app.include_router(router)
    return app


app = create_app()
