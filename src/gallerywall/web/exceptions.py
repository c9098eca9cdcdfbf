"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gallerywall.application.config import ConfigError
from gallerywall.web.schemas.responses import ErrorResponseSchema


class InvalidRequestError(Exception):
    """Raised when a request loads but fails the advisory validation."""

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        super().__init__(f"Invalid request: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=ErrorResponseSchema(
                error=exc.message,
                error_type=exc.error_type,
                details=exc.details or None,
            ).model_dump(),
        )

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(
        request: Request, exc: InvalidRequestError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=ErrorResponseSchema(
                error="Request validation failed",
                error_type="invalid_request",
                details=exc.errors,
            ).model_dump(),
        )
