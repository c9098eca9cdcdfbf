"""Request validation endpoints."""

from fastapi import APIRouter

from gallerywall.application.config import load_config_from_dict, validate_config
from gallerywall.web.schemas.requests import ConfigValidateRequest
from gallerywall.web.schemas.responses import (
    ErrorResponseSchema,
    ValidationResultSchema,
)

router = APIRouter(
    prefix="/validate",
    tags=["validate"],
    responses={422: {"model": ErrorResponseSchema}},
)


@router.post("", response_model=ValidationResultSchema)
def validate_request(request: ConfigValidateRequest) -> ValidationResultSchema:
    """Validate a generation request without running it.

    Schema errors are answered with 422 by the ConfigError handler; advisory
    errors and warnings are returned in the body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[{"message": w.message, "path": w.path} for w in result.warnings],
    )
