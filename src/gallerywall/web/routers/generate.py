"""Layout generation endpoints."""

from typing import Iterator

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from gallerywall.application.config import (
    RecommenderConfiguration,
    config_to_input,
    load_config_from_dict,
    validate_config,
)
from gallerywall.infrastructure import MessageJsonFormatter, split_messages
from gallerywall.web.dependencies import ServiceBuilderDep
from gallerywall.web.exceptions import InvalidRequestError
from gallerywall.web.schemas.requests import GenerateMessageRequest
from gallerywall.web.schemas.responses import (
    ErrorResponseSchema,
    GenerateResponseSchema,
    LayoutSolutionSchema,
)

router = APIRouter(
    prefix="/generate",
    tags=["generate"],
    responses={422: {"model": ErrorResponseSchema}},
)


def _load_payload(request: GenerateMessageRequest) -> RecommenderConfiguration:
    """Validate the message payload, raising on schema or advisory errors."""
    config = load_config_from_dict(request.payload)
    result = validate_config(config)
    if not result.is_valid:
        raise InvalidRequestError(
            [{"path": e.path, "message": e.message} for e in result.errors]
        )
    return config


@router.post("", response_model=GenerateResponseSchema)
def generate_layouts(
    request: GenerateMessageRequest,
    build_service: ServiceBuilderDep,
) -> GenerateResponseSchema:
    """Generate layouts and return the forwarded solutions with the total count.

    Args:
        request: A GENERATE message.

    Returns:
        Forwarded solutions, the total generated and an error message if
        generation failed.
    """
    config = _load_payload(request)
    service = build_service(config)
    solutions, count, error = split_messages(
        service.run_generation(config_to_input(config))
    )
    return GenerateResponseSchema(
        solutions=[LayoutSolutionSchema.model_validate(s.to_dict()) for s in solutions],
        count=count or 0,
        error=error,
    )


@router.post("/stream")
def stream_layouts(
    request: GenerateMessageRequest,
    build_service: ServiceBuilderDep,
) -> StreamingResponse:
    """Stream the response messages as newline-delimited JSON.

    Each line is one message: SOLUTION_FOUND, then DONE (or a single ERROR).
    """
    config = _load_payload(request)
    service = build_service(config)
    data = config_to_input(config)
    formatter = MessageJsonFormatter()

    def lines() -> Iterator[str]:
        for message in service.run_generation(data):
            yield formatter.format_message(message) + "\n"

    return StreamingResponse(lines(), media_type="application/x-ndjson")
