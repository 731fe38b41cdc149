import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from resume_extraction.core.exceptions import InvalidRequestError
from resume_extraction.schemas.parse_result import ParseResult

logger = logging.getLogger(__name__)


def _describe(errors: list[dict]) -> str:
    parts = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        message = error.get("msg", "invalid value")
        parts.append(f"{'.'.join(loc)}: {message}" if loc else message)
    return "; ".join(parts) or "Invalid request"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies with the usual ``ParseResult`` shape."""
    message = _describe(exc.errors())
    logger.warning("Invalid request to %s: %s", request.url.path, message)
    result = ParseResult.failure(message, InvalidRequestError.code)
    return JSONResponse(
        content=result.model_dump(mode="json"),
        status_code=InvalidRequestError.status_code,
    )
