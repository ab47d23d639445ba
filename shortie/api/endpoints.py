"""
FastAPI Endpoints for Shortie

This module defines the REST API endpoints with minimal logic.
Endpoints only handle:
- Request parsing (Pydantic models)
- Error handling and HTTP responses
- Delegating to the service layer

Endpoints are plain functions, so FastAPI runs each request on its worker
thread pool and requests are served in parallel against the shared store.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError as SchemaValidationError

from shortie.api.schemas import ErrorResponse, ShortenRequest, ShortenResponse
from shortie.core.exceptions import ShortCodeNotFoundError, ShortieException, ValidationError
from shortie.services.url_service import URLShorteningService

logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "invalid url (must start with http or https)"
SERVER_ERROR_MESSAGE = "server"
NOT_FOUND_MESSAGE = "not found"

router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": ...}`` envelope used by every failure."""
    return JSONResponse(status_code=status_code, content={"error": message})


def get_url_service(request: Request) -> URLShorteningService:
    """Dependency returning the service bound to this application instance."""
    return request.app.state.url_service


async def parse_shorten_request(request: Request) -> ShortenRequest:
    """
    Dependency decoding the request body as JSON, whatever its Content-Type.

    `curl -d` sends form-encoded headers with a JSON payload, so the header
    is not trusted; only the bytes are.

    Raises:
        RequestValidationError: If the body is not a JSON object with a string url
    """
    body = await request.body()
    try:
        return ShortenRequest.model_validate_json(body)
    except SchemaValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid JSON or URL"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create a short URL",
    description="Takes a long URL and returns a random 7-character code for it",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ShortenRequest.model_json_schema()}},
        }
    },
)
def create_short_url(
    body: ShortenRequest = Depends(parse_shorten_request),
    url_service: URLShorteningService = Depends(get_url_service)
):
    """
    Create a new short URL from a long URL.

    Returns:
        ShortenResponse with code and shortUrl
    """
    try:
        result = url_service.shorten(body.url or "")
    except ValidationError as e:
        logger.info(f"Rejected URL: {e.reason}")
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_URL_MESSAGE)
    except ShortieException as e:
        logger.error(f"Failed to create short URL: {e}", exc_info=True)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)
    except Exception:
        logger.exception("Unexpected error while creating short URL")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR_MESSAGE)

    return ShortenResponse(code=result.code, short_url=result.short_url)


@router.get("/shorten", include_in_schema=False)
def shorten_wrong_method():
    # Without this, GET /shorten would be taken for a short code lookup
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": "POST"},
    )


@router.get(
    "/{short_code}",
    status_code=status.HTTP_302_FOUND,
    responses={404: {"model": ErrorResponse, "description": "Short code not found"}},
    summary="Redirect to original URL",
    description="Takes a short code and redirects to the original long URL"
)
def redirect_to_url(
    short_code: str,
    url_service: URLShorteningService = Depends(get_url_service)
):
    """
    Redirect to the original URL for a given short code.

    Malformed and unknown codes both answer 404.
    """
    try:
        target = url_service.resolve(short_code)
    except ShortCodeNotFoundError:
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)

    return RedirectResponse(url=target, status_code=status.HTTP_302_FOUND)
