"""
API Request and Response Schemas

This module defines all Pydantic models for API requests and responses.
Separated from endpoints to keep concerns separated and enable reuse.

Design Principles:
- Request models only check the JSON shape; URL rules live in the service
- Response field names follow the public wire format (shortUrl, not short_url)
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ShortenRequest(BaseModel):
    """Request model for URL shortening endpoint."""
    url: Optional[str] = Field(None, description="The long URL to shorten")


class ShortenResponse(BaseModel):
    """Response model for URL shortening endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(..., description="The generated short code")
    short_url: str = Field(..., alias="shortUrl", description="The complete short URL")


class HealthResponse(BaseModel):
    """Response model for the liveness check."""
    ok: bool = True


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""
    error: str
