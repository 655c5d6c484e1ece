"""Pydantic request/response schemas."""

from app.schemas.auth import JwtResponse, LoginRequest, SignupRequest
from app.schemas.common import (
    FieldError,
    MessageResponse,
    PageResponse,
    ValidationErrorResponse,
)
from app.schemas.content import ContentRequest, ContentResponse
from app.schemas.health import HealthResponse

__all__ = [
    "ContentRequest",
    "ContentResponse",
    "FieldError",
    "HealthResponse",
    "JwtResponse",
    "LoginRequest",
    "MessageResponse",
    "PageResponse",
    "SignupRequest",
    "ValidationErrorResponse",
]
