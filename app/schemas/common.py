"""Shared response schemas: messages, errors and pages."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Generic message body used for confirmations and errors."""

    message: str


class FieldError(BaseModel):
    """One failed field check."""

    field: str
    message: str


class ValidationErrorResponse(MessageResponse):
    """400 body for request validation failures."""

    errors: list[FieldError] = Field(default_factory=list)


class PageResponse(BaseModel, Generic[T]):
    """One page of a paginated listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: list[T]
    total_elements: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    page: int = Field(..., ge=0)
    size: int = Field(..., ge=1)
