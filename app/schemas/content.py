"""Request/response schemas for content endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.models import Content

TITLE_MAX_LENGTH = 255
STATUS_MAX_LENGTH = 50
TAGS_MAX_LENGTH = 500


class ContentRequest(BaseModel):
    """Body for creating or replacing a content item."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH, description="Title")
    body: str = Field(..., min_length=1, description="Body text")
    status: str | None = Field(
        default=None,
        max_length=STATUS_MAX_LENGTH,
        description="Free-form status tag; DRAFT when omitted",
    )
    tags: str | None = Field(
        default=None, max_length=TAGS_MAX_LENGTH, description="Comma-separated tags"
    )

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v

    @field_validator("body")
    @classmethod
    def body_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Body is required")
        return v


class ContentResponse(BaseModel):
    """Content item as returned to clients (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    body: str
    status: str
    author_username: str
    tags: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_model(cls, content: Content) -> "ContentResponse":
        return cls(
            id=content.id,
            title=content.title,
            body=content.body,
            status=content.status,
            author_username=content.author.username,
            tags=content.tags,
            created_at=content.created_at,
            updated_at=content.updated_at,
        )
