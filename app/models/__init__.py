"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.content import Content
from app.models.user import ROLE_USER, User

__all__ = ["Base", "Content", "ROLE_USER", "User"]
