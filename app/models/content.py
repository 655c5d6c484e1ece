"""ORM model for author-owned content items."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin

DEFAULT_STATUS = "DRAFT"


class Content(TimestampMixin, Base):
    """
    A titled text item owned by exactly one author.

    author_id is set on creation and never reassigned. status is free-form text.
    """

    __tablename__ = "contents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    status = Column(String(50), nullable=False, default=DEFAULT_STATUS, index=True)
    tags = Column(String(500), nullable=True)
    author_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    author = relationship("User", back_populates="contents", lazy="joined", innerjoin=True)

    def __repr__(self) -> str:
        return f"<Content id={self.id} author_id={self.author_id}>"
