"""ORM model for application users."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base, TimestampMixin

ROLE_USER = "ROLE_USER"


class User(TimestampMixin, Base):
    """
    User account for JWT authentication.

    password holds the bcrypt hash, never the plain text. role is always ROLE_USER.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_USER, server_default=ROLE_USER)

    contents = relationship("Content", back_populates="author", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
