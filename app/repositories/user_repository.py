"""User store: lookups and uniqueness checks over the users table."""

from sqlalchemy.orm import Session

from app.models import User


class UserRepository:
    """Narrow persistence capabilities for User rows, bound to one session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def exists_by_username(self, username: str) -> bool:
        return self.db.query(self.db.query(User).filter(User.username == username).exists()).scalar()

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(self.db.query(User).filter(User.email == email).exists()).scalar()

    def save(self, user: User) -> User:
        """Stage the user and flush so the database assigns id and defaults."""
        self.db.add(user)
        self.db.flush()
        return user
