"""Credential verification: username + password to a verified user."""

import logging
from enum import Enum

from app.core.errors import Ok, Result, unauthenticated
from app.core.security import PasswordHasher
from app.models import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CredentialFailure(Enum):
    """Why a login was refused. Never returned to clients."""

    UNKNOWN_USER = "unknown_user"
    BAD_PASSWORD = "bad_password"


class CredentialVerifier:
    """Checks a username/password pair against the user store."""

    def __init__(self, hasher: PasswordHasher) -> None:
        self.hasher = hasher

    def verify(self, users: UserRepository, username: str, password: str) -> Result[User]:
        """
        Return Ok(user) when the password matches the stored hash.

        Unknown usernames still pay for a full bcrypt comparison so response
        timing does not reveal whether the account exists.
        """
        user = users.find_by_username(username)
        if user is None:
            self.hasher.verify_dummy(password)
            logger.info("Login refused: %s", CredentialFailure.UNKNOWN_USER.value)
            return unauthenticated(CredentialFailure.UNKNOWN_USER)
        if not self.hasher.verify(password, user.password):
            logger.info("Login refused for user id=%s: %s", user.id, CredentialFailure.BAD_PASSWORD.value)
            return unauthenticated(CredentialFailure.BAD_PASSWORD)
        return Ok(user)
