"""Signup and login: account creation and token issuance."""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import Err, ErrorKind, Ok, Result
from app.core.security import PasswordHasher, TokenCodec
from app.models import ROLE_USER, User
from app.repositories.user_repository import UserRepository
from app.services.credentials import CredentialVerifier

logger = logging.getLogger(__name__)

USERNAME_TAKEN_MESSAGE = "Error: Username is already taken"
EMAIL_IN_USE_MESSAGE = "Error: Email is already in use"
REGISTERED_MESSAGE = "User registered successfully"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


def register_user(
    db: Session,
    hasher: PasswordHasher,
    username: str,
    email: str,
    password: str,
) -> Result[User]:
    """
    Create a ROLE_USER account after advisory uniqueness checks.

    The unique constraints are the final authority: a concurrent signup that
    wins the race turns our insert into an IntegrityError, which is rolled
    back and reported with the same messages as the advisory checks.
    """
    users = UserRepository(db)
    if users.exists_by_username(username):
        return Err(ErrorKind.CONFLICT, USERNAME_TAKEN_MESSAGE)
    if users.exists_by_email(email):
        return Err(ErrorKind.CONFLICT, EMAIL_IN_USE_MESSAGE)

    user = User(
        username=username,
        email=email,
        password=hasher.hash(password),
        role=ROLE_USER,
    )
    try:
        users.save(user)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Signup lost a uniqueness race for username=%s", username)
        if users.exists_by_username(username):
            return Err(ErrorKind.CONFLICT, USERNAME_TAKEN_MESSAGE)
        return Err(ErrorKind.CONFLICT, EMAIL_IN_USE_MESSAGE)

    db.refresh(user)
    logger.info("Registered user id=%s username=%s", user.id, user.username)
    return Ok(user)


def login(
    db: Session,
    verifier: CredentialVerifier,
    codec: TokenCodec,
    username: str,
    password: str,
) -> Result[LoginResult]:
    """Verify credentials and issue a bearer token for the user."""
    result = verifier.verify(UserRepository(db), username, password)
    if isinstance(result, Err):
        return result
    user = result.value
    return Ok(LoginResult(token=codec.issue(user.username), user=user))
