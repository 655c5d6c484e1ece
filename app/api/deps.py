"""Auth filter and shared request dependencies.

Routes are classified when routers are registered: public routers depend on
``bind_optional_principal`` and guarded routers on ``require_principal``.
Either way the principal for the request lives on ``request.state.principal``.
"""

import logging
from typing import Annotated

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import Err, Ok, Result, unauthenticated, unwrap
from app.core.security import PasswordHasher, TokenCodec
from app.models import User
from app.repositories.user_repository import UserRepository
from app.services.content_service import ContentService
from app.services.credentials import CredentialVerifier

logger = logging.getLogger(__name__)

# Declared for the OpenAPI security scheme; the header itself is parsed by AuthFilter.
bearer_scheme = HTTPBearer(
    auto_error=False,
    description="JWT obtained from POST /api/auth/login",
)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` value, else None."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        return None
    return token


class AuthFilter:
    """
    Turns an Authorization header into the authenticated user.

    Stateless: safe to share across concurrent requests. Every failure is the
    same Unauthenticated error to the caller; the specific cause is only logged.
    """

    def __init__(self, codec: TokenCodec) -> None:
        self.codec = codec

    def authenticate(self, authorization: str | None, users: UserRepository) -> Result[User]:
        token = extract_bearer_token(authorization)
        if token is None:
            return unauthenticated()

        result = self.codec.validate(token)
        if isinstance(result, Err):
            logger.debug("Bearer token rejected: %s", result.reason.value if result.reason else "unknown")
            return result

        user = users.find_by_username(result.value.subject)
        if user is None:
            logger.debug("Bearer token subject no longer exists")
            return unauthenticated()
        return Ok(user)


def get_auth_filter(request: Request) -> AuthFilter:
    return request.app.state.auth_filter


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def get_credential_verifier(request: Request) -> CredentialVerifier:
    return request.app.state.credential_verifier


DbSession = Annotated[Session, Depends(get_db)]


def require_principal(
    request: Request,
    db: DbSession,
    auth_filter: Annotated[AuthFilter, Depends(get_auth_filter)],
    _credentials: Annotated[HTTPAuthorizationCredentials | None, Security(bearer_scheme)],
) -> User:
    """Dependency for guarded routes: bind the authenticated user or respond 401."""
    request.state.principal = None
    user = unwrap(auth_filter.authenticate(request.headers.get("Authorization"), UserRepository(db)))
    request.state.principal = user
    return user


def bind_optional_principal(
    request: Request,
    db: DbSession,
    auth_filter: Annotated[AuthFilter, Depends(get_auth_filter)],
) -> User | None:
    """Dependency for public routes: bind a user when a valid token is present, never reject."""
    request.state.principal = None
    authorization = request.headers.get("Authorization")
    if authorization is None:
        return None
    result = auth_filter.authenticate(authorization, UserRepository(db))
    if isinstance(result, Ok):
        request.state.principal = result.value
        return result.value
    return None


def current_principal(request: Request) -> User:
    """The user bound by require_principal for this request."""
    user = getattr(request.state, "principal", None)
    if user is None:
        unwrap(unauthenticated())
    return user


CurrentUser = Annotated[User, Depends(current_principal)]


def get_content_service(db: DbSession) -> ContentService:
    return ContentService(db)
