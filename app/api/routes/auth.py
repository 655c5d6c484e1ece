"""Signup and login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import (
    DbSession,
    get_credential_verifier,
    get_password_hasher,
    get_token_codec,
)
from app.core.errors import unwrap
from app.core.security import PasswordHasher, TokenCodec
from app.schemas.auth import JwtResponse, LoginRequest, SignupRequest
from app.schemas.common import MessageResponse, ValidationErrorResponse
from app.services.auth_service import REGISTERED_MESSAGE, login, register_user
from app.services.credentials import CredentialVerifier

router = APIRouter()


@router.post(
    "/signup",
    response_model=MessageResponse,
    summary="User registration",
    responses={400: {"model": ValidationErrorResponse}},
)
def signup(
    body: SignupRequest,
    db: DbSession,
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> MessageResponse:
    """
    Register a new account with role ROLE_USER.

    Returns 400 "Error: Username is already taken" or "Error: Email is already in use"
    when either is already registered.
    """
    unwrap(register_user(db, hasher, body.username, str(body.email), body.password))
    return MessageResponse(message=REGISTERED_MESSAGE)


@router.post(
    "/login",
    response_model=JwtResponse,
    summary="User login",
    responses={401: {"model": MessageResponse}},
)
def authenticate(
    body: LoginRequest,
    db: DbSession,
    verifier: Annotated[CredentialVerifier, Depends(get_credential_verifier)],
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
) -> JwtResponse:
    """
    Authenticate with username and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    outcome = unwrap(login(db, verifier, codec, body.username, body.password))
    return JwtResponse(
        token=outcome.token,
        username=outcome.user.username,
        email=outcome.user.email,
    )
