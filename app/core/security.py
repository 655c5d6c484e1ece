"""Password hashing and JWT issuance/validation for authentication."""

import base64
import hashlib
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Any

import bcrypt
import jwt
from jwt.utils import base64url_decode, base64url_encode

from app.core.clock import Clock, utc_now
from app.core.errors import Ok, Result, unauthenticated


# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12
# bcrypt only reads the first 72 bytes of its input.
BCRYPT_MAX_INPUT_BYTES = 72

# Single symmetric MAC; tokens declaring anything else are rejected.
TOKEN_ALGORITHM = "HS256"
TOKEN_TYPE = "Bearer"


def _bcrypt_input(plain_password: str) -> bytes:
    """Encode a password for bcrypt, pre-hashing inputs beyond the 72-byte limit."""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > BCRYPT_MAX_INPUT_BYTES:
        pw_bytes = base64.b64encode(hashlib.sha256(pw_bytes).digest())
    return pw_bytes


class PasswordHasher:
    """Salted bcrypt hashing with a work factor fixed at construction."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self.rounds = rounds
        # Compared against when the username is unknown, so login timing is uniform.
        self._dummy_hash = self.hash(secrets.token_urlsafe(32))

    def hash(self, plain_password: str) -> str:
        """Hash a plain-text password for storage. Do not store plain passwords."""
        return bcrypt.hashpw(
            _bcrypt_input(plain_password), bcrypt.gensalt(rounds=self.rounds)
        ).decode("utf-8")

    def verify(self, plain_password: str, hashed: str | None) -> bool:
        """Verify a plain password against a stored hash; False for malformed hashes."""
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(_bcrypt_input(plain_password), hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def verify_dummy(self, plain_password: str) -> bool:
        """Run a full comparison against the dummy hash. Always False."""
        self.verify(plain_password, self._dummy_hash)
        return False


class TokenFailure(Enum):
    """Why a token was rejected. Visible to the auth filter only."""

    MALFORMED = "malformed"
    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"
    UNSUPPORTED_ALGORITHM = "unsupported_algorithm"


class InvalidTokenError(Exception):
    """Raised by TokenCodec.subject_of for tokens that do not validate."""

    def __init__(self, failure: TokenFailure) -> None:
        self.failure = failure
        super().__init__(f"Invalid token: {failure.value}")


@dataclass(frozen=True)
class TokenClaims:
    """Claims of a validated token."""

    subject: str
    issued_at: datetime
    expires_at: datetime


def _is_canonical_segment(segment: str) -> bool:
    """True if the segment is exactly the base64url encoding of its decoded bytes."""
    try:
        raw = base64url_decode(segment)
    except (ValueError, TypeError):
        return False
    return base64url_encode(raw).decode("ascii") == segment


class TokenCodec:
    """
    Stateless issuer/validator of HS256 bearer tokens carrying a username.

    Rotating the secret invalidates every outstanding token. Expiry is checked
    against the codec's clock with zero skew tolerance.
    """

    def __init__(self, secret: str, lifetime: timedelta, clock: Clock = utc_now) -> None:
        if not secret:
            raise ValueError("Token secret must be non-empty")
        if lifetime <= timedelta(0):
            raise ValueError("Token lifetime must be positive")
        self._secret = secret
        self.lifetime = lifetime
        self._clock = clock

    def issue(self, username: str) -> str:
        """Create a signed token with sub=username, iat=now and exp=now+lifetime."""
        iat = int(self._clock().timestamp())
        payload: dict[str, Any] = {
            "sub": username,
            "iat": iat,
            "exp": iat + int(self.lifetime.total_seconds()),
        }
        return jwt.encode(payload, self._secret, algorithm=TOKEN_ALGORITHM)

    def validate(self, token: str) -> Result[TokenClaims]:
        """
        Parse and verify a compact token.

        Returns Ok(TokenClaims) or an Unauthenticated Err whose reason is a
        TokenFailure. The declared algorithm is checked before the signature.
        """
        if not isinstance(token, str) or not token:
            return unauthenticated(TokenFailure.MALFORMED)
        segments = token.split(".")
        if len(segments) != 3 or not all(_is_canonical_segment(s) for s in segments):
            return unauthenticated(TokenFailure.MALFORMED)

        try:
            header = jwt.get_unverified_header(token)
        except jwt.PyJWTError:
            return unauthenticated(TokenFailure.MALFORMED)
        if header.get("alg") != TOKEN_ALGORITHM:
            return unauthenticated(TokenFailure.UNSUPPORTED_ALGORITHM)

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[TOKEN_ALGORITHM],
                # Expiry is checked below against the injected clock.
                options={
                    "require": ["sub", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                },
            )
        except jwt.InvalidSignatureError:
            return unauthenticated(TokenFailure.BAD_SIGNATURE)
        except jwt.InvalidAlgorithmError:
            return unauthenticated(TokenFailure.UNSUPPORTED_ALGORITHM)
        except jwt.PyJWTError:
            return unauthenticated(TokenFailure.MALFORMED)

        sub = payload.get("sub")
        iat = payload.get("iat")
        exp = payload.get("exp")
        if not isinstance(sub, str) or not sub:
            return unauthenticated(TokenFailure.MALFORMED)
        if not isinstance(iat, int) or not isinstance(exp, int):
            return unauthenticated(TokenFailure.MALFORMED)
        if self._clock().timestamp() >= exp:
            return unauthenticated(TokenFailure.EXPIRED)

        return Ok(
            TokenClaims(
                subject=sub,
                issued_at=datetime.fromtimestamp(iat, UTC),
                expires_at=datetime.fromtimestamp(exp, UTC),
            )
        )

    def subject_of(self, token: str) -> str:
        """Return the username of a valid token. Raises InvalidTokenError otherwise."""
        result = self.validate(token)
        if isinstance(result, Ok):
            return result.value.subject
        raise InvalidTokenError(result.reason)
