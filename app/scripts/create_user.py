"""
Create a user from the command line. Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD
Example:
  python -m app.scripts.create_user alice alice@example.org 'a-long-password'
"""
import argparse
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import Err
from app.core.security import PasswordHasher
from app.schemas.auth import SignupRequest
from app.services.auth_service import register_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Web Editor user (ROLE_USER).")
    parser.add_argument("username", help="Username (1-50 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-128 chars)")
    args = parser.parse_args(argv)

    try:
        request = SignupRequest(
            username=args.username.strip(), email=args.email, password=args.password
        )
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(p) for p in error["loc"])
            print(f"Invalid {field}: {error['msg']}", file=sys.stderr)
        return 1

    hasher = PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)
    db = SessionLocal()
    try:
        result = register_user(db, hasher, request.username, str(request.email), request.password)
        if isinstance(result, Err):
            print(result.message, file=sys.stderr)
            return 1
        print(f"Created user '{result.value.username}' with role '{result.value.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
