"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from datetime import timedelta

import uvicorn
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import AuthFilter
from app.api.routes import router as api_router
from app.core.config import Settings, get_settings
from app.core.exception_handlers import REQUEST_ID_HEADER, register_exception_handlers
from app.core.logging import configure_logging
from app.core.security import PasswordHasher, TokenCodec
from app.services.credentials import CredentialVerifier

API_VERSION = "0.1.0"


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application: hasher, token codec, credential verifier and auth
    filter are constructed once here and shared through app.state.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Web Editor API",
        description="Authenticated CRUD for author-owned text content.",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    codec = TokenCodec(
        secret=settings.JWT_SECRET.get_secret_value(),
        lifetime=timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    )
    app.state.settings = settings
    app.state.password_hasher = hasher
    app.state.token_codec = codec
    app.state.credential_verifier = CredentialVerifier(hasher)
    app.state.auth_filter = AuthFilter(codec)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(CorrelationIdMiddleware, header_name=REQUEST_ID_HEADER)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Web Editor API"}

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on SERVER_HOST:SERVER_PORT."""
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
