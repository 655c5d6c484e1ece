"""API routes. /auth is public; /contents requires a bearer token."""

from fastapi import APIRouter, Depends

from app.api.deps import bind_optional_principal, require_principal
from app.api.routes import auth, contents, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
    dependencies=[Depends(bind_optional_principal)],
)
router.include_router(
    contents.router,
    prefix="/contents",
    tags=["Content"],
    dependencies=[Depends(require_principal)],
)
