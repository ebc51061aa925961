from fastapi import APIRouter

from wordvault.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe. Does not touch the database."""
    settings = get_settings()
    return {"status": "ok", "version": settings.VERSION}
