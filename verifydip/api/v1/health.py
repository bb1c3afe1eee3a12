from fastapi import APIRouter, Depends

from verifydip.core.config import Settings
from verifydip.core.deps import get_app_settings

router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_app_settings)):
    return {"status": "ok", "storage": settings.storage_backend}
