from fastapi import APIRouter, Depends

from app.platform.deps import get_app_settings
from app.platform.config import Settings

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(settings: Settings = Depends(get_app_settings)):
    return {"status": "ok", "message": f"{settings.APP_NAME} is operational"}
