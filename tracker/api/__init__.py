from fastapi import APIRouter

from tracker.api.routes import router as app_router

router = APIRouter()
router.include_router(app_router)

__all__ = ["router"]
