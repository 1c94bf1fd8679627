from fastapi import APIRouter

from carecompanion.api.profiles import router as profiles_router
from carecompanion.api.children import router as children_router
from carecompanion.api.screening import router as screening_router
from carecompanion.api.progress import router as progress_router
from carecompanion.api.chat import router as chat_router

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(profiles_router)
api_router.include_router(children_router)
api_router.include_router(screening_router)
api_router.include_router(progress_router)
api_router.include_router(chat_router)
