from fastapi import APIRouter

from .endpoints.health import router as health_router
from .endpoints.labels import router as labels_router
from .endpoints.profile import router as profile_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "Discovery Observer API is running"}


api_router.include_router(health_router)
api_router.include_router(profile_router)
api_router.include_router(labels_router)
