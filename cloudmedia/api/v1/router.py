from fastapi import APIRouter

from cloudmedia.api.v1.endpoints import health, media

api_router = APIRouter()
api_router.include_router(media.router)
api_router.include_router(health.router)
