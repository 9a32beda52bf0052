from fastapi import APIRouter
from audiodrop.api.routes.audio import router as audio_router

api_router = APIRouter()
api_router.include_router(audio_router)

__all__ = ['api_router']
