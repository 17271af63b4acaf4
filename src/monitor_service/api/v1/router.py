from fastapi import APIRouter

from src.monitor_service.api.v1 import monitors

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(monitors.router)
