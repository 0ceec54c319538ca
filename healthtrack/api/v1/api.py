from fastapi import APIRouter

from healthtrack.api.v1.endpoints import health_entries
from healthtrack.api.v1.endpoints import diary_entries
from healthtrack.api.v1.endpoints import insights

api_router = APIRouter()

api_router.include_router(health_entries.router, prefix="/health-entries", tags=["health-entries"])
api_router.include_router(diary_entries.router, prefix="/diary-entries", tags=["diary-entries"])
api_router.include_router(insights.router, prefix="/insights", tags=["insights"])
