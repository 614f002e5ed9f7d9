from fastapi import APIRouter
from citysafety.api.routes import health, regions, alerts, reports, routing, realtime

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(regions.router)
api_router.include_router(alerts.router)
api_router.include_router(reports.router)
api_router.include_router(routing.router)
api_router.include_router(realtime.router)
