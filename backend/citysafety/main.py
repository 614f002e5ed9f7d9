import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from citysafety.core.config import get_settings
from citysafety.core.errors import CitySafetyError
from citysafety.api import api_router
from citysafety.services.realtime.refresh_scheduler import get_refresh_scheduler

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    scheduler = get_refresh_scheduler()
    if settings.refresh_enabled:
        await scheduler.start()
    else:
        scheduler.seed_if_empty()
    try:
        yield
    finally:
        await scheduler.stop()


app = FastAPI(
    title="City Safety Map",
    description="""
    ## City Safety Map API

    Live regional safety scores and safety-weighted route planning.

    ### Features

    * **Safety Scores**: Weighted score per region from lighting, crowd, incidents, sentiment, weather, police presence and time of day, refreshed every few seconds
    * **Alerts**: Severity-tagged alerts keyed to region risk, kept for a fixed retention window
    * **User Reports**: Citizen reports; incidents raise a warning alert
    * **Route Planning**: Straight-line route between two places annotated with the safety of nearby regions
    * **Real-time Updates**: WebSocket push of region scores after every refresh

    ### API Endpoints

    * `/api/v1/health` - Service health
    * `/api/v1/heatmap`, `/api/v1/regions` - Regions and scores
    * `/api/v1/alerts` - Alert log
    * `/api/v1/user-reports` - User reports
    * `/api/v1/routing` - Route planning
    * `/api/v1/realtime` - Live updates (WebSocket)
    """,
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Health", "description": "Service health and scheduler status"},
        {"name": "Regions", "description": "Regions with live safety scores and raw signals"},
        {"name": "Alerts", "description": "Safety alerts, newest first"},
        {"name": "User Reports", "description": "User-submitted safety reports"},
        {"name": "Routing", "description": "Safety-annotated route planning"},
        {"name": "Realtime", "description": "Live region updates over WebSocket"},
    ],
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CitySafetyError)
async def city_safety_error_handler(request: Request, exc: CitySafetyError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Include API router
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.get(
    "/",
    summary="API root",
    description="Basic information about the API",
    tags=["Health"]
)
def root():
    return {
        "name": "City Safety Map",
        "version": "1.0.0",
        "status": "running",
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
            "openapi": "/openapi.json"
        }
    }
