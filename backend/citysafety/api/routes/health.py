from fastapi import APIRouter, Depends

from citysafety.services.realtime.refresh_scheduler import RefreshScheduler, get_refresh_scheduler
from citysafety.services.store.memory_store import AlertLog, RegionStore, get_alert_log, get_region_store

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    summary="Service health check",
    description="Reports scheduler state and store sizes",
)
def health_check(
    scheduler: RefreshScheduler = Depends(get_refresh_scheduler),
    region_store: RegionStore = Depends(get_region_store),
    alert_log: AlertLog = Depends(get_alert_log),
):
    return {
        "status": "ok",
        "scheduler_running": scheduler.is_running,
        "region_count": region_store.count(),
        "alert_count": alert_log.count(),
    }
