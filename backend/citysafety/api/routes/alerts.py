from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from citysafety.core.config import get_settings
from citysafety.core.errors import NotFoundError
from citysafety.schemas.alert import AlertCreate, AlertRead
from citysafety.services.store.memory_store import AlertLog, get_alert_log

router = APIRouter(prefix="/alerts", tags=["Alerts"])
settings = get_settings()


@router.get("", response_model=List[AlertRead])
def list_alerts(alert_log: AlertLog = Depends(get_alert_log)):
    """List alerts, newest first"""
    return [AlertRead.model_validate(a) for a in alert_log.list()]


@router.get("/{alert_id}", response_model=AlertRead)
def get_alert(alert_id: UUID, alert_log: AlertLog = Depends(get_alert_log)):
    alert = alert_log.get(alert_id)
    if alert is None:
        raise NotFoundError(f"Alert with id {alert_id} not found")
    return AlertRead.model_validate(alert)


@router.post("", response_model=AlertRead, status_code=status.HTTP_201_CREATED)
def create_alert(payload: AlertCreate, alert_log: AlertLog = Depends(get_alert_log)):
    """Create a new alert"""
    alert = alert_log.create(
        region_id=payload.region_id,
        severity=payload.severity,
        message=payload.message,
    )
    return AlertRead.model_validate(alert)


@router.post("/prune")
def prune_alerts(
    max_age_hours: float = Query(
        settings.alert_retention_hours, gt=0, description="Remove alerts older than this"
    ),
    alert_log: AlertLog = Depends(get_alert_log),
):
    """Remove alerts older than the given age"""
    removed = alert_log.prune(max_age_hours)
    return {"removed": removed, "remaining": alert_log.count()}
