from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from citysafety.core.errors import NotFoundError
from citysafety.schemas.user_report import UserReportCreate, UserReportRead
from citysafety.services.alerts.user_reports import submit_user_report
from citysafety.services.store.memory_store import (
    AlertLog,
    UserReportStore,
    get_alert_log,
    get_report_store,
)

router = APIRouter(prefix="/user-reports", tags=["User Reports"])


@router.get("", response_model=List[UserReportRead])
def list_user_reports(report_store: UserReportStore = Depends(get_report_store)):
    """List user reports, newest first"""
    return [UserReportRead.model_validate(r) for r in report_store.list()]


@router.get("/{report_id}", response_model=UserReportRead)
def get_user_report(report_id: UUID, report_store: UserReportStore = Depends(get_report_store)):
    report = report_store.get(report_id)
    if report is None:
        raise NotFoundError(f"User report with id {report_id} not found")
    return UserReportRead.model_validate(report)


@router.post("", response_model=UserReportRead, status_code=status.HTTP_201_CREATED)
def create_user_report(
    payload: UserReportCreate,
    report_store: UserReportStore = Depends(get_report_store),
    alert_log: AlertLog = Depends(get_alert_log),
):
    """
    Submit a user safety report.

    Incident reports also raise a warning alert naming the location.
    """
    report = submit_user_report(
        report_store,
        alert_log,
        location=payload.location,
        category=payload.category,
        description=payload.description,
        latitude=payload.latitude,
        longitude=payload.longitude,
    )
    return UserReportRead.model_validate(report)
