import logging
from typing import Optional

from citysafety.core.config import get_settings
from citysafety.core.errors import InvalidInputError
from citysafety.models import USER_REPORT_REGION_ID, UserReport
from citysafety.services.store.memory_store import AlertLog, UserReportStore

logger = logging.getLogger(__name__)

REPORT_CATEGORIES = ("incident", "lighting", "crowd", "other")
DESCRIPTION_PREVIEW_CHARS = 100


def submit_user_report(
    report_store: UserReportStore,
    alert_log: AlertLog,
    location: Optional[str],
    category: Optional[str],
    description: Optional[str],
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> UserReport:
    """
    Store a user report; an ``incident`` report also raises one warning alert.

    Raises:
        InvalidInputError: location, category or description missing or blank
    """
    missing = [
        name
        for name, value in (("location", location), ("category", category), ("description", description))
        if value is None or not str(value).strip()
    ]
    if missing:
        raise InvalidInputError(f"Missing required fields: {', '.join(missing)}")
    if category not in REPORT_CATEGORIES:
        raise InvalidInputError(f"Unknown report category: {category}")

    settings = get_settings()
    report = report_store.create(
        location=location,
        latitude=settings.city_center_lat if latitude is None else latitude,
        longitude=settings.city_center_lng if longitude is None else longitude,
        category=category,
        description=description,
    )
    logger.info(f"User report {report.id} submitted ({category}) at {location}")

    if category == "incident":
        alert_log.create(
            region_id=USER_REPORT_REGION_ID,
            severity="warning",
            message=(
                f"User reported incident near {location}: "
                f"{description[:DESCRIPTION_PREVIEW_CHARS]}"
            ),
        )

    return report
