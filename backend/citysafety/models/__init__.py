from citysafety.models.region import Region, SafetySignals, CatalogRegion  # noqa
from citysafety.models.alert import Alert, Severity, USER_REPORT_REGION_ID  # noqa
from citysafety.models.user_report import UserReport, ReportCategory  # noqa
from citysafety.models.route import Route  # noqa

__all__ = [
    "Region",
    "SafetySignals",
    "CatalogRegion",
    "Alert",
    "Severity",
    "USER_REPORT_REGION_ID",
    "UserReport",
    "ReportCategory",
    "Route",
]
