from citysafety.services.store.memory_store import (  # noqa
    AlertLog,
    RegionStore,
    RouteStore,
    UserReportStore,
    get_alert_log,
    get_region_store,
    get_report_store,
    get_route_store,
)
