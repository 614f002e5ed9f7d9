from citysafety.services.alerts.alert_generator import (  # noqa
    ALERT_TEMPLATES,
    AlertGenerator,
    classify_severity,
    render_alert_message,
)
from citysafety.services.alerts.user_reports import submit_user_report  # noqa
