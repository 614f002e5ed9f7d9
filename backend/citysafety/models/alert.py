from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal
import uuid

Severity = Literal["critical", "warning", "info"]

# Region id used for alerts raised from user reports
USER_REPORT_REGION_ID = "user-report"


@dataclass(frozen=True)
class Alert:
    region_id: str
    severity: Severity
    message: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
