from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal
import uuid

ReportCategory = Literal["incident", "lighting", "crowd", "other"]


@dataclass(frozen=True)
class UserReport:
    location: str
    latitude: float
    longitude: float
    category: ReportCategory
    description: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
