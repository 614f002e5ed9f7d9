from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Tuple
import uuid

Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class Route:
    source: str
    destination: str
    source_latitude: float
    source_longitude: float
    dest_latitude: float
    dest_longitude: float
    average_safety_score: int
    distance: float  # kilometers
    estimated_time: int  # minutes
    waypoints: Tuple[Coordinate, ...]
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
