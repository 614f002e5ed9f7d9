from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
import uuid


@dataclass(frozen=True)
class SafetySignals:
    """Raw signal tuple feeding the scoring function."""

    lighting: int  # 0-100
    crowd_density: int  # 0-100
    incidents_24h: int  # >= 0
    sentiment: float  # -1 to 1
    weather_risk: float  # 0 to 1
    police_nearby: bool
    night_factor: float  # 0 to 1


SIGNAL_FIELDS = tuple(f.name for f in fields(SafetySignals))


@dataclass(frozen=True)
class CatalogRegion:
    name: str
    lat: float
    lng: float
    base_score: int


@dataclass(frozen=True)
class Region:
    name: str
    latitude: float
    longitude: float
    safety_score: int  # 0-100
    lighting: int
    crowd_density: int
    incidents_24h: int
    sentiment: float
    weather_risk: float
    police_nearby: bool
    night_factor: float
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def signals(self) -> SafetySignals:
        return SafetySignals(**{name: getattr(self, name) for name in SIGNAL_FIELDS})
