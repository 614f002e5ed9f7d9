from pydantic import BaseModel
from uuid import UUID
from datetime import datetime
from typing import List, Optional

from citysafety.models import Route


class RoutePlanBody(BaseModel):
    source: Optional[str] = None
    destination: Optional[str] = None


class RouteRead(BaseModel):
    id: UUID
    source: str
    destination: str
    source_latitude: float
    source_longitude: float
    dest_latitude: float
    dest_longitude: float
    average_safety_score: int
    distance: float  # kilometers
    estimated_time: int  # minutes
    waypoints: List[List[float]]  # [[lat, lng], ...]
    created_at: datetime

    @classmethod
    def from_route(cls, route: Route) -> "RouteRead":
        return cls(
            id=route.id,
            source=route.source,
            destination=route.destination,
            source_latitude=route.source_latitude,
            source_longitude=route.source_longitude,
            dest_latitude=route.dest_latitude,
            dest_longitude=route.dest_longitude,
            average_safety_score=route.average_safety_score,
            distance=route.distance,
            estimated_time=route.estimated_time,
            waypoints=[[lat, lng] for lat, lng in route.waypoints],
            created_at=route.created_at,
        )
