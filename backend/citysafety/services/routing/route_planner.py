"""
Safety-annotated straight-line routes between two place names.

The path is a linear interpolation between the resolved endpoints (no road
network). Each waypoint is scored by the mean safety of its nearest regions
and the route score is the mean over waypoints.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging
import random

import numpy as np

from citysafety.core.config import get_settings
from citysafety.core.errors import InvalidInputError
from citysafety.models import Region, Route
from citysafety.services.store.memory_store import RegionStore, RouteStore
from citysafety.services.utils import haversine_km, interpolate_path, round_half_up

logger = logging.getLogger(__name__)

Coordinate = Tuple[float, float]


@dataclass
class RoutePlanRequest:
    source: str
    destination: str


def find_region_by_label(regions: Sequence[Region], label: str) -> Optional[Region]:
    """
    First region whose name contains the label or is contained in it
    (case-insensitive). Among several matches the store's iteration order
    decides.
    """
    needle = label.lower()
    for region in regions:
        name = region.name.lower()
        if needle in name or name in needle:
            return region
    return None


def waypoint_safety_scores(
    regions: Sequence[Region],
    waypoints: Sequence[Coordinate],
    nearby: int = 3,
) -> List[float]:
    """
    Mean safety score of the ``nearby`` closest regions for each waypoint.

    Distance is Euclidean in raw degrees. Returns an empty list when there
    are no regions.
    """
    if not regions:
        return []

    coords = np.array([[r.latitude, r.longitude] for r in regions], dtype=float)
    scores = np.array([r.safety_score for r in regions], dtype=float)

    result = []
    for lat, lng in waypoints:
        distances = np.sqrt(((coords - np.array([lat, lng])) ** 2).sum(axis=1))
        nearest = np.argsort(distances, kind="stable")[:nearby]
        result.append(float(scores[nearest].mean()))
    return result


class RoutePlanner:
    """Plans routes against a snapshot of the region store."""

    def __init__(
        self,
        region_store: RegionStore,
        route_store: RouteStore,
        rng: Optional[random.Random] = None,
    ):
        self.region_store = region_store
        self.route_store = route_store
        self.rng = rng or random.Random()
        self.settings = get_settings()

    def resolve(self, regions: Sequence[Region], label: str) -> Coordinate:
        """Coordinate for a place name; jittered city centre when nothing matches."""
        region = find_region_by_label(regions, label)
        if region is not None:
            return (region.latitude, region.longitude)

        jitter = self.settings.fallback_jitter_degrees
        coords = (
            self.settings.city_center_lat + self.rng.uniform(-jitter, jitter),
            self.settings.city_center_lng + self.rng.uniform(-jitter, jitter),
        )
        logger.warning(f"No region matches '{label}', using approximate location {coords}")
        return coords

    def plan_route(self, request: RoutePlanRequest) -> Route:
        """
        Main route planning function.

        Raises:
            InvalidInputError: source or destination is empty
        """
        source = (request.source or "").strip()
        destination = (request.destination or "").strip()
        if not source or not destination:
            raise InvalidInputError("Source and destination are required")

        regions = self.region_store.list()

        source_coords = self.resolve(regions, source)
        dest_coords = self.resolve(regions, destination)

        waypoints = interpolate_path(
            source_coords, dest_coords, self.settings.route_interpolation_steps
        )

        waypoint_scores = waypoint_safety_scores(
            regions, waypoints, nearby=self.settings.route_nearby_regions
        )
        if waypoint_scores:
            average_safety_score = int(round_half_up(sum(waypoint_scores) / len(waypoint_scores)))
        else:
            average_safety_score = self.settings.route_default_score

        distance_km = haversine_km(
            source_coords[0], source_coords[1], dest_coords[0], dest_coords[1]
        )
        estimated_time = int(round_half_up(distance_km / self.settings.average_speed_kmh * 60))

        route = self.route_store.create(
            source=source,
            destination=destination,
            source_latitude=source_coords[0],
            source_longitude=source_coords[1],
            dest_latitude=dest_coords[0],
            dest_longitude=dest_coords[1],
            average_safety_score=average_safety_score,
            distance=round_half_up(distance_km, 2),
            estimated_time=estimated_time,
            waypoints=tuple(waypoints),
        )

        logger.info(
            f"Route planned {source} -> {destination}: {route.distance}km, "
            f"{route.estimated_time}min, safety={route.average_safety_score}"
        )
        return route
