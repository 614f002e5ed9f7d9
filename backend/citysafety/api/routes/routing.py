import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from citysafety.core.errors import CitySafetyError, InternalError, NotFoundError
from citysafety.schemas.routing import RoutePlanBody, RouteRead
from citysafety.services.routing.route_planner import RoutePlanner, RoutePlanRequest
from citysafety.services.store.memory_store import (
    RegionStore,
    RouteStore,
    get_region_store,
    get_route_store,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/routing", tags=["Routing"])


def get_route_planner(
    region_store: RegionStore = Depends(get_region_store),
    route_store: RouteStore = Depends(get_route_store),
) -> RoutePlanner:
    return RoutePlanner(region_store, route_store)


@router.post("/plan", response_model=RouteRead)
def plan_route(body: RoutePlanBody, planner: RoutePlanner = Depends(get_route_planner)):
    """Plan a safety-annotated route between two place names"""
    try:
        route = planner.plan_route(
            RoutePlanRequest(source=body.source or "", destination=body.destination or "")
        )
        return RouteRead.from_route(route)
    except CitySafetyError as e:
        logger.warning(f"Route planning rejected: {e.message}")
        raise
    except Exception as e:
        logger.error(f"Route calculation failed: {str(e)}", exc_info=True)
        raise InternalError("Failed to calculate route")


@router.get("/routes", response_model=List[RouteRead])
def list_routes(route_store: RouteStore = Depends(get_route_store)):
    """List planned routes, newest first"""
    return [RouteRead.from_route(r) for r in route_store.list()]


@router.get("/routes/{route_id}", response_model=RouteRead)
def get_route(route_id: UUID, route_store: RouteStore = Depends(get_route_store)):
    route = route_store.get(route_id)
    if route is None:
        raise NotFoundError(f"Route with id {route_id} not found")
    return RouteRead.from_route(route)
