from datetime import datetime, timezone
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from citysafety.core.errors import NotFoundError
from citysafety.schemas.region import HeatmapResponse, RegionCreate, RegionRead, RegionUpdate
from citysafety.services.store.memory_store import RegionStore, get_region_store

router = APIRouter(tags=["Regions"])


@router.get("/heatmap", response_model=HeatmapResponse)
def get_heatmap(region_store: RegionStore = Depends(get_region_store)):
    """All regions with their live safety scores, for map rendering"""
    return HeatmapResponse(
        regions=[RegionRead.from_region(r) for r in region_store.list()],
        timestamp=datetime.now(timezone.utc),
    )


@router.get("/regions", response_model=List[RegionRead])
def list_regions(region_store: RegionStore = Depends(get_region_store)):
    """List all regions"""
    return [RegionRead.from_region(r) for r in region_store.list()]


@router.get("/regions/{region_id}", response_model=RegionRead)
def get_region(region_id: UUID, region_store: RegionStore = Depends(get_region_store)):
    """Get the current safety score and signals of a region"""
    region = region_store.get(region_id)
    if region is None:
        raise NotFoundError(f"Region with id {region_id} not found")
    return RegionRead.from_region(region)


@router.post("/regions", response_model=RegionRead, status_code=status.HTTP_201_CREATED)
def create_region(payload: RegionCreate, region_store: RegionStore = Depends(get_region_store)):
    """Create a new region"""
    region = region_store.create(**payload.model_dump())
    return RegionRead.from_region(region)


@router.patch("/regions/{region_id}", response_model=RegionRead)
def update_region(
    region_id: UUID,
    payload: RegionUpdate,
    region_store: RegionStore = Depends(get_region_store),
):
    """Update a region; only the given fields change"""
    region = region_store.update(region_id, **payload.model_dump(exclude_unset=True, exclude_none=True))
    if region is None:
        raise NotFoundError(f"Region with id {region_id} not found")
    return RegionRead.from_region(region)
