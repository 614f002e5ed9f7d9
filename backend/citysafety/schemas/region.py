from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime
from typing import List, Optional

from citysafety.models import Region
from citysafety.services.scoring import risk_level


class RegionBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    safety_score: int = Field(..., ge=0, le=100)
    lighting: int = Field(..., ge=0, le=100)
    crowd_density: int = Field(..., ge=0, le=100)
    incidents_24h: int = Field(default=0, ge=0)
    sentiment: float = Field(default=0.0, ge=-1.0, le=1.0)
    weather_risk: float = Field(default=0.0, ge=0.0, le=1.0)
    police_nearby: bool = False
    night_factor: float = Field(default=0.0, ge=0.0, le=1.0)


class RegionCreate(RegionBase):
    pass


class RegionRead(RegionBase):
    id: UUID
    last_updated: datetime
    risk_level: str

    class Config:
        from_attributes = True

    @classmethod
    def from_region(cls, region: Region) -> "RegionRead":
        return cls(
            id=region.id,
            name=region.name,
            latitude=region.latitude,
            longitude=region.longitude,
            safety_score=region.safety_score,
            lighting=region.lighting,
            crowd_density=region.crowd_density,
            incidents_24h=region.incidents_24h,
            sentiment=region.sentiment,
            weather_risk=region.weather_risk,
            police_nearby=region.police_nearby,
            night_factor=region.night_factor,
            last_updated=region.last_updated,
            risk_level=risk_level(region.safety_score),
        )


class RegionUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    safety_score: Optional[int] = Field(None, ge=0, le=100)
    lighting: Optional[int] = Field(None, ge=0, le=100)
    crowd_density: Optional[int] = Field(None, ge=0, le=100)
    incidents_24h: Optional[int] = Field(None, ge=0)
    sentiment: Optional[float] = Field(None, ge=-1.0, le=1.0)
    weather_risk: Optional[float] = Field(None, ge=0.0, le=1.0)
    police_nearby: Optional[bool] = None
    night_factor: Optional[float] = Field(None, ge=0.0, le=1.0)


class HeatmapResponse(BaseModel):
    regions: List[RegionRead]
    timestamp: datetime
