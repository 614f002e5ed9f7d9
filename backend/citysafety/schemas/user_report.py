from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime
from typing import Optional


class UserReportCreate(BaseModel):
    # Required fields are checked by the service so that blanks map to a 400
    location: Optional[str] = Field(None, max_length=200)
    category: Optional[str] = None
    description: Optional[str] = Field(None, max_length=2000)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class UserReportRead(BaseModel):
    id: UUID
    location: str
    latitude: float
    longitude: float
    category: str
    description: str
    timestamp: datetime

    class Config:
        from_attributes = True
