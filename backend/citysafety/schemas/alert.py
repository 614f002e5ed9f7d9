from pydantic import BaseModel, Field
from uuid import UUID
from datetime import datetime
from typing import Literal


class AlertCreate(BaseModel):
    region_id: str = Field(..., min_length=1)
    severity: Literal["critical", "warning", "info"]
    message: str = Field(..., min_length=1, max_length=500)


class AlertRead(AlertCreate):
    id: UUID
    timestamp: datetime

    class Config:
        from_attributes = True
