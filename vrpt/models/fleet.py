# Vehicle classes and the per-class fleet description (capacity, duration limit, size).

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field

from ..errors import UnknownVehicleClassError


class VehicleClass(str, Enum):
    COLLECTION = "collection"                         # CV: visits zones, unloads at transfer stations
    TRANSPORT = "transport"                           # TV: moves aggregated load from transfer stations to the landfill

    @classmethod
    def parse(cls, value: Any) -> "VehicleClass":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownVehicleClassError(value) from None


class Fleet(BaseModel):
    capacity: float = Field(..., ge=0.0)              # Maximum load per vehicle (Q1 / Q2)
    max_duration: Optional[float] = Field(None, ge=0.0)   # Maximum route duration (L1 / L2), None = unlimited
    size: Optional[int] = Field(None, ge=0)           # Number of vehicles available, None = unlimited
