""" The Node model represents one location of a VRPT instance: the depot, a collection zone, a solid-waste transfer
station (SWTS) or the landfill.

It ensures:

Demand (waste amount) and service time are never negative.
Coordinates are optional (instances may give an explicit distance table instead), but when present they come either as
(x, y) or as location=[x, y]; .coords gives unified access.

In short: Node is the single record every route refers to by id. """

from enum import Enum                                   # String enum for node types
from typing import List, Optional, Tuple                # Type hints for coordinates
from pydantic import BaseModel, Field, model_validator  # Pydantic base class and validation decorators


class NodeType(str, Enum):                              # Kind of location a node id stands for
    DEPOT = "depot"
    COLLECTION_ZONE = "collection_zone"
    TRANSFER_STATION = "transfer_station"
    LANDFILL = "landfill"


class Node(BaseModel):
    id: int                                             # Unique node ID within an instance
    type: NodeType                                      # Depot / zone / transfer station / landfill
    demand: float = Field(0.0, ge=0.0)                  # Waste to collect (only counted for collection zones)
    service_time: float = Field(0.0, ge=0.0)            # Time spent serving a collection zone
    x: Optional[float] = None                           # X-coordinate (optional)
    y: Optional[float] = None                           # Y-coordinate (optional)
    location: Optional[List[float]] = None              # Alternative coordinate format: [x, y]
    name: Optional[str] = None

    @model_validator(mode="after")
    def _check_location(self):
        if self.location is not None and len(self.location) < 2:
            raise ValueError(f"Node {self.id}: location must be [x, y]")
        return self

    @property
    def is_zone(self) -> bool:
        return self.type == NodeType.COLLECTION_ZONE

    @property
    def has_coords(self) -> bool:
        return (self.location is not None and len(self.location) >= 2) or (self.x is not None and self.y is not None)

    @property
    def coords(self) -> Tuple[float, float]:            # Unified coordinate accessor
        if self.location and len(self.location) >= 2:   # Prefer location[] if provided
            return float(self.location[0]), float(self.location[1])
        if self.x is None or self.y is None:
            raise ValueError(f"Node {self.id} missing coordinates")
        return float(self.x), float(self.y)
