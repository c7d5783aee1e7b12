# vrpt/models/route.py
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .fleet import VehicleClass


class Pickup(BaseModel):
    model_config = ConfigDict(frozen=True)

    station: int                        # transfer station the transport vehicle loads at
    amount: float = Field(..., ge=0.0)  # waste taken on at that visit


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    # visit order [first, ..., last]; ids refer to ProblemInstance nodes
    nodes: Tuple[int, ...] = ()
    vehicle_class: VehicleClass = VehicleClass.COLLECTION
    pickups: Tuple[Pickup, ...] = ()
    # travel cost, filled in by Solution.add_route; immutable nodes keep it current
    cost: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def _from_sequence(cls, data):
        # Route.model_validate([0, 1, 2, 0]) shorthand
        if isinstance(data, (list, tuple)):
            return {"nodes": data}
        return data

    @field_validator("vehicle_class", mode="before")
    @classmethod
    def _check_class(cls, v):
        # unknown classes raise UnknownVehicleClassError (a StructuralError), not a ValidationError
        return VehicleClass.parse(v)

    @field_validator("cost")
    @classmethod
    def _check_cost(cls, v):
        if v is not None and v < 0.0:
            raise ValueError(f"Route cost cannot be negative (got {v})")
        return v

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def first(self) -> Optional[int]:
        return self.nodes[0] if self.nodes else None

    @property
    def last(self) -> Optional[int]:
        return self.nodes[-1] if self.nodes else None

    def priced(self, cost: float) -> "Route":
        return self.model_copy(update={"cost": cost})
