""" The ProblemInstance model is the container for a full VRPT input.
It holds:

Nodes: depot, collection zones, transfer stations (SWTS) and the landfill.
Fleets: one for collection vehicles (CV) and one for transport vehicles (TV).
Travel costs: an optional explicit distance table, falling back to Euclidean distance between node coordinates.

The instance is frozen: every Solution built against it only borrows a reference and never mutates it, so a single
instance can back many candidate solutions at once (also across threads). """

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from ..errors import MissingDistanceError, UnknownNodeError
from .fleet import Fleet, VehicleClass
from .node import Node, NodeType


def _parse_key(key: Any) -> Tuple[int, int]:
    # accepts (a, b), [a, b] or the JSON string "[a, b]"
    if isinstance(key, str):
        try:
            key = json.loads(key)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid distance key: {key!r}") from e
    if isinstance(key, (list, tuple)) and len(key) == 2:
        return int(key[0]), int(key[1])
    raise ValueError(f"Distance key must be a pair of node ids, got {key!r}")


class ProblemInstance(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    nodes: List[Node] = Field(default_factory=list)
    collection_fleet: Fleet
    transport_fleet: Fleet
    distances: Optional[Dict[Tuple[int, int], float]] = None   # explicit travel cost (a, b) -> cost
    symmetric: bool = True                                     # (a, b) also answers (b, a)
    speed: Optional[float] = Field(None, gt=0.0)               # cost units per time unit; None = unit speed
    epsilon: float = Field(0.0, ge=0.0)                        # tolerance on transport route duration

    _index: Dict[int, Node] = PrivateAttr(default_factory=dict)
    _zone_ids: Tuple[int, ...] = PrivateAttr(default=())

    @field_validator("distances", mode="before")
    @classmethod
    def _coerce_distances(cls, v):
        if v is None:
            return v
        if not isinstance(v, dict):
            raise ValueError("distances must be a mapping {(a, b): cost}")
        out: Dict[Tuple[int, int], float] = {}
        for key, cost in v.items():
            pair = _parse_key(key)
            cost = float(cost)
            if cost < 0.0:
                raise ValueError(f"Negative travel cost for {pair}: {cost}")
            out[pair] = cost
        return out

    @model_validator(mode="after")
    def _check_ids(self):
        seen = set()
        for n in self.nodes:
            if n.id in seen:
                raise ValueError(f"Duplicate node id: {n.id}")
            seen.add(n.id)
        for a, b in (self.distances or {}):
            if a not in seen or b not in seen:
                raise ValueError(f"Distance entry ({a}, {b}) references an unknown node")
        return self

    def model_post_init(self, __context: Any) -> None:
        self._index = {n.id: n for n in self.nodes}
        self._zone_ids = tuple(n.id for n in self.nodes if n.type == NodeType.COLLECTION_ZONE)

    # ---------- node queries ----------
    def has_node(self, node_id: int) -> bool:
        return node_id in self._index

    def node(self, node_id: int) -> Node:
        try:
            return self._index[node_id]
        except (KeyError, TypeError):
            raise UnknownNodeError(node_id) from None

    def node_type(self, node_id: int) -> NodeType:
        return self.node(node_id).type

    def demand(self, node_id: int) -> float:
        return self.node(node_id).demand

    def nodes_of_type(self, node_type: NodeType) -> List[Node]:
        return [n for n in self.nodes if n.type == node_type]

    @property
    def zone_ids(self) -> Tuple[int, ...]:
        return self._zone_ids

    @property
    def zone_count(self) -> int:
        return len(self._zone_ids)

    # ---------- fleets ----------
    def fleet(self, vehicle_class: Any) -> Fleet:
        vc = VehicleClass.parse(vehicle_class)
        return self.collection_fleet if vc == VehicleClass.COLLECTION else self.transport_fleet

    def capacity(self, vehicle_class: Any) -> float:
        return self.fleet(vehicle_class).capacity

    # ---------- travel ----------
    def cost(self, a: int, b: int) -> float:
        na, nb = self.node(a), self.node(b)
        if a == b:
            return 0.0
        if self.distances:
            val = self.distances.get((a, b))
            if val is None and self.symmetric:
                val = self.distances.get((b, a))
            if val is not None:
                return val
        if na.has_coords and nb.has_coords:
            (xa, ya), (xb, yb) = na.coords, nb.coords
            return math.hypot(xa - xb, ya - yb)
        raise MissingDistanceError(a, b)

    def travel_time(self, a: int, b: int) -> float:
        d = self.cost(a, b)
        return d / self.speed if self.speed else d
