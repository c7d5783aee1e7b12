""" Reporting models for a Solution: per-route figures and the solution-wide summary returned by
Solution.statistics(). render() produces the multi-line text behind Solution.get_statistics(); it is meant for logs and
status panels, optimisers should use the evaluation pack instead. """

from typing import List
from pydantic import BaseModel, Field

from .fleet import VehicleClass
from .violation import Violation


class RouteStatistics(BaseModel):
    index: int
    vehicle_class: VehicleClass
    nodes: int                                      # number of visits in the sequence
    cost: float
    max_load: float
    duration: float
    zones: int                                      # collection-zone visits on this route


class SolutionStatistics(BaseModel):
    num_routes: int
    num_collection_routes: int
    num_transport_routes: int
    total_cost: float
    total_demand_served: float
    zones_served: int
    zones_total: int
    route_node_counts: List[int] = Field(default_factory=list)
    routes: List[RouteStatistics] = Field(default_factory=list)
    is_valid: bool
    violations: List[Violation] = Field(default_factory=list)

    def render(self) -> str:
        lines = [
            f"Routes: {self.num_routes} (collection: {self.num_collection_routes}, "
            f"transport: {self.num_transport_routes})",
            f"Total cost: {self.total_cost:.2f}",
            f"Total demand served: {self.total_demand_served:.2f}",
            f"Zones served: {self.zones_served}/{self.zones_total}",
            f"Valid: {'yes' if self.is_valid else 'no'}",
        ]
        for r in self.routes:
            lines.append(
                f"  Route {r.index} [{r.vehicle_class.value}]: {r.nodes} nodes, cost {r.cost:.2f}, "
                f"max load {r.max_load:.2f}, duration {r.duration:.2f}"
            )
        if self.violations:
            lines.append(f"Violations ({len(self.violations)}):")
            lines.extend(f"  {v}" for v in self.violations)
        return "\n".join(lines)
