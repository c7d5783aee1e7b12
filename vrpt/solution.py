""" Solution: a candidate set of routes bound to one ProblemInstance.

Cost is kept eagerly: every add_route prices the route (sum of consecutive pairwise costs) before storing it, and the
solution total is re-summed over the stored routes. Validity is computed lazily on the first query after a change and
cached until the next add_route. add_route performs structural checks only (known node ids and vehicle class) and raises
before touching the route list, so a failed add leaves the Solution as it was. Infeasibility is never an exception:
is_valid() returns False and violations()/get_statistics() say why.

Solutions are meant to be rebuilt rather than edited (see from_routes); there is no removal API. They are not
thread-safe, but the borrowed instance can be shared by any number of them. """

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .agents import FeasibilityAgent
from .agents.feasibility_agent import RouteLike
from .fitness import fitness_weighted, penalty_weights
from .models import (ProblemInstance, Route, RouteStatistics, SolutionStatistics, ValidationConfig, VehicleClass,
                     Violation)

logger = logging.getLogger(__name__)


class Solution:
    def __init__(self, problem: ProblemInstance, config: Optional[ValidationConfig] = None):
        self.problem = problem                          # borrowed; must outlive the solution
        self.config = config or ValidationConfig()
        self._agent = FeasibilityAgent(problem, self.config)
        self._routes: List[Route] = []
        self._total_cost = 0.0
        self._pack: Optional[Dict[str, Any]] = None     # None = not validated against the current routes

    @classmethod
    def from_routes(cls, problem: ProblemInstance, routes: Iterable[RouteLike],
                    config: Optional[ValidationConfig] = None) -> "Solution":
        sol = cls(problem, config)
        for r in routes:
            sol.add_route(r)
        return sol

    # ---------- building ----------
    def add_route(self, route: RouteLike, vehicle_class: Any = None) -> Route:
        canonical = self._agent.canonicalize(route, vehicle_class)
        priced = self._agent.price(canonical)
        self._routes.append(priced)
        self._total_cost = sum(r.cost for r in self._routes)
        self._pack = None
        logger.debug("added %s route #%d with %d nodes, cost %.4f",
                     priced.vehicle_class.value, len(self._routes) - 1, len(priced.nodes), priced.cost)
        return priced

    # ---------- queries ----------
    def get_cost(self) -> float:
        return self._total_cost

    @property
    def total_cost(self) -> float:
        return self._total_cost

    def get_route_count(self) -> int:
        return len(self._routes)

    def get_routes(self) -> Tuple[Route, ...]:
        return tuple(self._routes)

    @property
    def validity(self) -> Optional[bool]:
        """Cached feasibility, or None when no validation ran since the last change."""
        return None if self._pack is None else self._pack["feasible"]

    def is_valid(self) -> bool:
        return self._evaluation()["feasible"]

    def violations(self) -> List[Violation]:
        return list(self._evaluation()["violations"])

    def evaluate(self) -> Dict[str, Any]:
        return copy.deepcopy(self._evaluation())        # callers get a detached copy of the cached pack

    def penalized_cost(self, weights: Optional[Dict[str, float]] = None) -> float:
        pack = self._evaluation()
        wp = {**penalty_weights(self.config), **(weights or {})}
        return fitness_weighted(pack["objectives"], pack["penalties"], wZ=None, wP=wp)

    def statistics(self) -> SolutionStatistics:
        pack = self._evaluation()
        totals = pack["totals"]
        routes = [
            RouteStatistics(
                index=r["index"],
                vehicle_class=r["vehicle_class"],
                nodes=r["nodes"],
                cost=r["distance"],
                max_load=r["max_load"],
                duration=r["duration"],
                zones=r["zones"],
            )
            for r in pack["perRoute"]
        ]
        return SolutionStatistics(
            num_routes=len(self._routes),
            num_collection_routes=sum(1 for r in self._routes if r.vehicle_class == VehicleClass.COLLECTION),
            num_transport_routes=sum(1 for r in self._routes if r.vehicle_class == VehicleClass.TRANSPORT),
            total_cost=self._total_cost,
            total_demand_served=totals["demand_served"],
            zones_served=totals["zones_served"],
            zones_total=totals["zones_total"],
            route_node_counts=[len(r.nodes) for r in self._routes],
            routes=routes,
            is_valid=pack["feasible"],
            violations=pack["violations"],
        )

    def get_statistics(self) -> str:
        return self.statistics().render()

    def _evaluation(self) -> Dict[str, Any]:
        if self._pack is None:
            self._pack = self._agent.evaluate(self._routes)
        return self._pack

    def __repr__(self) -> str:
        return (f"Solution(routes={len(self._routes)}, cost={self._total_cost:.4f}, "
                f"valid={self.validity})")
