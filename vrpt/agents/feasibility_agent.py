""" FeasibilityAgent takes a ProblemInstance and turns it into a validation/costing context: it canonicalizes external
routes (known vehicle class, every node id present in the instance), prices them with the instance's travel costs, and
evaluates a whole route set. Its core method evaluate(...) delegates per-route simulation to RouteAgent, then adds the
solution-wide rules (zone coverage, fleet sizes, transfer-station balance between collection and transport routes) and
aggregates objectives (distance, duration, routes per vehicle class) and violation magnitudes into one pack.

Structural problems (unknown node or vehicle class) raise StructuralError subclasses; everything else is reported as a
Violation inside the pack. """

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..errors import UnknownNodeError
from ..models import ProblemInstance, Route, ValidationConfig, VehicleClass, Violation, ViolationKind
from .route_agent import RouteAgent, route_cost

logger = logging.getLogger(__name__)

RouteLike = Union[Route, Mapping[str, Any], Sequence[int]]


class FeasibilityAgent:
    def __init__(self, problem: ProblemInstance, config: Optional[ValidationConfig] = None):
        self.problem: ProblemInstance = problem         # borrowed, never copied or mutated
        self.cfg: ValidationConfig = config or ValidationConfig()
        self._agents: Dict[VehicleClass, RouteAgent] = {
            vc: RouteAgent(problem, vc, self.cfg) for vc in VehicleClass
        }

    def canonicalize(self, route: RouteLike, vehicle_class: Any = None) -> Route:
        if isinstance(route, Mapping):
            route = Route.model_validate(route)
        if isinstance(route, Route):
            if vehicle_class is not None:
                route = route.model_copy(update={"vehicle_class": VehicleClass.parse(vehicle_class)})
        else:
            data: Dict[str, Any] = {"nodes": tuple(route)}
            if vehicle_class is not None:
                data["vehicle_class"] = vehicle_class
            route = Route(**data)

        for pos, nid in enumerate(route.nodes):
            if not self.problem.has_node(nid):
                raise UnknownNodeError(nid, f"route position {pos}")
        for pk in route.pickups:
            if not self.problem.has_node(pk.station):
                raise UnknownNodeError(pk.station, "pickup station")
        return route

    def route_cost(self, route: RouteLike) -> float:
        nodes = route.nodes if isinstance(route, Route) else tuple(route)
        return route_cost(self.problem, nodes)

    def price(self, route: Route) -> Route:
        return route.priced(self.route_cost(route))

    def evaluate(self, routes: Sequence[Route]) -> Dict[str, Any]:
        cfg = self.cfg
        counts: Counter[int] = Counter()
        collected: Counter[int] = Counter()
        delivered: Dict[int, float] = {}
        picked: Dict[int, float] = {}
        violations: List[Violation] = []
        per_route: List[Dict[str, Any]] = []
        used = {vc: 0 for vc in VehicleClass}
        distance = duration = 0.0

        for idx, route in enumerate(routes):
            res = self._agents[route.vehicle_class].evaluate_route(route, idx, counts, collected, delivered, picked)
            distance += res["distance"]
            duration += res["duration"]
            used[route.vehicle_class] += res["used"]
            violations.extend(res.pop("violations"))
            per_route.append({"index": idx, "vehicle_class": route.vehicle_class.value,
                              "nodes": len(route.nodes), **res})

        if cfg.check_coverage:
            violations.extend(self._coverage(counts))
        if cfg.check_fleet_size:
            violations.extend(self._fleet_size(used))
        if cfg.check_transfer_balance and used[VehicleClass.TRANSPORT] > 0:
            violations.extend(self._balance(delivered, picked))

        penalties = {f"P_{kind.value}": 0.0 for kind in ViolationKind}
        for v in violations:
            penalties[f"P_{v.kind.value}"] += v.amount

        served = [z for z in self.problem.zone_ids if collected.get(z, 0) > 0]
        objectives = {
            "distance": distance,
            "duration": duration,
            "collection_routes": float(used[VehicleClass.COLLECTION]),
            "transport_routes": float(used[VehicleClass.TRANSPORT]),
        }
        totals = {
            "distance": distance,
            "duration": duration,
            "demand_served": sum(self.problem.demand(z) for z in served),
            "zones_served": len(served),
            "zones_total": self.problem.zone_count,
            "delivered": dict(delivered),
            "picked_up": dict(picked),
        }
        feasible = not violations
        logger.debug("evaluated %d routes: distance=%.4f feasible=%s violations=%d",
                     len(routes), distance, feasible, len(violations))
        return {
            "objectives": objectives,
            "penalties": penalties,
            "perRoute": per_route,
            "totals": totals,
            "violations": violations,
            "feasible": feasible,
        }

    def _coverage(self, counts: Counter) -> List[Violation]:
        out: List[Violation] = []
        for z in self.problem.zone_ids:
            cnt = counts.get(z, 0)
            if cnt == 0:
                out.append(Violation(kind=ViolationKind.COVERAGE, node=z, amount=1.0,
                                     message=f"zone {z} is not served"))
            elif cnt > 1:
                out.append(Violation(kind=ViolationKind.COVERAGE, node=z, amount=float(cnt - 1),
                                     message=f"zone {z} is served {cnt} times"))
        return out

    def _fleet_size(self, used: Dict[VehicleClass, int]) -> List[Violation]:
        out: List[Violation] = []
        for vc, n in used.items():
            size = self.problem.fleet(vc).size
            if size is not None and n > size:
                out.append(Violation(kind=ViolationKind.FLEET_SIZE, amount=float(n - size),
                                     message=f"{n} {vc.value} routes but only {size} vehicles"))
        return out

    def _balance(self, delivered: Dict[int, float], picked: Dict[int, float]) -> List[Violation]:
        out: List[Violation] = []
        for station in sorted(set(delivered) | set(picked)):
            d = delivered.get(station, 0.0)
            q = picked.get(station, 0.0)
            if abs(d - q) > self.cfg.balance_tolerance:
                out.append(Violation(kind=ViolationKind.BALANCE, node=station, amount=abs(d - q),
                                     message=f"station {station}: delivered {d:g}, picked up {q:g}"))
        return out
