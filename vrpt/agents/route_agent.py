""" RouteAgent.evaluate_route(...) simulates a single vehicle's route over the node ids of a ProblemInstance, computing:

Objectives: travel cost (sum of consecutive pairwise costs) and duration (travel time plus zone service times).
Load: collection vehicles pick up zone demand and unload at every transfer station they visit; transport vehicles take on
their declared pickups at transfer stations and unload at the landfill/depot.
Violations: capacity overage, endpoint typing, node-type sequencing, unmatched pickups, loaded return to depot and
duration overage.
Accounting: zone visit counts (all routes for solution-wide coverage, collection routes for the served totals) and
per-station deliveries/pickups (for the transfer-station balance between the two echelons).

The route must already be canonical (every id known to the instance); FeasibilityAgent takes care of that. """

from collections import Counter, defaultdict, deque     # Visit counts, per-station totals, per-station pickup queues
from typing import Any, Deque, Dict, List                # Type hints for mappings and sequences
from ..models import NodeType, ProblemInstance, Route, ValidationConfig, VehicleClass, Violation, ViolationKind

COLLECTION_ENDPOINTS = frozenset({NodeType.DEPOT, NodeType.TRANSFER_STATION})
TRANSPORT_STARTS = frozenset({NodeType.TRANSFER_STATION, NodeType.LANDFILL, NodeType.DEPOT})
TRANSPORT_ENDS = frozenset({NodeType.LANDFILL, NodeType.DEPOT})


def route_cost(problem: ProblemInstance, nodes) -> float:
    if len(nodes) <= 1:                                 # empty and single-node routes cost nothing
        return 0.0
    return sum(problem.cost(nodes[i], nodes[i + 1]) for i in range(len(nodes) - 1))


class RouteAgent:                                       # Agent responsible for evaluating a single route
    def __init__(self, problem: ProblemInstance, vehicle_class: VehicleClass, config: ValidationConfig):
        self.problem = problem
        self.vehicle_class = vehicle_class
        self.fleet = problem.fleet(vehicle_class)       # capacity / max_duration of this vehicle class
        self.cfg = config

    def evaluate_route(
        self,
        route: Route,
        index: int,                                     # position of the route in the solution (for reporting)
        global_counts: Counter,                         # zone id -> visits by any route, shared across all routes
        collected: Counter,                             # zone id -> visits by collection routes only
        delivered: Dict[int, float],                    # station id -> load unloaded there by collection routes
        picked: Dict[int, float],                       # station id -> load taken on there by transport routes
    ) -> Dict[str, Any]:
        p = self.problem
        nodes = route.nodes
        violations: List[Violation] = []

        distance = route.cost if route.cost is not None else route_cost(p, nodes)
        duration = 0.0
        load = max_load = demand = 0.0
        zones = 0

        is_transport = self.vehicle_class == VehicleClass.TRANSPORT
        pending: Dict[int, Deque[float]] = defaultdict(deque)
        if nodes:                                       # an empty route carries nothing, declared pickups included
            for pk in route.pickups:                    # pickups are consumed in visit order per station
                pending[pk.station].append(pk.amount)

        last = len(nodes) - 1
        for i, nid in enumerate(nodes):
            node = p.node(nid)
            if i > 0:
                duration += p.travel_time(nodes[i - 1], nid)

            if node.type == NodeType.COLLECTION_ZONE:
                duration += node.service_time
                load += node.demand
                demand += node.demand
                zones += 1
                global_counts[nid] += 1
                if not is_transport:
                    collected[nid] += 1
                else:
                    violations.append(self._v(ViolationKind.SEQUENCE, index, nid, 1.0,
                                              f"transport route visits collection zone {nid}"))

            elif node.type == NodeType.TRANSFER_STATION:
                if is_transport:
                    if pending[nid]:
                        amount = pending[nid].popleft()
                        load += amount
                        picked[nid] = picked.get(nid, 0.0) + amount
                else:
                    if load > 0.0:                      # unload everything collected since the last unload
                        delivered[nid] = delivered.get(nid, 0.0) + load
                    load = 0.0

            elif node.type == NodeType.LANDFILL:
                if not is_transport:
                    violations.append(self._v(ViolationKind.SEQUENCE, index, nid, 1.0,
                                              f"collection route visits landfill {nid}"))
                elif 0 < i < last:
                    load = 0.0

            elif node.type == NodeType.DEPOT:
                if is_transport and 0 < i < last:
                    load = 0.0

            max_load = max(max_load, load)

        if nodes and self.cfg.check_endpoints:
            violations.extend(self._endpoint_violations(route, index))

        for station, queue in pending.items():          # declared pickups the route never reached
            for amount in queue:
                violations.append(self._v(ViolationKind.SEQUENCE, index, station, 1.0,
                                          f"pickup of {amount:g} at node {station} without a matching "
                                          f"transfer-station visit"))

        if self.cfg.check_capacity and max_load > self.fleet.capacity + self.cfg.capacity_tolerance:
            over = max_load - self.fleet.capacity
            violations.append(self._v(ViolationKind.CAPACITY, index, None, over,
                                      f"load {max_load:g} exceeds {self.vehicle_class.value} capacity "
                                      f"{self.fleet.capacity:g}"))

        if (self.cfg.require_unload_before_return and not is_transport and nodes
                and p.node_type(nodes[-1]) == NodeType.DEPOT and load > 0.0):
            violations.append(self._v(ViolationKind.UNLOAD, index, nodes[-1], load,
                                      f"returns to depot carrying {load:g}"))

        limit = self.fleet.max_duration
        if self.cfg.check_duration and limit is not None and nodes:
            if is_transport:
                limit += p.epsilon
            if duration > limit + self.cfg.duration_tolerance:
                violations.append(self._v(ViolationKind.DURATION, index, None, duration - limit,
                                          f"duration {duration:g} exceeds limit {limit:g}"))

        if not self.cfg.check_endpoints:
            violations = [v for v in violations if v.kind != ViolationKind.SEQUENCE]

        return {
            "distance": distance,
            "duration": duration,
            "max_load": max_load,
            "end_load": load,
            "demand_served": demand,
            "zones": zones,
            "used": 1 if nodes else 0,
            "violations": violations,
        }

    def _endpoint_violations(self, route: Route, index: int) -> List[Violation]:
        out: List[Violation] = []
        first_t = self.problem.node_type(route.first)
        last_t = self.problem.node_type(route.last)
        if self.vehicle_class == VehicleClass.COLLECTION:
            starts, ends = COLLECTION_ENDPOINTS, COLLECTION_ENDPOINTS
        else:
            starts, ends = TRANSPORT_STARTS, TRANSPORT_ENDS
        if first_t not in starts:
            out.append(self._v(ViolationKind.ENDPOINTS, index, route.first, 1.0,
                               f"{self.vehicle_class.value} route cannot start at {first_t.value} {route.first}"))
        if last_t not in ends:
            out.append(self._v(ViolationKind.ENDPOINTS, index, route.last, 1.0,
                               f"{self.vehicle_class.value} route cannot end at {last_t.value} {route.last}"))
        return out

    @staticmethod
    def _v(kind: ViolationKind, index: int, node, amount: float, message: str) -> Violation:
        return Violation(kind=kind, route=index, node=node, amount=amount, message=message)
