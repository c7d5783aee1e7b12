# vrpt/tests/test_structural_errors.py
import pytest

from vrpt import (MissingDistanceError, Node, NodeType, ProblemInstance, Solution, StructuralError,
                  UnknownNodeError, UnknownVehicleClassError)
from vrpt.agents import FeasibilityAgent


def test_unknown_node_raises_instead_of_infeasible(three_node):
    sol = Solution(three_node)
    with pytest.raises(UnknownNodeError) as exc:
        sol.add_route([0, 99, 0])
    assert exc.value.node_id == 99
    assert isinstance(exc.value, StructuralError)
    assert not isinstance(exc.value, ValueError)


def test_failed_add_leaves_solution_untouched(three_node):
    sol = Solution(three_node)
    sol.add_route([0, 1, 2, 0])
    assert sol.is_valid()
    with pytest.raises(UnknownNodeError):
        sol.add_route([0, 1, 99])
    assert sol.get_route_count() == 1
    assert sol.get_cost() == 9.0
    assert sol.validity is True                 # cache untouched as well


def test_unknown_vehicle_class(three_node):
    sol = Solution(three_node)
    with pytest.raises(UnknownVehicleClassError):
        sol.add_route([0, 1, 2, 0], vehicle_class="drone")
    with pytest.raises(UnknownVehicleClassError):
        sol.add_route({"nodes": [0, 1, 2, 0], "vehicle_class": "bike"})
    assert sol.get_route_count() == 0


def test_unknown_pickup_station(build_instance):
    sol = Solution(build_instance("two_echelon"))
    with pytest.raises(UnknownNodeError):
        sol.add_route({"nodes": [20, 10, 20], "vehicle_class": "transport",
                       "pickups": [{"station": 11, "amount": 3}]})


def test_missing_distance_is_structural(three_node):
    # nodes 1 and 2 have neither coordinates nor an explicit cost to node 3
    problem = ProblemInstance(
        nodes=list(three_node.nodes) + [Node(id=3, type=NodeType.TRANSFER_STATION)],
        distances=three_node.distances,
        collection_fleet=three_node.collection_fleet,
        transport_fleet=three_node.transport_fleet,
    )
    sol = Solution(problem)
    with pytest.raises(MissingDistanceError):
        sol.add_route([0, 1, 2, 3])
    assert sol.get_route_count() == 0


def test_canonicalize_reports_position(three_node):
    agent = FeasibilityAgent(three_node)
    with pytest.raises(UnknownNodeError, match="route position 2"):
        agent.canonicalize([0, 1, 42, 0])
