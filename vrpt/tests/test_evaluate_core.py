# vrpt/tests/test_evaluate_core.py
import pytest

from vrpt import Solution, ValidationConfig

SCEN_KEYS = [
    "single_route_fits",
    "single_route_over_capacity",
    "zone_unserved",
    "zone_served_twice",
    "route_starts_at_zone",
    "collection_only",
    "complete_two_echelon",
    "transfer_station_unbalanced",
    "transport_over_capacity",
    "transport_ends_at_station",
    "collection_overloaded_between_unloads",
]


@pytest.mark.parametrize("key", SCEN_KEYS)
def test_scenarios_evaluate(instances, build_instance, default_config, key):
    scen = instances["scenarios"][key]
    problem = build_instance(scen["base"], scen.get("override"))
    sol = Solution.from_routes(problem, scen["routes"], ValidationConfig(**default_config))

    exp = scen["expectations"]
    assert sol.get_route_count() == len(scen["routes"])
    assert abs(sol.get_cost() - exp["cost"]) < 1e-6, f"{key}: cost expected≈{exp['cost']}, got {sol.get_cost()}"
    assert sol.is_valid() is exp["valid"], f"{key}: {sol.get_statistics()}"

    kinds = sorted({v.kind.value for v in sol.violations()})
    assert kinds == sorted(exp["violations"]), f"{key}: violations {kinds}"


def test_cost_is_independent_of_feasibility(build_instance):
    ok = Solution.from_routes(build_instance("three_node"), [[0, 1, 2, 0]])
    tight = Solution.from_routes(build_instance("three_node", {"collection_fleet": {"capacity": 10}}),
                                 [[0, 1, 2, 0]])
    assert ok.is_valid() and not tight.is_valid()
    assert ok.get_cost() == tight.get_cost() == 9.0


def test_evaluation_pack_shape(build_instance):
    sol = Solution.from_routes(build_instance("two_echelon"), [
        [0, 1, 10, 2, 3, 10, 0],
        {"nodes": [20, 10, 20], "vehicle_class": "transport", "pickups": [{"station": 10, "amount": 14}]},
    ])
    pack = sol.evaluate()
    assert pack["feasible"] is True
    assert pack["objectives"]["collection_routes"] == 1.0
    assert pack["objectives"]["transport_routes"] == 1.0
    assert pack["totals"]["delivered"] == {10: 14.0}
    assert pack["totals"]["picked_up"] == {10: 14.0}
    assert all(v == 0.0 for v in pack["penalties"].values())

    cv, tv = pack["perRoute"]
    assert cv["max_load"] == 10.0       # 4 unloaded at the first SWTS visit, then 6 + 4
    assert cv["end_load"] == 0.0
    assert tv["max_load"] == 14.0
