# vrpt/tests/conftest.py
import copy
import json
from pathlib import Path
import pytest

from vrpt.models import Fleet, Node, NodeType, ProblemInstance

DATA_DIR = Path(__file__).resolve().parent / "data"


def _merge(base, override):
    out = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


@pytest.fixture(scope="session")
def instances():
    """Load instances.json (base instances + evaluation scenarios)."""
    path = DATA_DIR / "instances.json"
    if not path.exists():
        raise FileNotFoundError(f"{path} not found.")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def default_config(instances):
    return instances.get("defaults", {}).get("config", {})


@pytest.fixture
def build_instance(instances):
    """Build a ProblemInstance from a named base instance plus an optional override dict."""
    def _build(base: str, override=None) -> ProblemInstance:
        data = _merge(instances["base_instances"][base], override)
        return ProblemInstance.model_validate(data)
    return _build


@pytest.fixture
def three_node():
    # D=0, Z1=1 (demand 5), Z2=2 (demand 7); D-Z1=3, Z1-Z2=2, Z2-D=4
    nodes = [
        Node(id=0, type=NodeType.DEPOT),
        Node(id=1, type=NodeType.COLLECTION_ZONE, demand=5.0),
        Node(id=2, type=NodeType.COLLECTION_ZONE, demand=7.0),
    ]
    return ProblemInstance(
        nodes=nodes,
        distances={(0, 1): 3.0, (1, 2): 2.0, (2, 0): 4.0},
        collection_fleet=Fleet(capacity=12.0),
        transport_fleet=Fleet(capacity=100.0),
    )


@pytest.fixture
def line_instance():
    # depot 0 at x=0, zones 1..3 on a line, SWTS 10 at x=10, landfill 20 at x=20
    nodes = [
        Node(id=0, type=NodeType.DEPOT, x=0.0, y=0.0),
        Node(id=1, type=NodeType.COLLECTION_ZONE, demand=2.0, service_time=1.0, x=2.0, y=0.0),
        Node(id=2, type=NodeType.COLLECTION_ZONE, demand=3.0, service_time=1.0, x=4.0, y=0.0),
        Node(id=3, type=NodeType.COLLECTION_ZONE, demand=5.0, service_time=1.0, x=6.0, y=0.0),
        Node(id=10, type=NodeType.TRANSFER_STATION, x=10.0, y=0.0),
        Node(id=20, type=NodeType.LANDFILL, x=20.0, y=0.0),
    ]
    return ProblemInstance(
        nodes=nodes,
        collection_fleet=Fleet(capacity=10.0, max_duration=30.0, size=2),
        transport_fleet=Fleet(capacity=10.0, max_duration=20.0, size=1),
        speed=2.0,
        epsilon=0.5,
    )
