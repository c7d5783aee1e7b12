# Structural errors raised by the core. Feasibility problems are never raised;
# they are reported as Violation values (see agents/route_agent.py).
#
# StructuralError derives from Exception (not ValueError) so that it passes
# through pydantic validators unchanged instead of being wrapped in a
# ValidationError.

from typing import Any, Optional


class StructuralError(Exception):
    """A route or query is malformed with respect to the bound instance."""


class UnknownNodeError(StructuralError):
    def __init__(self, node_id: Any, where: Optional[str] = None):
        self.node_id = node_id
        msg = f"Unknown node id: {node_id}"
        if where:
            msg += f" ({where})"
        super().__init__(msg)


class UnknownVehicleClassError(StructuralError):
    def __init__(self, vehicle_class: Any):
        self.vehicle_class = vehicle_class
        super().__init__(f"Unknown vehicle class: {vehicle_class!r}")


class MissingDistanceError(StructuralError):
    def __init__(self, a: int, b: int):
        self.pair = (a, b)
        super().__init__(f"No travel cost defined between nodes {a} and {b}")
