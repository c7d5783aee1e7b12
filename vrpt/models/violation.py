# A single broken feasibility rule. Violations are values returned by the
# feasibility pass, never raised.

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict


class ViolationKind(str, Enum):
    CAPACITY = "capacity"           # load above the vehicle class capacity
    COVERAGE = "coverage"           # zone unserved or served more than once
    ENDPOINTS = "endpoints"         # first/last node of a type the vehicle class may not start/end at
    SEQUENCE = "sequence"           # interior node type not allowed, or unmatched pickup
    UNLOAD = "unload"               # collection route returns to the depot still loaded
    DURATION = "duration"           # route longer than the fleet's max_duration
    FLEET_SIZE = "fleet_size"       # more routes than vehicles of that class
    BALANCE = "balance"             # transfer station delivered != picked up


class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    route: Optional[int] = None     # index into Solution.get_routes(), None for aggregate rules
    node: Optional[int] = None
    amount: float = 1.0             # magnitude (excess load, excess time, missing visits, ...)
    message: str = ""

    def __str__(self) -> str:
        where = f"route {self.route}" if self.route is not None else "solution"
        return f"[{self.kind.value}] {where}: {self.message}"
