from .node import Node, NodeType
from .fleet import Fleet, VehicleClass
from .instance import ProblemInstance
from .config import ValidationConfig
from .route import Pickup, Route
from .violation import Violation, ViolationKind
from .statistics import RouteStatistics, SolutionStatistics
