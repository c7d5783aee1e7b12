from .errors import MissingDistanceError, StructuralError, UnknownNodeError, UnknownVehicleClassError
from .models import (Fleet, Node, NodeType, Pickup, ProblemInstance, Route, ValidationConfig, VehicleClass,
                     Violation, ViolationKind)
from .solution import Solution
