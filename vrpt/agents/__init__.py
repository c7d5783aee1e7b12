# RouteAgent simulates one route (cost, load, duration) and reports its own
# violations; FeasibilityAgent canonicalizes and prices routes and evaluates a
# whole route set against one ProblemInstance.
from .route_agent import RouteAgent, route_cost
from .feasibility_agent import FeasibilityAgent
