# Validation switches, tolerances and penalty weights for solution checking.

from pydantic import BaseModel, Field   # Import Pydantic BaseModel for validation and schema support


class ValidationConfig(BaseModel):
    # Which rule families the feasibility pass applies
    check_capacity: bool = True
    check_coverage: bool = True
    check_endpoints: bool = True                    # endpoint typing + node-type sequencing
    check_duration: bool = True                     # only when the fleet declares max_duration
    check_fleet_size: bool = True                   # only when the fleet declares size
    check_transfer_balance: bool = True             # only when transport routes are present
    require_unload_before_return: bool = False      # collection routes must not end at the depot loaded

    capacity_tolerance: float = Field(1e-9, ge=0.0)
    duration_tolerance: float = Field(1e-9, ge=0.0)
    balance_tolerance: float = Field(1e-6, ge=0.0)

    # Weights used by penalized_cost()
    beta_capacity: float = 1.0          # per unit of load above capacity
    beta_duration: float = 1.0          # per time unit above the route duration limit
    beta_endpoints: float = 1.0         # per endpoint / sequencing violation
    beta_fleet_size: float = 1.0        # per route above the fleet size
    beta_balance: float = 1.0           # per unit of unbalanced transfer-station load
    beta_coverage: float = 1000.0       # strong penalty for unserved or duplicate-served zones
