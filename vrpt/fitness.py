from typing import Any, Dict, Optional, Tuple, Union

from .models import ValidationConfig

DEFAULT_WZ = {"distance": 1.0, "duration": 0.0, "collection_routes": 0.0, "transport_routes": 0.0}


def penalty_weights(cfg: Optional[ValidationConfig] = None) -> Dict[str, float]:
    cfg = cfg or ValidationConfig()
    return {
        "P_capacity": cfg.beta_capacity,
        "P_coverage": cfg.beta_coverage,
        "P_endpoints": cfg.beta_endpoints,
        "P_sequence": cfg.beta_endpoints,
        "P_unload": cfg.beta_endpoints,
        "P_duration": cfg.beta_duration,
        "P_fleet_size": cfg.beta_fleet_size,
        "P_balance": cfg.beta_balance,
    }


def fitness_weighted(objectives: Dict[str, float], penalties: Dict[str, float],
                     wZ: Optional[Dict[str, float]] = None, wP: Optional[Dict[str, float]] = None) -> float:
    wz = {**DEFAULT_WZ, **(wZ or {})}
    wp = {**penalty_weights(), **(wP or {})}
    val = 0.0
    for k, v in objectives.items(): val += wz.get(k, 0.0) * v
    for k, v in penalties.items():  val += wp.get(k, 0.0) * v
    return val


def lexicographic_key(objectives: Dict[str, float], penalties: Dict[str, float]) -> Tuple[float, ...]:
    # feasibility first, then the fleet (collection vehicles before transport vehicles), then distance
    return (
        sum(penalties.values()),
        objectives.get("collection_routes", 0.0),
        objectives.get("transport_routes", 0.0),
        objectives.get("distance", 0.0),
    )


def fleet_objective(objectives: Dict[str, float]) -> float:
    # collection vehicles dominate; transport vehicles only break ties
    return objectives.get("collection_routes", 0.0) + 0.01 * objectives.get("transport_routes", 0.0)


def compute_fitness(mode: str,
                    pack: Dict[str, Any],
                    wZ: Optional[Dict[str, float]] = None,
                    wP: Optional[Dict[str, float]] = None) -> Union[float, Tuple[float, ...]]:
    objectives, penalties = pack["objectives"], pack["penalties"]
    if mode == "distance":
        return objectives["distance"]
    if mode == "fleet":
        return fleet_objective(objectives)
    if mode == "lexicographic":
        return lexicographic_key(objectives, penalties)
    if mode == "weighted":
        return fitness_weighted(objectives, penalties, wZ, wP)
    raise ValueError(f"Unsupported fitness mode '{mode}'. Use 'distance', 'weighted', 'lexicographic' or 'fleet'.")
