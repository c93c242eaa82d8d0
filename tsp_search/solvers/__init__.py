from .annealing import AnnealingConfig, SimulatedAnnealingSolver, cooling_schedule
from .base import SearchResult, Solver, Tour, tour_length
from .heuristics import initial_solution, nearest_neighbor_tour, swap_adjacent
from .tabu import TabuConfig, TabuSearchSolver

__all__ = [
    "Solver",
    "SearchResult",
    "Tour",
    "tour_length",
    "nearest_neighbor_tour",
    "initial_solution",
    "swap_adjacent",
    "TabuConfig",
    "TabuSearchSolver",
    "AnnealingConfig",
    "SimulatedAnnealingSolver",
    "cooling_schedule",
]
