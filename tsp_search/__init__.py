"""
Tabu search and simulated annealing for the Euclidean TSP.
"""

from .errors import EmptyInput, InvalidConfiguration, SearchError
from .evaluation import run_solver, simulated_annealing, tabu_search
from .geometry import City, distance

__all__ = [
    "City",
    "distance",
    "SearchError",
    "InvalidConfiguration",
    "EmptyInput",
    "run_solver",
    "tabu_search",
    "simulated_annealing",
    "data",
    "evaluation",
    "solvers",
]
