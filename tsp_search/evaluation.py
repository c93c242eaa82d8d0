import random
import time
from typing import Optional, Sequence

from .data import build_graph
from .errors import EmptyInput
from .geometry import City
from .solvers.annealing import AnnealingConfig, SimulatedAnnealingSolver
from .solvers.base import SearchResult, Solver
from .solvers.tabu import TabuConfig, TabuSearchSolver


def run_solver(solver: Solver, cities: Sequence[City]) -> SearchResult:
    """Run a solver on a city list and time it; the timing never affects the search."""
    cities = list(cities)
    if not cities:
        raise EmptyInput("at least one city is required")
    graph = build_graph(cities)
    start = time.perf_counter()
    tour, iterations = solver.solve(graph)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return SearchResult(
        cities=cities,
        tour=tour,
        iterations=iterations,
        time_ms=elapsed_ms,
        solver_name=solver.name,
        graph=graph,
    )


def tabu_search(
    cities: Sequence[City],
    max_iterations: int = 50_000,
    max_without_improvement: int = 50,
    max_tabu_states: int = 15,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    cfg = TabuConfig(
        max_iterations=max_iterations,
        max_without_improvement=max_without_improvement,
        max_tabu_states=max_tabu_states,
    )
    return run_solver(TabuSearchSolver(cfg, rng=rng), cities)


def simulated_annealing(
    cities: Sequence[City],
    initial_temperature: float = 100.0,
    min_temperature: float = 0.1,
    cooling_rate: float = 0.05,
    rng: Optional[random.Random] = None,
) -> SearchResult:
    cfg = AnnealingConfig(
        initial_temperature=initial_temperature,
        min_temperature=min_temperature,
        cooling_rate=cooling_rate,
    )
    return run_solver(SimulatedAnnealingSolver(cfg, rng=rng), cities)
