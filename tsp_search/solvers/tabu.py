import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

import networkx as nx

from ..errors import InvalidConfiguration
from .base import Solver, Tour, tour_length
from .heuristics import initial_solution, swap_adjacent


def _require_positive_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {value!r}")


@dataclass
class TabuConfig:
    max_iterations: int = 50_000
    max_without_improvement: int = 50
    max_tabu_states: int = 15
    random_seed: Optional[int] = None

    def __post_init__(self):
        _require_positive_int("max_iterations", self.max_iterations)
        _require_positive_int("max_without_improvement", self.max_without_improvement)
        _require_positive_int("max_tabu_states", self.max_tabu_states)


class TabuSearchSolver(Solver):
    """
    Tabu search over adjacent swaps.

    The tabu list remembers whole tours rather than moves. A tabu tour is
    still accepted when it beats the best tour seen so far (aspiration).
    """

    name = "tabu_search"

    def __init__(self, config: TabuConfig = None, rng: random.Random = None):
        self.cfg = config or TabuConfig()
        self.rng = rng or random.Random(self.cfg.random_seed)
        self.tabu_list: Deque[Tour] = deque(maxlen=self.cfg.max_tabu_states)
        self.history: List[float] = []
        self.tabu_sizes: List[int] = []
        self.iterations = 0

    def solve(self, graph: nx.Graph) -> Tuple[Tour, int]:
        self.tabu_list.clear()
        self.history = []
        self.tabu_sizes = []
        iterations = 0
        without_improvement = 0

        current = initial_solution(graph, self.rng)
        best = current
        best_len = tour_length(graph, best)

        while iterations < self.cfg.max_iterations and without_improvement < self.cfg.max_without_improvement:
            neighbor = swap_adjacent(current, self.rng)
            neighbor_len = tour_length(graph, neighbor)

            if neighbor not in self.tabu_list or neighbor_len < best_len:
                current = neighbor
                if neighbor_len < best_len:
                    best = neighbor
                    best_len = neighbor_len
                self.tabu_list.append(neighbor)
                without_improvement = 0
            else:
                without_improvement += 1

            iterations += 1
            self.history.append(best_len)
            self.tabu_sizes.append(len(self.tabu_list))

        self.iterations = iterations
        return best, iterations
