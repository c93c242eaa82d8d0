import math
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import networkx as nx

from ..errors import InvalidConfiguration
from .base import Solver, Tour, tour_length
from .heuristics import initial_solution, swap_adjacent


@dataclass
class AnnealingConfig:
    initial_temperature: float = 100.0
    min_temperature: float = 0.1
    cooling_rate: float = 0.05
    random_seed: Optional[int] = None

    def __post_init__(self):
        values = (self.initial_temperature, self.min_temperature, self.cooling_rate)
        if not all(math.isfinite(v) for v in values):
            raise InvalidConfiguration(f"temperatures and cooling rate must be finite, got {values}")
        if self.initial_temperature <= 0:
            raise InvalidConfiguration(
                f"initial_temperature must be positive, got {self.initial_temperature}"
            )
        if not 0 < self.min_temperature < self.initial_temperature:
            raise InvalidConfiguration(
                "min_temperature must lie in (0, initial_temperature), "
                f"got {self.min_temperature} with initial_temperature={self.initial_temperature}"
            )
        if not 0 < self.cooling_rate < 1:
            raise InvalidConfiguration(f"cooling_rate must lie in (0, 1), got {self.cooling_rate}")


def cooling_schedule(config: AnnealingConfig) -> Iterator[float]:
    """Yield the temperature used at each iteration of an annealing run."""
    temperature = config.initial_temperature
    while temperature > config.min_temperature:
        yield temperature
        temperature *= 1 - config.cooling_rate


class SimulatedAnnealingSolver(Solver):
    name = "simulated_annealing"

    def __init__(self, config: AnnealingConfig = None, rng: random.Random = None):
        self.cfg = config or AnnealingConfig()
        self.rng = rng or random.Random(self.cfg.random_seed)
        self.temperature = self.cfg.initial_temperature
        self.history: List[float] = []
        self.current_history: List[float] = []
        self.iterations = 0

    def solve(self, graph: nx.Graph) -> Tuple[Tour, int]:
        self.history = []
        self.current_history = []
        iterations = 0
        temperature = self.cfg.initial_temperature

        current = initial_solution(graph, self.rng)
        current_len = tour_length(graph, current)
        best = current
        best_len = current_len

        while temperature > self.cfg.min_temperature:
            neighbor = swap_adjacent(current, self.rng)
            neighbor_len = tour_length(graph, neighbor)
            delta = neighbor_len - current_len

            # temperature > min_temperature > 0 here, so the division is safe.
            if delta < 0 or self.rng.random() < math.exp(-delta / temperature):
                current = neighbor
                current_len = neighbor_len
                if neighbor_len < best_len:
                    best = neighbor
                    best_len = neighbor_len

            temperature *= 1 - self.cfg.cooling_rate
            iterations += 1
            self.history.append(best_len)
            self.current_history.append(current_len)

        self.temperature = temperature
        self.iterations = iterations
        return best, iterations
