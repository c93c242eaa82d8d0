from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import networkx as nx

from ..data import build_graph
from ..errors import EmptyInput
from ..geometry import City


Tour = Tuple[int, ...]


def edge_weight(graph: nx.Graph, a: int, b: int) -> float:
    if a == b:
        return 0.0
    return graph[a][b]["weight"]


def tour_length(graph: nx.Graph, tour: Sequence[int]) -> float:
    n = len(tour)
    if n == 0:
        raise EmptyInput("cannot measure an empty tour")
    dist = 0.0
    for i in range(n):
        a = tour[i]
        b = tour[(i + 1) % n]
        dist += edge_weight(graph, a, b)
    return float(dist)


class Solver(ABC):
    name: str = "base"

    @abstractmethod
    def solve(self, graph: nx.Graph) -> Tuple[Tour, int]:
        """Return the best tour found and the number of iterations run."""
        raise NotImplementedError


@dataclass
class SearchResult:
    cities: List[City]
    tour: Tour
    iterations: int
    time_ms: float
    solver_name: str
    graph: Optional[nx.Graph] = field(default=None, repr=False, compare=False)

    @property
    def indices(self) -> List[int]:
        return list(self.tour)

    @property
    def solution(self) -> List[City]:
        return [self.cities[i] for i in self.tour]

    @property
    def length(self) -> float:
        if self.graph is None:
            self.graph = build_graph(self.cities)
        return tour_length(self.graph, self.tour)
