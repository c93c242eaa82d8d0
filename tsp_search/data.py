import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import networkx as nx
import numpy as np
import tsplib95
from tsplib95.exceptions import TsplibError

from .errors import EmptyInput
from .geometry import City, distance


@dataclass
class Instance:
    name: str
    path: Path
    cities: List[City]
    optimum: Optional[float]


def distance_matrix(cities: Sequence[City]) -> np.ndarray:
    coords = np.asarray(cities, dtype=float).reshape(-1, 2)
    diff = coords[:, None, :] - coords[None, :, :]
    return np.sqrt((diff ** 2).sum(axis=-1))


def build_graph(cities: Sequence[City]) -> nx.Graph:
    """
    Complete graph over the cities; node i is cities[i].

    Coincident cities still get an explicit 0-weight edge.
    """
    if not cities:
        raise EmptyInput("cannot build a graph without cities")
    dist = distance_matrix(cities)
    graph = nx.Graph()
    for i, city in enumerate(cities):
        graph.add_node(i, city=city)
    n = len(cities)
    graph.add_weighted_edges_from(
        (i, j, float(dist[i, j])) for i in range(n) for j in range(i + 1, n)
    )
    return graph


def random_cities(
    rng: random.Random, min_count: int = 20, max_count: int = 40, bound: int = 200
) -> List[City]:
    if min_count <= 0 or max_count < min_count:
        raise ValueError(f"invalid city count range [{min_count}, {max_count}]")
    count = rng.randint(min_count, max_count)
    return [City(rng.randrange(bound), rng.randrange(bound)) for _ in range(count)]


def _solution_candidates(path: Path) -> Iterable[Path]:
    yield path.with_suffix(".opt.tour")
    for ext in (".opt.tour", ".opt", ".tour"):
        yield path.parent / "solutions" / f"{path.stem}{ext}"


def _load_optimum(cities: List[City], node_ids: List[int], path: Path) -> Optional[float]:
    index_of = {node: i for i, node in enumerate(node_ids)}
    for candidate in _solution_candidates(path):
        if not candidate.exists():
            continue
        try:
            tour_file = tsplib95.parse(candidate.read_text())
            nodes = [index_of[node] for node in tour_file.tours[0]]
        except (TsplibError, KeyError, IndexError, ValueError):
            continue
        dist = 0.0
        for i in range(len(nodes)):
            dist += distance(cities[nodes[i]], cities[nodes[(i + 1) % len(nodes)]])
        return float(dist)
    return None


def load_instance(path: Path) -> Instance:
    """Load a TSPLIB instance, rounding node coordinates to integer cities."""
    path = Path(path)
    problem = tsplib95.load(path)
    coords = problem.node_coords
    if not coords:
        raise EmptyInput(f"{path} has no NODE_COORD_SECTION")
    node_ids = sorted(coords)
    cities = [City(int(round(coords[n][0])), int(round(coords[n][1]))) for n in node_ids]
    optimum = _load_optimum(cities, node_ids, path)
    return Instance(name=problem.name or path.stem, path=path, cities=cities, optimum=optimum)
