import random

import networkx as nx

from ..errors import EmptyInput
from .base import Tour, edge_weight


def nearest_neighbor_tour(graph: nx.Graph, start: int) -> Tour:
    tour = [start]
    # Kept in node order so that min() resolves ties to the earliest city.
    unvisited = [node for node in graph.nodes() if node != start]
    current = start
    while unvisited:
        nxt = min(unvisited, key=lambda node: edge_weight(graph, current, node))
        tour.append(nxt)
        unvisited.remove(nxt)
        current = nxt
    return tuple(tour)


def initial_solution(graph: nx.Graph, rng: random.Random) -> Tour:
    nodes = list(graph.nodes())
    if not nodes:
        raise EmptyInput("cannot build a tour without cities")
    start = nodes[rng.randrange(len(nodes))]
    return nearest_neighbor_tour(graph, start)


def swap_adjacent(tour: Tour, rng: random.Random) -> Tour:
    n = len(tour)
    if n == 0:
        raise EmptyInput("cannot swap inside an empty tour")
    first = rng.randrange(n)
    second = (first + 1) % n
    neighbor = list(tour)
    neighbor[first], neighbor[second] = neighbor[second], neighbor[first]
    return tuple(neighbor)
