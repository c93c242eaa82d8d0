"""End-to-end runs through run_solver and the convenience entry points."""

import random

import pytest

from tsp_search import EmptyInput, InvalidConfiguration, simulated_annealing, tabu_search
from tsp_search.evaluation import run_solver
from tsp_search.geometry import City
from tsp_search.solvers import TabuConfig, TabuSearchSolver, tour_length


def test_run_solver_wraps_result(square):
    result = run_solver(TabuSearchSolver(TabuConfig(max_iterations=200), rng=random.Random(0)), square)
    assert result.solver_name == "tabu_search"
    assert result.cities == square
    assert sorted(result.indices) == [0, 1, 2, 3]
    assert sorted(result.solution) == sorted(square)
    assert result.time_ms >= 0
    assert result.length == pytest.approx(40.0)


@pytest.mark.parametrize("search", [tabu_search, simulated_annealing])
def test_square_scenario(search, square):
    result = search(square, rng=random.Random(1))
    assert result.length == pytest.approx(40.0)


@pytest.mark.parametrize("search", [tabu_search, simulated_annealing])
def test_single_city(search):
    result = search([City(3, 4)], rng=random.Random(1))
    assert result.indices == [0]
    assert result.length == 0.0


@pytest.mark.parametrize("search", [tabu_search, simulated_annealing])
def test_two_cities(search):
    result = search([City(0, 0), City(0, 5)], rng=random.Random(1))
    assert result.length == pytest.approx(10.0)


@pytest.mark.parametrize("search", [tabu_search, simulated_annealing])
def test_duplicate_coordinates_keep_distinct_indices(search):
    cities = [City(0, 0), City(5, 5), City(0, 0), City(5, 5), City(9, 1)]
    result = search(cities, rng=random.Random(2))
    assert sorted(result.indices) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("search", [tabu_search, simulated_annealing])
def test_permutation_invariant(search, scattered):
    result = search(scattered, rng=random.Random(3))
    assert len(result.solution) == len(scattered)
    assert sorted(result.solution) == sorted(scattered)


@pytest.mark.parametrize("search", [tabu_search, simulated_annealing])
def test_seeded_runs_are_identical(search, scattered):
    first = search(scattered, rng=random.Random(77))
    second = search(scattered, rng=random.Random(77))
    assert first.tour == second.tour
    assert first.iterations == second.iterations
    assert first.length == second.length


def test_engines_do_not_share_state(scattered):
    before = list(scattered)
    tabu_search(scattered, rng=random.Random(0))
    simulated_annealing(scattered, rng=random.Random(0))
    assert scattered == before


@pytest.mark.parametrize("search", [tabu_search, simulated_annealing])
def test_empty_input(search):
    with pytest.raises(EmptyInput):
        search([])


def test_invalid_configuration_raised_before_search(square):
    with pytest.raises(InvalidConfiguration):
        tabu_search(square, max_tabu_states=0)
    with pytest.raises(InvalidConfiguration):
        simulated_annealing(square, min_temperature=500.0)
    with pytest.raises(InvalidConfiguration):
        simulated_annealing(square, cooling_rate=0.0)


def test_reported_length_matches_engine(scattered):
    """The result's length is the exact value the engine tracked as its best."""
    solver = TabuSearchSolver(TabuConfig(max_iterations=1_000), rng=random.Random(12))
    result = run_solver(solver, scattered)
    assert result.graph is not None
    assert result.length == tour_length(result.graph, result.tour)
    assert result.length == solver.history[-1]
