import random

from tsp_search.data import random_cities
from tsp_search.evaluation import run_solver
from tsp_search.solvers import AnnealingConfig, SimulatedAnnealingSolver, TabuConfig, TabuSearchSolver


def main():
    rng = random.Random(7)
    cities = random_cities(rng, min_count=12, max_count=12, bound=100)

    solvers = [
        TabuSearchSolver(TabuConfig(max_iterations=5_000, max_without_improvement=200), rng=random.Random(1)),
        SimulatedAnnealingSolver(AnnealingConfig(cooling_rate=0.001), rng=random.Random(1)),
    ]
    for solver in solvers:
        result = run_solver(solver, cities)
        print(f"{solver.name}: length={result.length:.2f} iterations={result.iterations} indices={result.indices}")


if __name__ == "__main__":
    main()
