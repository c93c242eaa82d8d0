import argparse
import random
import time
from pathlib import Path
from typing import List

from tsplib95.exceptions import TsplibError

from tsp_search.data import load_instance, random_cities
from tsp_search.errors import SearchError
from tsp_search.evaluation import run_solver
from tsp_search.geometry import City
from tsp_search.solvers.annealing import AnnealingConfig, SimulatedAnnealingSolver
from tsp_search.solvers.base import SearchResult
from tsp_search.solvers.tabu import TabuConfig, TabuSearchSolver


def log(msg: str) -> None:
    ts = time.strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", flush=True)


def _format_cities(cities: List[City]) -> str:
    return "[" + ", ".join(str(c) for c in cities) + "]"


def _print_result(label: str, result: SearchResult) -> None:
    print(
        f"{label} result ({result.time_ms:.0f} ms, {result.iterations} iterations, "
        f"path length: {result.length:f}): {_format_cities(result.solution)}"
    )
    print(f"Indices: {result.indices}")


def _load_cities(args, rng: random.Random) -> List[City]:
    if args.tsplib:
        path = Path(args.tsplib)
        log(f"loading instance from {path}")
        instance = load_instance(path)
        opt = "unknown" if instance.optimum is None else f"{instance.optimum:.2f}"
        log(f"loaded {instance.name}: {len(instance.cities)} cities, optimum={opt}")
        return instance.cities
    cities = random_cities(rng, args.min_cities, args.max_cities, args.bound)
    print(
        f"The following city sequence ({len(cities)} cities) has been generated: "
        f"{_format_cities(cities)}"
    )
    return cities


def run(args) -> None:
    rng = random.Random(args.seed)
    cities = _load_cities(args, rng)

    tabu_cfg = TabuConfig(
        max_iterations=args.max_iterations,
        max_without_improvement=args.max_without_improvement,
        max_tabu_states=args.max_tabu_states,
    )
    sa_cfg = AnnealingConfig(
        initial_temperature=args.initial_temperature,
        min_temperature=args.min_temperature,
        cooling_rate=args.cooling_rate,
    )

    log("running tabu search...")
    tabu = run_solver(TabuSearchSolver(tabu_cfg, rng=random.Random(rng.getrandbits(32))), cities)
    log("running simulated annealing...")
    sa = run_solver(SimulatedAnnealingSolver(sa_cfg, rng=random.Random(rng.getrandbits(32))), cities)

    _print_result("Tabu search", tabu)
    _print_result("Simulated annealing", sa)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tabu search and simulated annealing for the TSP")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Solve a random or TSPLIB instance with both engines")
    run_parser.add_argument("--tsplib", default=None, help="TSPLIB .tsp file; random cities when omitted")
    run_parser.add_argument("--seed", type=int, default=None)
    run_parser.add_argument("--min-cities", type=int, default=20)
    run_parser.add_argument("--max-cities", type=int, default=40)
    run_parser.add_argument("--bound", type=int, default=200, help="coordinates are drawn from [0, bound)")

    tabu_defaults = TabuConfig()
    run_parser.add_argument("--max-iterations", type=int, default=tabu_defaults.max_iterations)
    run_parser.add_argument(
        "--max-without-improvement", type=int, default=tabu_defaults.max_without_improvement
    )
    run_parser.add_argument("--max-tabu-states", type=int, default=tabu_defaults.max_tabu_states)

    sa_defaults = AnnealingConfig()
    run_parser.add_argument("--initial-temperature", type=float, default=sa_defaults.initial_temperature)
    run_parser.add_argument("--min-temperature", type=float, default=sa_defaults.min_temperature)
    run_parser.add_argument("--cooling-rate", type=float, default=sa_defaults.cooling_rate)
    run_parser.set_defaults(func=run)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (SearchError, ValueError, OSError, TsplibError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
