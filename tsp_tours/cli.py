import argparse
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

from tsp_tours.data import DistanceMatrix, load_instance, random_euclidean_matrix
from tsp_tours.evaluation import compare_solvers, evaluate_solver
from tsp_tours.solvers import DoubleTreeSolver, ExhaustiveSolver, Tour, permutation_count


@dataclass
class RunConfig:
    max_cities: Optional[int] = None
    verbose: bool = False
    seed: int = 123


class _Parser(argparse.ArgumentParser):
    # Usage errors exit with status 1 rather than argparse's 2.
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def log(msg: str, cfg: RunConfig) -> None:
    if not cfg.verbose:
        return
    ts = time.strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", file=sys.stderr, flush=True)


def format_tour(label: str, tour: Tour) -> str:
    cities = "".join(f"{c} " for c in tour.cities)
    return f"{label} tour: {cities}\ntour cost:    {tour.cost}"


def _config(args) -> RunConfig:
    return RunConfig(
        max_cities=getattr(args, "max_cities", None),
        verbose=getattr(args, "verbose", False),
        seed=getattr(args, "seed", RunConfig.seed),
    )


def _load(args, cfg: RunConfig) -> Optional[DistanceMatrix]:
    if args.input_file is None:
        log(f"generating {args.number_of_cities} random cities (seed={cfg.seed})", cfg)
        return random_euclidean_matrix(args.number_of_cities, seed=cfg.seed)
    try:
        matrix = load_instance(args.input_file, args.number_of_cities)
    except (OSError, ValueError) as exc:
        print("Error loading input file")
        log(f"{args.input_file}: {exc}", cfg)
        return None
    log(f"loaded {matrix.n} cities from {args.input_file}", cfg)
    return matrix


def optimal(args) -> int:
    cfg = _config(args)
    matrix = _load(args, cfg)
    if matrix is None:
        return 1
    log(f"enumerating {permutation_count(matrix.n)} tours", cfg)
    try:
        result = evaluate_solver(ExhaustiveSolver(max_cities=cfg.max_cities), matrix)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    log(f"exhaustive search finished in {result.runtime:.2f}s", cfg)
    print(format_tour("optimal", result.tour))
    return 0


def heuristic(args) -> int:
    cfg = _config(args)
    matrix = _load(args, cfg)
    if matrix is None:
        return 1
    result = evaluate_solver(DoubleTreeSolver(), matrix)
    log(f"double-tree heuristic finished in {result.runtime:.4f}s", cfg)
    print(format_tour("heuristic", result.tour))
    return 0


def compare(args) -> int:
    cfg = _config(args)
    matrix = _load(args, cfg)
    if matrix is None:
        return 1
    if not matrix.is_symmetric():
        log("distance matrix is not symmetric; mirrored tours may differ in cost", cfg)
    try:
        best, approx = compare_solvers(matrix, max_cities=cfg.max_cities)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(format_tour("optimal", best.tour))
    print(format_tour("heuristic", approx.tour))
    print(f"gap:          {approx.gap:.2%}")
    log(f"runtimes: exhaustive={best.runtime:.4f}s double_tree={approx.runtime:.4f}s", cfg)
    return 0


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of cities: {value!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"number of cities must be positive, got {n}")
    return n


def _add_common(parser: argparse.ArgumentParser, optional_file: bool = False) -> None:
    parser.add_argument("number_of_cities", type=_positive_int)
    if optional_file:
        parser.add_argument("input_file", nargs="?", default=None)
    else:
        parser.add_argument("input_file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Timestamped progress on stderr")


def _add_max_cities(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--max-cities", type=_positive_int, default=None, help="Refuse exhaustive search above this many cities"
    )


def _engine_parser(prog: str, description: str, exhaustive: bool) -> argparse.ArgumentParser:
    parser = _Parser(prog=prog, description=description)
    _add_common(parser)
    if exhaustive:
        _add_max_cities(parser)
    return parser


def cheapest_tour(argv: Optional[List[str]] = None) -> int:
    parser = _engine_parser("cheapest-tour", "Optimal tour by exhaustive search", exhaustive=True)
    return optimal(parser.parse_args(argv))


def heuristic_tour(argv: Optional[List[str]] = None) -> int:
    parser = _engine_parser("heuristic-tour", "Approximate tour by the double-tree heuristic", exhaustive=False)
    return heuristic(parser.parse_args(argv))


def main(argv: Optional[List[str]] = None) -> int:
    parser = _Parser(prog="tsp-tours", description="TSP tours from a distance matrix")
    subparsers = parser.add_subparsers(dest="command", required=True)

    optimal_parser = subparsers.add_parser("optimal", help="Exhaustive search for the cheapest tour")
    _add_common(optimal_parser)
    _add_max_cities(optimal_parser)
    optimal_parser.set_defaults(func=optimal)

    heuristic_parser = subparsers.add_parser("heuristic", help="Double-tree heuristic tour")
    _add_common(heuristic_parser)
    heuristic_parser.set_defaults(func=heuristic)

    compare_parser = subparsers.add_parser(
        "compare", help="Run both engines; without an input file a random instance is generated"
    )
    _add_common(compare_parser, optional_file=True)
    _add_max_cities(compare_parser)
    compare_parser.add_argument("--seed", type=int, default=RunConfig.seed)
    compare_parser.set_defaults(func=compare)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
