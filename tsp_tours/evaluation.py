import time
from typing import Optional, Tuple

from .data import DistanceMatrix
from .solvers.base import SolveResult, Solver
from .solvers.exhaustive import ExhaustiveSolver
from .solvers.heuristics import DoubleTreeSolver


def evaluate_solver(solver: Solver, matrix: DistanceMatrix, optimum: Optional[int] = None) -> SolveResult:
    start = time.perf_counter()
    tour = solver.solve(matrix)
    runtime = time.perf_counter() - start
    return SolveResult(tour=tour, solver_name=solver.name, runtime=runtime, optimum=optimum)


def compare_solvers(matrix: DistanceMatrix, max_cities: Optional[int] = None) -> Tuple[SolveResult, SolveResult]:
    """Run both engines; the heuristic result carries the exact cost as its optimum."""
    optimal = evaluate_solver(ExhaustiveSolver(max_cities=max_cities), matrix)
    optimal.optimum = optimal.cost
    heuristic = evaluate_solver(DoubleTreeSolver(), matrix, optimum=optimal.cost)
    return optimal, heuristic
