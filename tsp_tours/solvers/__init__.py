from .base import Solver, SolveResult, Tour, tour_length
from .exhaustive import ExhaustiveSolver, exhaustive_tour, iter_permutations, permutation_count
from .heuristics import (
    DoubleTreeSolver,
    Walk,
    build_spanning_tree,
    double_tree_tour,
    shortcut_walk,
    spanning_tree_graph,
    tree_weight,
    walk_tree,
)

__all__ = [
    "Solver",
    "SolveResult",
    "Tour",
    "tour_length",
    "ExhaustiveSolver",
    "exhaustive_tour",
    "iter_permutations",
    "permutation_count",
    "DoubleTreeSolver",
    "Walk",
    "build_spanning_tree",
    "double_tree_tour",
    "shortcut_walk",
    "spanning_tree_graph",
    "tree_weight",
    "walk_tree",
]
