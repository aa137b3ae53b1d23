"""
Exhaustive tour search over the directed-integer (Steinhaus-Johnson-Trotter) enumeration.

City 0 stays fixed at position 0 and only the trailing ``n - 1`` positions move. The
first ``(n - 1)! / 2`` permutations of that enumeration never contain a sequence
together with its reverse, so every undirected cycle through city 0 is costed once.
"""

import math
from typing import Iterator, List, Optional

from ..data import DistanceMatrix
from .base import Solver, Tour


LEFT = -1
RIGHT = 1


def permutation_count(n: int) -> int:
    if n < 1:
        raise ValueError(f"Number of cities must be positive, got {n}.")
    return max(1, math.factorial(n - 1) // 2)


def _largest_mobile(order: List[int], direction: List[int]) -> Optional[int]:
    n = len(order)
    best = None
    for j in range(1, n):
        d = direction[j]
        if (j == 1 and d == LEFT) or (j == n - 1 and d == RIGHT):
            continue
        if order[j] > order[j + d] and (best is None or order[j] > order[best]):
            best = j
    return best


def iter_permutations(n: int) -> Iterator[List[int]]:
    """Yield each tour order considered by the exhaustive search, city 0 first."""
    count = permutation_count(n)
    order = list(range(n))
    direction = [LEFT] * n
    for k in range(count):
        yield list(order)
        if k == count - 1:
            break
        j = _largest_mobile(order, direction)
        if j is None:
            raise RuntimeError(f"No mobile element after {k + 1} of {count} permutations.")
        t = j + direction[j]
        order[j], order[t] = order[t], order[j]
        direction[j], direction[t] = direction[t], direction[j]
        moved = order[t]
        for i in range(1, n):
            if order[i] > moved:
                direction[i] = -direction[i]


def exhaustive_tour(matrix: DistanceMatrix, max_cities: Optional[int] = None) -> Tour:
    n = matrix.n
    if n < 1:
        raise ValueError("At least one city is required.")
    if max_cities is not None and n > max_cities:
        raise ValueError(f"{n} cities exceeds the exhaustive search limit of {max_cities}.")
    if n == 1:
        return Tour(cities=[0, 0], cost=0)
    rows = matrix.rows()
    best_order: Optional[List[int]] = None
    best_cost = 0
    for order in iter_permutations(n):
        cost = rows[order[-1]][order[0]]
        for a, b in zip(order, order[1:]):
            cost += rows[a][b]
        # Strict comparison keeps the first tour found among equal costs.
        if best_order is None or cost < best_cost:
            best_order = order
            best_cost = cost
    return Tour(cities=best_order + [best_order[0]], cost=best_cost)


class ExhaustiveSolver(Solver):
    name = "exhaustive"

    def __init__(self, max_cities: Optional[int] = None):
        self.max_cities = max_cities

    def solve(self, matrix: DistanceMatrix) -> Tour:
        return exhaustive_tour(matrix, max_cities=self.max_cities)
