import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..data import DistanceMatrix


@dataclass
class Tour:
    cities: List[int]
    cost: int

    @property
    def is_closed(self) -> bool:
        return len(self.cities) > 1 and self.cities[0] == self.cities[-1]

    def is_hamiltonian(self, n: int) -> bool:
        """True when the tour is closed and its first ``n`` cities are a permutation of ``range(n)``."""
        return (
            self.is_closed
            and len(self.cities) == n + 1
            and sorted(self.cities[:n]) == list(range(n))
        )


def tour_length(matrix: DistanceMatrix, cities: Sequence[int]) -> int:
    rows = matrix.rows()
    return sum(rows[a][b] for a, b in zip(cities, cities[1:]))


class Solver(ABC):
    name: str = "base"

    @abstractmethod
    def solve(self, matrix: DistanceMatrix) -> Tour:
        raise NotImplementedError


@dataclass
class SolveResult:
    tour: Tour
    solver_name: str
    runtime: float
    optimum: Optional[int] = None

    @property
    def cost(self) -> int:
        return self.tour.cost

    @property
    def gap(self) -> float:
        if self.optimum is None or math.isclose(self.optimum, 0.0):
            return float("inf")
        return (self.tour.cost - self.optimum) / self.optimum
