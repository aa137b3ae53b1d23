from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from tsp_tours.data import DistanceMatrix


settings.register_profile(
    "ci",
    max_examples=60,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=(HealthCheck.too_slow,),
)
settings.load_profile("ci")


@pytest.fixture
def four_cities() -> DistanceMatrix:
    # d(0,1)=10, d(0,2)=15, d(0,3)=20, d(1,2)=35, d(1,3)=25, d(2,3)=30
    return DistanceMatrix.from_rows(
        [
            [0, 10, 15, 20],
            [10, 0, 35, 25],
            [15, 35, 0, 30],
            [20, 25, 30, 0],
        ]
    )


@pytest.fixture
def star() -> DistanceMatrix:
    # City 0 reaches every leaf; leaves share no edges.
    return DistanceMatrix.from_rows(
        [
            [0, 1, 2, 3, 4],
            [1, 0, 0, 0, 0],
            [2, 0, 0, 0, 0],
            [3, 0, 0, 0, 0],
            [4, 0, 0, 0, 0],
        ]
    )
