from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import networkx as nx
import numpy as np
import tsplib95


PathLike = Union[str, Path]


@dataclass
class DistanceMatrix:
    """Square matrix of nonnegative integer edge costs.

    The buffer is copied on construction and frozen, so engines only ever read it.
    A zero off-diagonal entry doubles as "no edge" for the spanning-tree builder.
    """

    data: np.ndarray

    def __post_init__(self):
        arr = np.array(self.data, dtype=np.int64, copy=True)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Distance matrix must be square, got shape {arr.shape}.")
        if (arr < 0).any():
            raise ValueError("Distances must be nonnegative.")
        arr.setflags(write=False)
        self.data = arr

    def __eq__(self, other):
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "DistanceMatrix":
        return cls(np.asarray(rows, dtype=np.int64))

    @property
    def n(self) -> int:
        return self.data.shape[0]

    def weight(self, i: int, j: int) -> int:
        return int(self.data[i, j])

    def rows(self) -> List[List[int]]:
        # Plain lists index much faster than numpy scalars inside the search loops.
        return self.data.tolist()

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self.data, self.data.T))

    def to_graph(self) -> nx.Graph:
        graph = nx.Graph()
        graph.add_nodes_from(range(self.n))
        rows, cols = np.nonzero(self.data)
        for i, j in zip(rows.tolist(), cols.tolist()):
            if i < j:
                graph.add_edge(i, j, weight=int(self.data[i, j]))
        return graph


def load_matrix(path: PathLike, n: int, strict: bool = False) -> DistanceMatrix:
    """Read ``n * n`` whitespace separated integers in row-major order.

    Values past ``n * n`` are ignored. A short file leaves the remaining cells at
    zero unless ``strict`` is set, in which case it is rejected.
    """
    if n < 1:
        raise ValueError(f"Number of cities must be positive, got {n}.")
    path = Path(path)
    tokens = path.read_text().split()
    size = n * n
    if strict and len(tokens) < size:
        raise ValueError(f"{path} holds {len(tokens)} values, expected {size}.")
    values = np.zeros(size, dtype=np.int64)
    for idx, token in enumerate(tokens[:size]):
        try:
            values[idx] = int(token)
        except OverflowError:
            raise ValueError(f"{path}: value {token} does not fit in a 64-bit integer.") from None
    return DistanceMatrix(values.reshape(n, n))


def load_tsplib(path: PathLike) -> DistanceMatrix:
    problem = tsplib95.load(str(path))
    nodes = sorted(problem.get_nodes())
    n = len(nodes)
    values = np.zeros((n, n), dtype=np.int64)
    for i, a in enumerate(nodes):
        for j, b in enumerate(nodes):
            if i != j:
                values[i, j] = int(problem.get_weight(a, b))
    return DistanceMatrix(values)


def load_instance(path: PathLike, n: int) -> DistanceMatrix:
    path = Path(path)
    if path.suffix.lower() == ".tsp":
        matrix = load_tsplib(path)
        if matrix.n != n:
            raise ValueError(f"{path} has dimension {matrix.n}, expected {n}.")
        return matrix
    return load_matrix(path, n)


def random_euclidean_matrix(n: int, seed: Optional[int] = None, scale: float = 100.0) -> DistanceMatrix:
    if n < 1:
        raise ValueError(f"Number of cities must be positive, got {n}.")
    rng = np.random.default_rng(seed)
    points = rng.uniform(0.0, scale, size=(n, 2))
    diff = points[:, None, :] - points[None, :, :]
    dist = np.rint(np.hypot(diff[..., 0], diff[..., 1])).astype(np.int64)
    # Coincident points would otherwise read as missing edges.
    dist = np.maximum(dist, 1)
    np.fill_diagonal(dist, 0)
    return DistanceMatrix(dist)
