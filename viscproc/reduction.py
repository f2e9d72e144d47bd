from __future__ import annotations
"""
Decay-weighted column reduction and the final aggregate.

For column ``c`` of an ``N×N`` grid::

    result[c] = sum_j grid[j, c] * exp(-decay_factor * j) / N

Row 0 carries weight 1 and later rows are discounted exponentially.  A
negative ``decay_factor`` inverts the weighting; ``0`` gives the plain column
mean.  This is a deterministic weighted reduction, not a parametric fit.
"""

from dataclasses import dataclass
from typing import Iterable, Union
import numpy as np

from .errors import EmptyMatrixError
from .shaping import SampleGrid

DEFAULT_DECAY_FACTOR = 0.1


@dataclass(frozen=True)
class DecayConfig:
    decay_factor: float = DEFAULT_DECAY_FACTOR


def decay_weights(n: int, decay_factor: float) -> np.ndarray:
    """Row weights ``exp(-decay_factor * j)`` for ``j = 0..n-1``."""
    return np.exp(-float(decay_factor) * np.arange(n, dtype=float))


def reduce_columns(grid: Union[SampleGrid, np.ndarray], decay_factor: float = DEFAULT_DECAY_FACTOR) -> np.ndarray:
    """One decay-weighted value per grid column."""
    data = grid.values if isinstance(grid, SampleGrid) else np.asarray(grid, dtype=float)
    if data.ndim != 2:
        raise EmptyMatrixError(f"Expected a 2-D grid, got {data.ndim}-D array of shape {data.shape}")
    if data.shape[0] == 0 or data.shape[1] == 0:
        raise EmptyMatrixError("Data matrix is empty")
    rows = data.shape[0]
    w = decay_weights(rows, decay_factor)
    return (w @ data) / rows


def average(columns: Iterable[float]) -> float:
    """Arithmetic mean of the per-column values."""
    v = np.asarray(list(columns), dtype=float)
    if v.size == 0:
        raise EmptyMatrixError("Cannot average an empty set of columns")
    return float(v.sum() / v.size)


__all__ = ["DecayConfig", "DEFAULT_DECAY_FACTOR", "decay_weights", "reduce_columns", "average"]
