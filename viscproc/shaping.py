from __future__ import annotations
"""
Square-grid reshaping of a conditioned sample batch.

The grid side is ``N = floor(sqrt(len(samples)))``; the first ``N*N`` samples
fill the grid row-major, so element ``(i, j)`` is sample ``i*N + j``.  Any
trailing samples are dropped and their count is kept on the grid.
"""

from dataclasses import dataclass
from typing import Iterable
import logging
import math
import numpy as np

from .errors import EmptyInputError, InsufficientDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SampleGrid:
    values: np.ndarray   # (N, N), read-only
    discarded: int = 0   # trailing samples beyond N*N

    # ndarray fields: compare by content, unhashable
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SampleGrid):
            return NotImplemented
        return self.discarded == other.discarded and np.array_equal(self.values, other.values)

    @property
    def n(self) -> int:
        return int(self.values.shape[0]) if self.values.ndim == 2 else 0

    def tolist(self) -> list[list[float]]:
        return self.values.tolist()


def shape(conditioned: Iterable[float]) -> SampleGrid:
    """Reshape ``conditioned`` into an ``N×N`` :class:`SampleGrid`."""
    x = np.asarray(list(conditioned), dtype=float)
    if x.size == 0:
        raise EmptyInputError("Raw data is empty")
    n = math.isqrt(x.size)
    if n == 0:
        raise InsufficientDataError(f"Cannot shape {x.size} samples into a grid")
    used = n * n
    dropped = int(x.size - used)
    if dropped:
        logger.debug("Shaping %d samples into %dx%d grid; %d trailing samples dropped",
                     x.size, n, n, dropped)
    grid = x[:used].reshape(n, n).copy()
    grid.flags.writeable = False
    return SampleGrid(values=grid, discarded=dropped)


__all__ = ["SampleGrid", "shape"]
