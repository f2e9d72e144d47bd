from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable
import numpy as np

DEFAULT_GAIN = 1.0
DEFAULT_OFFSET = 0.0


@dataclass(frozen=True)
class ConditioningParams:
    gain: float = DEFAULT_GAIN      # scales incoming data (calibration)
    offset: float = DEFAULT_OFFSET  # zero-point shift


def condition(raw: Iterable[float], params: ConditioningParams = ConditioningParams()) -> np.ndarray:
    """Apply ``gain*x + offset`` to every sample, preserving order.

    An empty batch yields an empty array; rejecting it is the shaper's job.
    """
    x = np.asarray(list(raw), dtype=float)
    return x * float(params.gain) + float(params.offset)


__all__ = ["ConditioningParams", "condition", "DEFAULT_GAIN", "DEFAULT_OFFSET"]
