"""Sequential pipeline: condition → shape → decay-reduce → average."""


from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional
import json, logging
import numpy as np
import pandas as pd

from .conditioning import condition
from .config import RunConfig
from .reduction import average, reduce_columns
from .shaping import SampleGrid, shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class PipelineResult:
    """Everything produced by one :func:`run_pipeline` call.

    ``discarded`` counts the trailing samples the shaper dropped; they are
    not an error, but callers may want to report them.
    """

    n_samples: int
    grid: SampleGrid
    columns: np.ndarray
    average: float
    config: RunConfig = field(default_factory=RunConfig)
    conditioned: np.ndarray = field(default_factory=lambda: np.empty(0))

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PipelineResult):
            return NotImplemented
        return (
            self.n_samples == other.n_samples
            and self.average == other.average
            and self.config == other.config
            and self.grid == other.grid
            and np.array_equal(self.columns, other.columns)
            and np.array_equal(self.conditioned, other.conditioned)
        )

    @property
    def n(self) -> int:
        return self.grid.n

    @property
    def discarded(self) -> int:
        return self.grid.discarded

    def to_dict(self) -> Dict[str, Any]:
        return {
            "average": self.average,
            "n_samples": self.n_samples,
            "n": self.n,
            "discarded": self.discarded,
            "conditioned": self.conditioned.tolist(),
            "columns": self.columns.tolist(),
            "grid": self.grid.tolist(),
            "config": self.config.to_dict(),
        }


def run_pipeline(raw: Iterable[float], cfg: RunConfig = RunConfig()) -> PipelineResult:
    """Run every stage to completion; any stage error propagates unchanged."""
    raw = list(raw)
    logger.info("Run start: samples=%d gain=%g offset=%g decay=%g",
                len(raw), cfg.gain, cfg.offset, cfg.decay_factor)
    conditioned = condition(raw, cfg.conditioning)
    grid = shape(conditioned)
    if grid.discarded:
        logger.info("Dropped %d trailing samples beyond %dx%d grid", grid.discarded, grid.n, grid.n)
    cols = reduce_columns(grid, cfg.decay.decay_factor)
    avg = average(cols)
    logger.info("Run done: N=%d average=%.6g", grid.n, avg)
    return PipelineResult(
        n_samples=len(raw),
        grid=grid,
        columns=cols,
        average=avg,
        config=cfg,
        conditioned=conditioned,
    )


def write_outputs(result: PipelineResult, *, json_out: Optional[Path] = None,
                  csv_out: Optional[Path] = None) -> Dict[str, str]:
    """Write the JSON summary and/or per-column CSV; return written paths."""
    written: Dict[str, str] = {}
    if json_out:
        json_out = Path(json_out)
        json_out.parent.mkdir(parents=True, exist_ok=True)
        json_out.write_text(json.dumps(result.to_dict(), indent=2))
        written["json"] = str(json_out)
    if csv_out:
        csv_out = Path(csv_out)
        csv_out.parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame({
            "column": np.arange(result.columns.size, dtype=int),
            "value": result.columns,
        }).to_csv(csv_out, index=False)
        written["csv"] = str(csv_out)
    return written


__all__ = ["PipelineResult", "run_pipeline", "write_outputs"]
