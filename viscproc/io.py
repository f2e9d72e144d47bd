from __future__ import annotations
import logging
import math
import re
from pathlib import Path
from typing import IO, List, Union
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# plain ASCII decimal: no digit separators, no nan/inf words
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _to_decimal(tok: str) -> float:
    if not _DECIMAL.fullmatch(tok):
        return math.nan
    return float(tok)


def parse_samples(text: str) -> List[float]:
    """Parse one delimited batch of whitespace-separated decimals.

    Only the first non-blank line is read.  Parsing stops at the first token
    that is not a finite decimal number; the remaining tokens are ignored
    with a warning.
    """
    line = next((ln for ln in text.splitlines() if ln.strip()), "")
    tokens = line.split()
    out: List[float] = []
    for i, tok in enumerate(tokens):
        v = _to_decimal(tok)
        if not math.isfinite(v):
            logger.warning("Stopped at non-numeric token %r; ignored %d of %d tokens",
                           tok, len(tokens) - i, len(tokens))
            break
        out.append(v)
    return out


def _first_line(fh: IO[str]) -> str:
    # one newline-terminated batch; never read past it
    for ln in fh:
        if ln.strip():
            return ln
    return ""


def read_samples(source: Union[str, Path, IO[str]]) -> List[float]:
    """Read one batch from a file path or an open text stream."""
    if isinstance(source, (str, Path)):
        with open(source, encoding="utf-8") as fh:
            return parse_samples(_first_line(fh))
    return parse_samples(_first_line(source))


def load_samples_csv(path: Union[str, Path], col: str) -> List[float]:
    """Values of ``col`` from a logger CSV, in file order.

    Like :func:`parse_samples`, reading stops at the first row that is empty,
    non-numeric or non-finite, so later samples never shift into earlier grid
    positions; the ignored rows are reported with a warning.
    """
    df = pd.read_csv(path)
    if col not in df.columns:
        raise ValueError(f"CSV must contain a '{col}' column")
    x = pd.to_numeric(df[col], errors="coerce").to_numpy(float)
    bad = np.flatnonzero(~np.isfinite(x))
    if bad.size:
        i = int(bad[0])
        logger.warning("Stopped at non-numeric row %d in column %r; ignored %d of %d rows",
                       i, col, x.size - i, x.size)
        x = x[:i]
    return x.tolist()


__all__ = ["parse_samples", "read_samples", "load_samples_csv"]
