"""Run configuration: conditioning + decay parameters and their parsing."""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import json
import math

from .conditioning import ConditioningParams, DEFAULT_GAIN, DEFAULT_OFFSET
from .errors import ConfigParseError
from .reduction import DecayConfig, DEFAULT_DECAY_FACTOR


@dataclass(frozen=True)
class RunConfig:
    """Parameters for one pipeline run.

    Each field defaults independently, so a config file or CLI may supply any
    subset of them.
    """

    gain: float = DEFAULT_GAIN
    offset: float = DEFAULT_OFFSET
    decay_factor: float = DEFAULT_DECAY_FACTOR

    @property
    def conditioning(self) -> ConditioningParams:
        return ConditioningParams(gain=self.gain, offset=self.offset)

    @property
    def decay(self) -> DecayConfig:
        return DecayConfig(decay_factor=self.decay_factor)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RunConfig":
        known = {f.name: f.default for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigParseError(f"Unknown config field(s): {', '.join(unknown)}")
        return cls(**{name: parse_number(data.get(name), name, default)
                      for name, default in known.items()})

    def override(self, **values: Optional[float]) -> "RunConfig":
        """Return a copy with every non-None value replaced."""
        cur = self.to_dict()
        cur.update({k: float(v) for k, v in values.items() if v is not None})
        return RunConfig(**cur)


def parse_number(value: Any, name: str, default: float) -> float:
    """Interpret ``value`` as a float; blank or ``None`` keeps ``default``."""
    if value is None:
        return float(default)
    if isinstance(value, bool):
        raise ConfigParseError(f"Invalid input for {name}: {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return float(default)
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise ConfigParseError(f"Invalid input for {name}: {value!r}") from None
    if not math.isfinite(v):
        raise ConfigParseError(f"Invalid input for {name}: {value!r} is not finite")
    return v


def load_config(path: str | Path) -> RunConfig:
    """Load a :class:`RunConfig` from a JSON object file."""
    p = Path(path)
    try:
        data = json.loads(p.read_text())
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Malformed config {p}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigParseError(f"Config {p} must contain a JSON object")
    return RunConfig.from_mapping(data)


__all__ = ["RunConfig", "parse_number", "load_config"]
