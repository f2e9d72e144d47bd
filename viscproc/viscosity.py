from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping

from .errors import ConfigParseError, KeyNotFoundError

NOT_FOUND = -1.0

# thermal conductivity -> viscosity; explicit entries, not a formula
SEED_TABLE: Dict[float, float] = {
    0.1: 1.0, 0.2: 1.1, 0.3: 1.2, 0.4: 1.3,
    0.5: 1.4, 0.6: 1.5, 0.7: 1.6, 0.8: 1.7,
    0.9: 1.8, 1.0: 1.9,
}


class ViscosityTable:
    """Immutable exact-key map from thermal conductivity to viscosity.

    Keys must match bit-for-bit; there is no tolerance and no interpolation
    between entries.  :meth:`lookup` raises on a miss, :meth:`try_lookup`
    returns :data:`NOT_FOUND` instead.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[float, float]):
        table = {float(k): float(v) for k, v in entries.items()}
        if NOT_FOUND in table.values():
            raise ValueError(f"{NOT_FOUND} is reserved as the not-found sentinel")
        self._entries = MappingProxyType(table)

    @property
    def entries(self) -> Mapping[float, float]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def lookup(self, thermal_conductivity: float) -> float:
        try:
            return self._entries[float(thermal_conductivity)]
        except KeyError:
            raise KeyNotFoundError(
                f"Invalid thermal conductivity value: {thermal_conductivity!r}"
            ) from None

    def try_lookup(self, thermal_conductivity: float) -> float:
        return self._entries.get(float(thermal_conductivity), NOT_FOUND)


DEFAULT_TABLE = ViscosityTable(SEED_TABLE)


def lookup_viscosity(thermal_conductivity: float, table: ViscosityTable = DEFAULT_TABLE) -> float:
    """Fail-fast lookup against ``table`` (seed data by default)."""
    return table.lookup(thermal_conductivity)


def get_viscosity(thermal_conductivity: float, table: ViscosityTable = DEFAULT_TABLE) -> float:
    """Fail-soft lookup; returns ``-1.0`` when no exact entry exists."""
    return table.try_lookup(thermal_conductivity)


def load_viscosity_table(path: str | Path) -> ViscosityTable:
    """Build a table from a JSON object ``{"<k>": <viscosity>, ...}``.

    Intended to be called once at startup; the returned table is never
    mutated afterwards.
    """
    p = Path(path)
    try:
        data = json.loads(p.read_text())
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Malformed viscosity table {p}: {e}") from e
    if not isinstance(data, dict) or not data:
        raise ConfigParseError(f"Viscosity table {p} must be a non-empty JSON object")
    try:
        entries = {float(k): float(v) for k, v in data.items()}
    except (TypeError, ValueError) as e:
        raise ConfigParseError(f"Non-numeric entry in viscosity table {p}: {e}") from e
    try:
        return ViscosityTable(entries)
    except ValueError as e:
        raise ConfigParseError(str(e)) from e


__all__ = [
    "NOT_FOUND", "SEED_TABLE", "ViscosityTable", "DEFAULT_TABLE",
    "lookup_viscosity", "get_viscosity", "load_viscosity_table",
]
