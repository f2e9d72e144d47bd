"""Exception taxonomy shared by the pipeline, lookup and config layers."""

from __future__ import annotations


class ViscprocError(Exception):
    """Base class for all errors raised by :mod:`viscproc`."""


class PipelineError(ViscprocError, ValueError):
    """A core stage received input it cannot process."""


class EmptyInputError(PipelineError):
    """No samples were supplied to the matrix shaper."""


class InsufficientDataError(PipelineError):
    """The computed grid dimension floored to zero."""


class EmptyMatrixError(PipelineError, ZeroDivisionError):
    """A zero-dimension grid (or empty column set) reached reduction."""


class KeyNotFoundError(ViscprocError, KeyError):
    """Exact-match viscosity lookup failed."""

    def __str__(self) -> str:
        # KeyError repr-quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class ConfigParseError(ViscprocError, ValueError):
    """A configuration value could not be interpreted as a number."""


__all__ = [
    "ViscprocError",
    "PipelineError",
    "EmptyInputError",
    "InsufficientDataError",
    "EmptyMatrixError",
    "KeyNotFoundError",
    "ConfigParseError",
]
