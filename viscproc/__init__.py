"""
viscproc - sensor conditioning, decay-weighted reduction & viscosity lookup.
"""

__version__ = "0.1.0"

from .errors import (
    ViscprocError,
    PipelineError,
    EmptyInputError,
    InsufficientDataError,
    EmptyMatrixError,
    KeyNotFoundError,
    ConfigParseError,
)
from .conditioning import ConditioningParams, condition
from .shaping import SampleGrid, shape
from .reduction import DecayConfig, decay_weights, reduce_columns, average
from .viscosity import (
    NOT_FOUND,
    ViscosityTable,
    DEFAULT_TABLE,
    lookup_viscosity,
    get_viscosity,
    load_viscosity_table,
)
from .config import RunConfig, parse_number, load_config
from .io import parse_samples, read_samples, load_samples_csv
from .pipeline import PipelineResult, run_pipeline, write_outputs

__all__ = [
    "__version__",
    "ViscprocError", "PipelineError", "EmptyInputError", "InsufficientDataError",
    "EmptyMatrixError", "KeyNotFoundError", "ConfigParseError",
    "ConditioningParams", "condition",
    "SampleGrid", "shape",
    "DecayConfig", "decay_weights", "reduce_columns", "average",
    "NOT_FOUND", "ViscosityTable", "DEFAULT_TABLE",
    "lookup_viscosity", "get_viscosity", "load_viscosity_table",
    "RunConfig", "parse_number", "load_config",
    "parse_samples", "read_samples", "load_samples_csv",
    "PipelineResult", "run_pipeline", "write_outputs",
]
