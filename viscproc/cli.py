from __future__ import annotations
import argparse, json, logging, sys
from pathlib import Path
from .config import RunConfig, load_config, parse_number
from .errors import ConfigParseError, ViscprocError
from .io import load_samples_csv, read_samples
from .pipeline import run_pipeline, write_outputs
from .viscosity import DEFAULT_TABLE, NOT_FOUND, load_viscosity_table

logger = logging.getLogger(__name__)


def build_parser():
    p = argparse.ArgumentParser(prog="viscproc", description="Sensor conditioning, decay reduction & viscosity lookup")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("run", help="Condition → Shape → Reduce → Average one sample batch")
    src = r.add_mutually_exclusive_group()
    src.add_argument("--samples", type=Path, default=None,
                     help="Text file; first non-blank line holds whitespace-separated samples (default: stdin)")
    src.add_argument("--csv", type=Path, default=None, help="Logger CSV; use with --col")
    r.add_argument("--col", default=None, help="Sample column in --csv (default: value)")
    r.add_argument("--config", type=Path, default=None, help="JSON file with gain/offset/decay_factor")
    # kept as text; parse_number reports bad values as ConfigParseError
    r.add_argument("--gain", default=None, help="Conditioning gain (default 1.0)")
    r.add_argument("--offset", default=None, help="Conditioning offset (default 0.0)")
    r.add_argument("--decay-factor", default=None, help="Row decay factor (default 0.1)")
    r.add_argument("--json-out", type=Path, default=None, help="Optional path to write results as JSON")
    r.add_argument("--csv-out", type=Path, default=None, help="Optional path to write per-column values as CSV")

    lk = sub.add_parser("lookup", help="Thermal conductivity → viscosity (exact key)")
    lk.add_argument("key", help="Thermal conductivity value")
    lk.add_argument("--soft", action="store_true", help="Return -1.0 on a miss instead of failing")
    lk.add_argument("--table", type=Path, default=None, help="JSON table replacing the built-in seed data")
    return p


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING if verbosity <= 0 else (logging.INFO if verbosity == 1 else logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _resolve_config(a) -> RunConfig:
    cfg = load_config(a.config) if a.config else RunConfig()
    return cfg.override(
        gain=parse_number(a.gain, "gain", cfg.gain) if a.gain is not None else None,
        offset=parse_number(a.offset, "offset", cfg.offset) if a.offset is not None else None,
        decay_factor=(parse_number(a.decay_factor, "decay factor", cfg.decay_factor)
                      if a.decay_factor is not None else None),
    )


def _cmd_run(a) -> dict:
    cfg = _resolve_config(a)
    if a.csv:
        raw = load_samples_csv(a.csv, a.col or "value")
    elif a.samples:
        raw = read_samples(a.samples)
    else:
        raw = read_samples(sys.stdin)
    res = run_pipeline(raw, cfg)
    out = res.to_dict()
    written = write_outputs(res, json_out=a.json_out, csv_out=a.csv_out)
    if written:
        out["outputs"] = written
    return out


def _cmd_lookup(a) -> dict:
    table = load_viscosity_table(a.table) if a.table else DEFAULT_TABLE
    if not a.key.strip():
        raise ConfigParseError("Invalid input for thermal conductivity: blank key")
    key = parse_number(a.key, "thermal conductivity", NOT_FOUND)
    v = table.try_lookup(key) if a.soft else table.lookup(key)
    return {"thermal_conductivity": key, "viscosity": v}


def main(argv=None):
    ap = build_parser()
    a = ap.parse_args(argv)
    if a.cmd == "run" and a.col is not None and a.csv is None:
        ap.error("--col requires --csv")
    _configure_logging(a.verbose)
    try:
        if a.cmd == "run":
            res = _cmd_run(a)
        else:
            res = _cmd_lookup(a)
    except (ViscprocError, ValueError, OSError) as e:
        logger.error("%s failed: %s", a.cmd, e)
        raise SystemExit(f"viscproc {a.cmd}: {e}")
    print(json.dumps(res, indent=2))
    return 0


if __name__ == "__main__":
    main()
