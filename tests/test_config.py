import json
from pathlib import Path

import pytest

from viscproc.config import RunConfig, load_config, parse_number
from viscproc.errors import ConfigParseError


def test_defaults():
    cfg = RunConfig()
    assert (cfg.gain, cfg.offset, cfg.decay_factor) == (1.0, 0.0, 0.1)
    assert cfg.conditioning.gain == 1.0
    assert cfg.decay.decay_factor == 0.1


@pytest.mark.parametrize("text", ["", "   ", None])
def test_parse_number_blank_keeps_default(text):
    assert parse_number(text, "gain", 2.5) == 2.5


def test_parse_number_parses():
    assert parse_number(" -0.25 ", "offset", 0.0) == -0.25
    assert parse_number(3, "gain", 1.0) == 3.0


@pytest.mark.parametrize("bad", ["abc", "1.2.3", "nan", "inf", True])
def test_parse_number_rejects(bad):
    with pytest.raises(ConfigParseError):
        parse_number(bad, "decay factor", 0.1)


def test_from_mapping_partial():
    cfg = RunConfig.from_mapping({"gain": "2"})
    assert cfg == RunConfig(gain=2.0, offset=0.0, decay_factor=0.1)


def test_from_mapping_unknown_field():
    with pytest.raises(ConfigParseError):
        RunConfig.from_mapping({"gian": 2.0})


def test_override_skips_none():
    cfg = RunConfig(gain=3.0).override(gain=None, offset=1.5)
    assert cfg == RunConfig(gain=3.0, offset=1.5)


def test_load_config(tmp_path: Path):
    f = tmp_path / "cfg.json"
    f.write_text(json.dumps({"decay_factor": 0.0, "offset": 1}))
    assert load_config(f) == RunConfig(offset=1.0, decay_factor=0.0)


def test_load_config_malformed(tmp_path: Path):
    f = tmp_path / "cfg.json"
    f.write_text("{gain: 2")
    with pytest.raises(ConfigParseError):
        load_config(f)
