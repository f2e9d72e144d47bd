import io
from pathlib import Path

import pandas as pd
import pytest

from viscproc.io import load_samples_csv, parse_samples, read_samples


def test_parse_samples_whitespace_separated():
    assert parse_samples("1 2.5\t-3e1  4\n") == [1.0, 2.5, -30.0, 4.0]


def test_parse_samples_first_line_only():
    assert parse_samples("\n  \n1 2\n3 4\n") == [1.0, 2.0]


def test_parse_samples_stops_at_bad_token(caplog):
    with caplog.at_level("WARNING", logger="viscproc.io"):
        out = parse_samples("1 2 x 4")
    assert out == [1.0, 2.0]
    assert "ignored 2 of 4 tokens" in caplog.text


def test_parse_samples_empty():
    assert parse_samples("") == []


def test_read_samples_from_stream_stops_at_newline():
    stream = io.StringIO("1 2 3\n4 5 6\n")
    assert read_samples(stream) == [1.0, 2.0, 3.0]
    assert stream.readline() == "4 5 6\n"


def test_read_samples_from_path(tmp_path: Path):
    f = tmp_path / "batch.txt"
    f.write_text("9 8 7 6\n")
    assert read_samples(f) == [9.0, 8.0, 7.0, 6.0]


def test_load_samples_csv(tmp_path: Path):
    f = tmp_path / "log.csv"
    pd.DataFrame({"value": [1.0, 2.5, -3.0]}).to_csv(f, index=False)
    assert load_samples_csv(f, "value") == [1.0, 2.5, -3.0]


def test_load_samples_csv_stops_at_bad_row(tmp_path: Path, caplog):
    f = tmp_path / "log.csv"
    pd.DataFrame({"value": [1, 2, "bad"] + list(range(4, 11))}).to_csv(f, index=False)
    with caplog.at_level("WARNING", logger="viscproc.io"):
        out = load_samples_csv(f, "value")
    # later rows must not shift into earlier positions
    assert out == [1.0, 2.0]
    assert "ignored 8 of 10 rows" in caplog.text


def test_load_samples_csv_blank_cell_stops(tmp_path: Path):
    f = tmp_path / "log.csv"
    pd.DataFrame({"value": [1.0, None, 3.0]}).to_csv(f, index=False)
    assert load_samples_csv(f, "value") == [1.0]


def test_load_samples_csv_missing_column(tmp_path: Path):
    f = tmp_path / "log.csv"
    pd.DataFrame({"x": [1.0]}).to_csv(f, index=False)
    with pytest.raises(ValueError):
        load_samples_csv(f, "value")


@pytest.mark.parametrize("tok", ["1_000", "١٢", "nan", "inf", "0x10", "1e"])
def test_parse_samples_rejects_non_decimal_tokens(tok):
    assert parse_samples(f"5 {tok} 2") == [5.0]


def test_parse_samples_accepts_decimal_forms():
    assert parse_samples("+1 -.5 2. 3e-1 4E2") == [1.0, -0.5, 2.0, 0.3, 400.0]
