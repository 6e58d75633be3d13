import pandas as pd
from typer.testing import CliRunner

from fars.cli import app

runner = CliRunner()


def _text(result) -> str:
    return " ".join(result.output.split())


def test_summarize(data_dir, tmp_path):
    out_csv = tmp_path / "out" / "summary.csv"
    report = tmp_path / "out" / "summary.txt"

    result = runner.invoke(app, [
        "summarize", "2013", "2014",
        "--data-dir", str(data_dir),
        "--output", str(out_csv),
        "--report", str(report),
    ])

    assert result.exit_code == 0, result.output
    assert "Accidents per Month" in _text(result)
    assert "Summary complete" in _text(result)
    saved = pd.read_csv(out_csv)
    assert list(saved.columns) == ["MONTH", "2013", "2014"]
    assert saved["2013"].tolist() == [40, 35]
    assert report.exists()


def test_summarize_with_bad_year(data_dir):
    result = runner.invoke(app, ["summarize", "2013", "2099", "-d", str(data_dir)])

    assert result.exit_code == 0, result.output
    assert "invalid year: 2099" in _text(result)
    assert "1 year(s) could not be loaded" in _text(result)


def test_summarize_nothing_loaded(tmp_path):
    result = runner.invoke(app, ["summarize", "2099", "-d", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "No accident data loaded" in _text(result)


def test_map(map_dir, tmp_path):
    png = tmp_path / "vt.png"
    result = runner.invoke(app, ["map", "50", "2015", "-d", str(map_dir), "-o", str(png)])

    assert result.exit_code == 0, result.output
    assert png.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_map_numeric_string_state(map_dir, tmp_path):
    png = tmp_path / "vt.png"
    result = runner.invoke(app, ["map", "50.0", "2015", "-d", str(map_dir), "-o", str(png)])

    assert result.exit_code == 0, result.output
    assert png.exists()


def test_map_invalid_state(map_dir):
    result = runner.invoke(app, ["map", "99", "2015", "-d", str(map_dir)])

    assert result.exit_code == 1
    assert "invalid STATE number: 99" in _text(result)


def test_map_missing_year(map_dir):
    result = runner.invoke(app, ["map", "50", "1999", "-d", str(map_dir)])

    assert result.exit_code == 1
    assert "does not exist" in _text(result)


def test_map_nothing_to_plot(map_dir, tmp_path):
    png = tmp_path / "mt.png"
    result = runner.invoke(app, ["map", "30", "2015", "-d", str(map_dir), "-o", str(png)])

    assert result.exit_code == 0, result.output
    assert "no accidents to plot" in _text(result)
    assert not png.exists()


def test_years(data_dir):
    result = runner.invoke(app, ["years", "-d", str(data_dir)])

    assert result.exit_code == 0, result.output
    assert "accident_2013.csv.bz2" in _text(result)
    assert "accident_2014.csv.bz2" in _text(result)
