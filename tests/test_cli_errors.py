from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from datewise.cli import app


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--in", str(missing)])
    assert result.exit_code == 3
    assert str(missing) in result.stderr


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--config", str(bad_cfg), "2023-12-25"])
    assert result.exit_code == 4


def test_missing_config(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--config", str(tmp_path / "nope.yml"), "2023-12-25"])
    assert result.exit_code == 4


def test_unknown_locale(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("locale: xx\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["format-month", "--config", str(cfg), "0", "Mf Y"])
    assert result.exit_code == 4
    assert "xx" in result.stderr


def test_unparseable_value() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "2023-02-29"])
    assert result.exit_code == 5
    assert 'Unable to parse date string: "2023-02-29"' in result.stderr


def test_partial_failure_still_prints_good_values() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "2023-12-25", "Decembor 25, 2023"])
    assert result.exit_code == 5
    assert "2023-12-25\tY-M2-D2\t2023-12-25\tdays=19716" in result.stdout
    assert "Decembor" in result.stderr


def test_no_values() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["parse"])
    assert result.exit_code == 2


def test_invalid_format_string() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["format", "2023-12-25", "YMD"])
    assert result.exit_code == 5
    assert "no recognized separator" in result.stderr


def test_invalid_iso_date() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["format", "25/12/2023", "Y-M2-D2"])
    assert result.exit_code == 5


def test_format_day_requires_day_tag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["format-day", "0", "Y-M2"])
    assert result.exit_code == 5
    assert "must contain day component" in result.stderr


def test_format_month_rejects_day_tag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["format-month", "0", "Y-M2-D2"])
    assert result.exit_code == 5
    assert 'day component "D2" not allowed' in result.stderr


def test_undecodable_input_file(tmp_path: Path) -> None:
    in_path = tmp_path / "dates.txt"
    in_path.write_bytes(b"2023-12-25\n\xff\xfe\xfa\n")
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--in", str(in_path)])
    assert result.exit_code == 3
    assert str(in_path) in result.stderr


def test_config_not_a_mapping(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "list.yml"
    bad_cfg.write_text("- a\n- b\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--config", str(bad_cfg), "2023-12-25"])
    assert result.exit_code == 4
    assert "mapping" in result.stderr


def test_undecodable_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "latin.yml"
    bad_cfg.write_bytes(b"locale: \xff\xfe\n")
    runner = CliRunner()
    result = runner.invoke(app, ["format-day", "--config", str(bad_cfg), "0", "Y-M2-D2"])
    assert result.exit_code == 4
