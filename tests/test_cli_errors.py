from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from multitok.cli import app


def test_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(missing)])
    assert result.exit_code == 3
    assert str(missing) in result.stderr


def test_unsupported_extension(tmp_path: Path) -> None:
    in_path = tmp_path / "foo.bin"
    in_path.write_text("data", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--in", str(in_path)])
    assert result.exit_code == 3


def test_unsupported_output_format() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--format", "xml"], input="Hi.\n")
    assert result.exit_code == 3


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--config", str(bad_cfg)], input="Hi.\n")
    assert result.exit_code == 4


def test_unsupported_language() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--lang", "fr"], input="Bonjour.\n")
    assert result.exit_code == 4
    assert "fr" in result.stderr


def test_unknown_engine() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--engine", "neural"], input="Hi.\n")
    assert result.exit_code == 4
