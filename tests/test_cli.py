import logging
from pathlib import Path

import pytest

from typer.testing import CliRunner

from unicode_strings.cli import app
from tests.utils import write_binary

runner = CliRunner()


def test_cli_scan_prints_qualifying_runs(tmp_path: Path):
    """scan prints each qualifying run on its own line."""
    path = write_binary(tmp_path / "sample.bin", "AB3", b"\x00\x00\x00", "hello", b"\x00")
    result = runner.invoke(app, ["scan", str(path)])
    assert result.exit_code == 0
    assert result.stdout == "hello\n"


def test_cli_scan_applies_flag_overrides(tmp_path: Path):
    """Category toggles and offsets are taken from the command line."""
    path = write_binary(tmp_path / "sample.bin", "AB3!!!hello!!!CD")
    result = runner.invoke(app, ["scan", "--no-punctuation", "-o", str(path)])
    assert result.exit_code == 0
    assert result.stdout == "12: hello\n"


def test_cli_scan_concatenates_files_in_order(tmp_path: Path):
    """Output for several files is concatenated without separators."""
    first = write_binary(tmp_path / "a.bin", "alpha1", b"\x00")
    second = write_binary(tmp_path / "b.bin", b"\xff", "bravo2", b"\x00")
    result = runner.invoke(app, ["scan", str(second), str(first)])
    assert result.exit_code == 0
    assert result.stdout == "bravo2\nalpha1\n"


def test_cli_scan_stops_at_first_unopenable_file(tmp_path: Path):
    """A file that cannot be opened aborts the run before later files."""
    first = write_binary(tmp_path / "a.bin", "alpha1", b"\x00")
    missing = tmp_path / "missing.bin"
    third = write_binary(tmp_path / "c.bin", "charlie", b"\x00")
    result = runner.invoke(app, ["scan", str(first), str(missing), str(third)])
    assert result.exit_code == 1
    assert "alpha1\n" in result.stdout
    assert "charlie" not in result.stdout


def test_cli_scan_without_files_reports_usage():
    """scan with no paths prints usage and fails."""
    result = runner.invoke(app, ["scan"])
    assert result.exit_code == 1
    assert "Usage" in result.stdout


def test_cli_scan_reads_config_file(tmp_path: Path):
    """Values from the YAML config apply unless overridden by flags."""
    config_path = tmp_path / "scan.yaml"
    config_path.write_text("min_length: 3\nemit_offsets: true\n", encoding="utf-8")
    path = write_binary(tmp_path / "sample.bin", "AB3", b"\x00", "hello", b"\x00")
    result = runner.invoke(app, ["scan", "--config", str(config_path), str(path)])
    assert result.exit_code == 0
    assert result.stdout == "4: AB3\n10: hello\n"

    result = runner.invoke(
        app, ["scan", "-c", str(config_path), "--no-offsets", "-l", "4", str(path)]
    )
    assert result.exit_code == 0
    assert result.stdout == "hello\n"


def test_cli_scan_rejects_invalid_config(tmp_path: Path):
    """A config file with an invalid minimum length is a usage error."""
    config_path = tmp_path / "scan.yaml"
    config_path.write_text("min_length: 0\n", encoding="utf-8")
    path = write_binary(tmp_path / "sample.bin", "hello", b"\x00")
    result = runner.invoke(app, ["scan", "-c", str(config_path), str(path)])
    assert result.exit_code == 2


def test_cli_scan_flush_trailing(tmp_path: Path):
    """--flush-trailing prints a run that reaches the end of the file."""
    path = write_binary(tmp_path / "sample.bin", b"\x00", "trailing")
    result = runner.invoke(app, ["scan", str(path)])
    assert result.stdout == ""
    result = runner.invoke(app, ["scan", "--flush-trailing", str(path)])
    assert result.exit_code == 0
    assert result.stdout == "trailing\n"


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "min_length: 5" in result.stdout


def test_cli_scan_rejects_unknown_log_level(tmp_path: Path):
    """An unknown --log-level is a usage error, not a crash."""
    path = write_binary(tmp_path / "sample.bin", "hello", b"\x00")
    result = runner.invoke(app, ["scan", "--log-level", "nope", str(path)])
    assert result.exit_code == 2


def test_cli_scan_accepts_lowercase_log_level(tmp_path: Path):
    """Log level names are case-insensitive."""
    path = write_binary(tmp_path / "sample.bin", "hello", b"\x00")
    result = runner.invoke(app, ["scan", "--log-level", "debug", str(path)])
    assert result.exit_code == 0
    assert "hello\n" in result.stdout


def test_cli_scan_skips_directories(tmp_path: Path):
    """A directory argument yields no output and later files are still scanned."""
    folder = tmp_path / "folder"
    folder.mkdir()
    last = write_binary(tmp_path / "c.bin", "charlie", b"\x00")
    result = runner.invoke(app, ["scan", str(folder), str(last)])
    assert result.exit_code == 0
    assert "charlie\n" in result.stdout


def test_cli_scan_warns_when_all_categories_disabled(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
):
    """Disabling every category prints nothing and logs a warning."""
    path = write_binary(tmp_path / "sample.bin", "\x00hello world\x00")
    with caplog.at_level(logging.WARNING, logger="unicode_strings.cli"):
        result = runner.invoke(
            app,
            [
                "scan",
                "--no-letters",
                "--no-numbers",
                "--no-space",
                "--no-punctuation",
                str(path),
            ],
        )
    assert result.exit_code == 0
    assert "hello" not in result.stdout
    assert "All character categories are disabled" in caplog.text
