"""CLI tests for the list and triage commands."""

from __future__ import annotations

import json
import os
from pathlib import Path

from click.testing import CliRunner

import filetriage
from filetriage.cli import cli


def _env_with_home(tmp_path: Path) -> dict[str, str]:
    """Return environment variables pointing HOME to a temp directory.

    Args:
        tmp_path: Temporary directory provided by pytest.

    Returns:
        dict[str, str]: Environment mapping with HOME set.
    """
    env = dict(os.environ)
    env["HOME"] = str(tmp_path / "home")
    return env


def _populate(root: Path) -> Path:
    root.mkdir()
    (root / "a.txt").write_text("12345", encoding="utf-8")
    (root / "b.png").write_bytes(b"0123456789")
    (root / ".hidden.txt").write_text("secret", encoding="utf-8")
    os.utime(root / "a.txt", (1_000, 1_000))
    os.utime(root / "b.png", (2_000, 2_000))
    return root


def test_cli_help_displays_commands() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "keep or trash" in result.output
    for command in ("list", "triage", "config"):
        assert command in result.output


def test_list_json_uses_discovery_order(tmp_path: Path) -> None:
    root = _populate(tmp_path / "data")
    runner = CliRunner()

    result = runner.invoke(
        cli, ["list", str(root), "--sort", "size", "--reverse", "--json"], env=_env_with_home(tmp_path)
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [item["name"] for item in payload] == ["b.png", "a.txt"]
    assert payload[0]["category"] == "image"
    assert payload[1]["size"] == 5


def test_list_table_honours_hidden_flag(tmp_path: Path) -> None:
    root = _populate(tmp_path / "data")
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    default = runner.invoke(cli, ["list", str(root)], env=env)
    shown = runner.invoke(cli, ["list", str(root), "--hidden"], env=env)

    assert default.exit_code == 0
    assert "a.txt" in default.output
    assert ".hidden.txt" not in default.output
    assert ".hidden.txt" in shown.output


def test_list_missing_directory_fails(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["list", str(tmp_path / "missing")], env=_env_with_home(tmp_path))

    assert result.exit_code != 0
    assert "Unable to read directory" in result.output


def test_triage_records_decisions_until_last_file(tmp_path: Path) -> None:
    root = _populate(tmp_path / "data")
    runner = CliRunner()

    result = runner.invoke(cli, ["triage", str(root)], input="kt", env=_env_with_home(tmp_path))

    assert result.exit_code == 0, result.output
    assert "Reached the last file." in result.output
    assert "kept=1" in result.output
    assert "trashed=1" in result.output
    assert "Marked for trash" in result.output
    assert (root / "b.png").exists()


def test_triage_undo_returns_to_undone_file(tmp_path: Path) -> None:
    root = _populate(tmp_path / "data")
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["triage", str(root), "--json"],
        input="kut",
        env=_env_with_home(tmp_path),
    )

    assert result.exit_code == 0, result.output
    assert "Undid keep on file 1." in result.output
    payload = json.loads(result.output[result.output.rindex("{\n") :])
    assert payload["kept"] == []
    assert payload["trashed"] == [str(root / "a.txt")]
    assert payload["undecided"] == [str(root / "b.png")]


def test_triage_quit_asks_for_confirmation(tmp_path: Path) -> None:
    root = _populate(tmp_path / "data")
    runner = CliRunner()

    result = runner.invoke(cli, ["triage", str(root)], input="qy\n", env=_env_with_home(tmp_path))

    assert result.exit_code == 0, result.output
    assert "Quit anyway?" in result.output
    assert "undecided=2" in result.output


def test_triage_empty_directory(tmp_path: Path) -> None:
    root = tmp_path / "empty"
    root.mkdir()
    runner = CliRunner()

    result = runner.invoke(cli, ["triage", str(root)], env=_env_with_home(tmp_path))

    assert result.exit_code == 0
    assert "No files to triage." in result.output
    assert "files=0" in result.output


def test_version_matches_distribution_metadata() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert filetriage.__version__ in result.output


def test_list_reports_invalid_logging_level(tmp_path: Path) -> None:
    root = _populate(tmp_path / "data")
    env = _env_with_home(tmp_path)
    env["FILETRIAGE__LOGGING__LEVEL"] = "verbose"
    runner = CliRunner()

    result = runner.invoke(cli, ["list", str(root)], env=env)

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid configuration values" in result.output
