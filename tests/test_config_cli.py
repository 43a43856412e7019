"""CLI tests for configuration commands."""

import os
from pathlib import Path
from typing import Any

from click.testing import CliRunner

from filescope.cli import cli
from filescope.config import ConfigManager


def _env_with_home(tmp_path: Path) -> dict[str, Any]:
    env = {key: value for key, value in os.environ.items() if not key.startswith("FILESCOPE__")}
    env["HOME"] = str(tmp_path)
    return env


def _config_path(tmp_path: Path) -> Path:
    return tmp_path / ".filescope" / "config.yaml"


def test_config_view_creates_and_displays_config(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    result = runner.invoke(cli, ["config", "view"], env=env)

    assert result.exit_code == 0
    assert "inspection:" in result.output
    assert "chunk_size" in result.output
    assert _config_path(tmp_path).exists()


def test_config_set_updates_value(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    result = runner.invoke(
        cli, ["config", "set", "inspection.chunk_size", "--value", "8192"], env=env
    )

    assert result.exit_code == 0
    assert "8192" in result.output

    manager = ConfigManager(config_path=_config_path(tmp_path), env={})
    config = manager.load(include_env=False)
    assert config.inspection.chunk_size == 8192


def test_config_set_same_value_reports_no_change(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    result = runner.invoke(cli, ["config", "set", "output.show_md5", "--value", "false"], env=env)

    assert result.exit_code == 0
    assert "No changes applied" in result.output


def test_config_set_rejects_invalid_value(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)

    result = runner.invoke(cli, ["config", "set", "inspection.chunk_size", "--value", "0"], env=env)

    assert result.exit_code != 0
    manager = ConfigManager(config_path=_config_path(tmp_path), env={})
    assert manager.load(include_env=False).inspection.chunk_size == 4096


def test_config_view_env_prints_environment_variables(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)
    env["FILESCOPE__OUTPUT__SHOW_MD5"] = "true"

    result = runner.invoke(cli, ["config", "view", "--env"], env=env)

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "FILESCOPE__INSPECTION__CHUNK_SIZE=4096" in lines
    assert "FILESCOPE__OUTPUT__SHOW_MD5=true" in lines
    assert "FILESCOPE__TRAVERSAL__RECURSIVE=false" in lines
    assert "inspection:" not in result.output


def test_config_view_env_round_trips_through_environment(tmp_path: Path) -> None:
    runner = CliRunner()
    env = _env_with_home(tmp_path)
    runner.invoke(cli, ["config", "set", "inspection.fallback_label", "--value", "n/a"], env=env)

    result = runner.invoke(cli, ["config", "view", "--env"], env=env)
    exported = dict(line.split("=", 1) for line in result.output.splitlines())

    manager = ConfigManager(config_path=tmp_path / "missing.yaml", env=exported)
    assert manager.load(ensure_file=False).inspection.fallback_label == "n/a"
