"""Tests for the click entry point."""

from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from modal_input_tui import __version__
from modal_input_tui.cli import main
from modal_input_tui.config import CONFIG_ENV_VAR, Settings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_run(monkeypatch):
    """Replace the TUI runner so no terminal session is started."""
    run = MagicMock()
    monkeypatch.setattr("modal_input_tui.app.run", run)
    return run


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point the default settings path at an empty directory."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "settings.yaml"))


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_no_subcommand_runs_app(runner, mock_run):
    result = runner.invoke(main, [])
    assert result.exit_code == 0
    mock_run.assert_called_once_with(Settings())


def test_run_with_config(runner, mock_run, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("status_hint: custom\n")

    result = runner.invoke(main, ["run", "--config", str(path)])

    assert result.exit_code == 0
    (settings,), _ = mock_run.call_args
    assert settings.status_hint == "custom"


def test_run_with_bad_config(runner, mock_run, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("palette:\n  bg: not-a-colour\n")

    result = runner.invoke(main, ["run", "--config", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output
    mock_run.assert_not_called()


def test_terminal_failure_is_reported(runner, mock_run):
    mock_run.side_effect = OSError("not a terminal")

    result = runner.invoke(main, ["run"])

    assert result.exit_code == 0
    assert "Error: not a terminal" in result.output


def test_config_shows_settings(runner, tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("palette:\n  bar_bg: red\n")

    result = runner.invoke(main, ["config", "--config", str(path)])

    assert result.exit_code == 0
    assert str(path) in result.output
    assert "bar_bg: red" in result.output
    assert "fg: white" in result.output


def test_config_defaults(runner):
    result = runner.invoke(main, ["config"])
    assert result.exit_code == 0
    assert "bar_bg: blue" in result.output
