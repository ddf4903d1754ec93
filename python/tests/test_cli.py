"""Command-line tests for option parsing and frontend dispatch."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from picture_puzzle import cli

runner = CliRunner()


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[tuple]:
    calls: list[tuple] = []
    monkeypatch.setattr(cli, "_configure_logging", lambda verbose: None)
    monkeypatch.setattr(cli, "_default_image", lambda: None)
    monkeypatch.setattr(cli, "_launch", lambda *args: calls.append(args))
    return calls


def test_frontend_receives_options(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, ["-f", "rich", "-s", "3", "--seed", "7"])
    assert result.exit_code == 0, result.output
    assert launched == [(cli.Frontend.rich, 3, 7, None)]


def test_defaults(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, ["--frontend", "pygame"])
    assert result.exit_code == 0, result.output
    assert launched == [(cli.Frontend.pygame, 4, None, None)]


@pytest.mark.parametrize("size", ["1", "9"])
def test_size_out_of_range_is_rejected(launched: list[tuple], size: str) -> None:
    result = runner.invoke(cli.app, ["-f", "rich", "-s", size])
    assert result.exit_code == 2
    assert launched == []


def test_unknown_frontend_is_rejected(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, ["-f", "pyqt"])
    assert result.exit_code == 2
    assert launched == []


def test_menu_quit(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, [], input="0\n")
    assert result.exit_code == 0, result.output
    assert "Goodbye" in result.output
    assert launched == []


def test_menu_launches_rich(launched: list[tuple]) -> None:
    result = runner.invoke(cli.app, ["-s", "3"], input="1\n0\n")
    assert result.exit_code == 0, result.output
    assert launched == [(cli.Frontend.rich, 3, None, None)]
