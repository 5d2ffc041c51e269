"""
Tests for the command line interface.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from workinghours import __version__
from workinghours.cli.app import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "working_window:\n"
        "  start_hour: 9\n"
        "  start_minute: 0\n"
        "  end_hour: 17\n"
        "  end_minute: 30\n"
        "timezone: Europe/Berlin\n",
        encoding="utf-8",
    )
    return config_path


def test_hours_prints_result(config_file):
    result = runner.invoke(
        app, ["hours", "2022-01-14T17:30", "2022-01-17T17:30", "--config", str(config_file)]
    )

    assert result.exit_code == 0
    assert "8.5" in result.output


def test_hours_verbose_shows_window(config_file):
    result = runner.invoke(
        app,
        ["hours", "2022-01-10 09:00", "2022-01-21 17:30", "-c", str(config_file), "--verbose"],
    )

    assert result.exit_code == 0
    assert "09:00 - 17:30" in result.output
    assert "85" in result.output.strip().splitlines()[-1]


def test_hours_reversed_span_fails(config_file):
    result = runner.invoke(
        app, ["hours", "2022-01-21T09:00", "2022-01-20T09:00", "-c", str(config_file)]
    )

    assert result.exit_code == 1
    assert "Error" in result.output


def test_hours_unparsable_timestamp_fails(config_file):
    result = runner.invoke(app, ["hours", "tomorrow-ish", "2022-01-20T09:00", "-c", str(config_file)])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_hours_missing_config_fails(tmp_path):
    result = runner.invoke(
        app, ["hours", "2022-01-20T09:00", "2022-01-20T10:00", "-c", str(tmp_path / "nope.yaml")]
    )

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_window_shows_configured_window(config_file):
    result = runner.invoke(app, ["window", "--config", str(config_file)])

    assert result.exit_code == 0
    assert "09:00" in result.output
    assert "17:30" in result.output
    assert "Europe/Berlin" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
