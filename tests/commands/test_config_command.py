"""Unit tests for the config command group."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tasklist.commands.config_command import app

runner = CliRunner()


@pytest.fixture()
def config_svc(tmp_config):
    with patch("tasklist.commands.config_command.get_config_service", return_value=tmp_config):
        yield tmp_config


def test_show(config_svc):
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0, result.output
    assert '"backend": "sqlite"' in result.output


def test_get(config_svc):
    result = runner.invoke(app, ["get", "storage.write_mode"])
    assert result.exit_code == 0, result.output
    assert "immediate" in result.output


def test_set_and_get(config_svc):
    result = runner.invoke(app, ["set", "storage.backend", "json"])
    assert result.exit_code == 0, result.output
    assert config_svc.get("storage.backend") == "json"


def test_set_invalid_value(config_svc):
    result = runner.invoke(app, ["set", "output.date_format", "roman"])
    assert result.exit_code == 1
    assert "Invalid value for output.date_format" in result.output
    assert config_svc.get("output.date_format") == "long"


@pytest.mark.parametrize("args", [["get", "nope"], ["set", "nope", "1"], ["reset", "nope"]])
def test_unknown_key(config_svc, args):
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert "Unknown config key: nope" in result.output


def test_reset(config_svc):
    config_svc.set("output.color", False)
    result = runner.invoke(app, ["reset", "output.color"])
    assert result.exit_code == 0, result.output
    assert config_svc.get("output.color") is True
