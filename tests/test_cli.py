"""
Tests for the command line interface
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from click.testing import CliRunner

from taskboard.cli import cli
from taskboard.config import Settings


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch("taskboard.cli.configure_logging"):
        yield


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "taskboard" in result.output


def test_init_db_creates_indexes(store):
    client = MagicMock()
    with (
        patch("taskboard.database.connection.create_client", return_value=client),
        patch("taskboard.database.connection.create_store", return_value=store),
        patch("taskboard.database.connection.close_client", new=AsyncMock()) as close,
    ):
        result = CliRunner().invoke(cli, ["init-db"])

    assert result.exit_code == 0, result.output
    assert store.index_calls == 1
    close.assert_awaited_once_with(client)


def test_check_json_fails_without_secret(store):
    with (
        patch("taskboard.database.connection.create_client", return_value=MagicMock()),
        patch("taskboard.database.connection.create_store", return_value=store),
        patch("taskboard.database.connection.close_client", new=AsyncMock()),
        patch("taskboard.validation.settings", Settings(jwt_secret=None)),
    ):
        result = CliRunner().invoke(cli, ["check", "--output-format", "json"])

    assert result.exit_code == 1
    assert '"overall_valid": false' in result.output
