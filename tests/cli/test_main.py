import logging
import pathlib

import pytest
from typer.testing import CliRunner

from inistore.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def config(tmp_path: pathlib.Path) -> pathlib.Path:
    path = tmp_path / "config.ini"
    path.write_text("name = example\n\n[server]\nhost = localhost ; comment\n")
    return path


def test_get(config: pathlib.Path):
    result = runner.invoke(app, ["get", str(config), "server", "host"])

    assert result.exit_code == 0
    assert result.output.strip() == "localhost"


def test_get_top_level(config: pathlib.Path):
    result = runner.invoke(app, ["get", str(config), "", "name"])

    assert result.exit_code == 0
    assert result.output.strip() == "example"


def test_get_default(config: pathlib.Path):
    result = runner.invoke(
        app, ["get", str(config), "server", "port", "--default", "8080"]
    )

    assert result.exit_code == 0
    assert result.output.strip() == "8080"


def test_get_missing_file(tmp_path: pathlib.Path):
    result = runner.invoke(app, ["get", str(tmp_path / "missing.ini"), "s", "k"])

    assert result.exit_code == 1
    assert "could not open config file" in result.output


def test_show(config: pathlib.Path):
    result = runner.invoke(app, ["-v", "show", str(config)])

    assert result.exit_code == 0
    assert "server" in result.output
    assert "localhost" in result.output
    assert "example" in result.output


def test_get_unknown_encoding(config: pathlib.Path):
    result = runner.invoke(
        app, ["get", str(config), "server", "host", "--encoding", "bogus"]
    )

    assert result.exit_code == 2
    assert "unknown encoding" in result.output


def test_get_explicit_encoding(config: pathlib.Path):
    result = runner.invoke(
        app, ["get", str(config), "server", "host", "--encoding", "utf-8"]
    )

    assert result.exit_code == 0
    assert result.output.strip() == "localhost"
