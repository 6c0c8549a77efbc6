"""Tests for the command line entry point."""

import pytest

from statusapi import cli


@pytest.fixture
def fake_run(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    return calls


def test_defaults_come_from_settings(monkeypatch):
    monkeypatch.setenv("API_PORT", "9001")
    args = cli.build_parser().parse_args([])
    assert args.port == 9001
    assert args.reload is False


def test_main_runs_uvicorn(fake_run):
    cli.main(["--host", "127.0.0.1", "--port", "8123", "--log-level", "DEBUG"])
    assert len(fake_run) == 1
    args, kwargs = fake_run[0]
    assert args == ("statusapi.main:app",)
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 8123
    assert kwargs["log_level"] == "debug"
