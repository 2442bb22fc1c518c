"""Tests for CLI interface."""

import pytest
from click.testing import CliRunner
from progress_relay.cli import cli


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep PROGRESS_RELAY_* variables from the host out of CLI runs."""
    for name in ("STYLE", "REFRESH", "TRANSIENT", "LOG_LEVEL", "BAR_TEMPLATE"):
        monkeypatch.delenv(f"PROGRESS_RELAY_{name}", raising=False)


def test_cli_help(runner):
    """Test CLI help message."""
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'progress-relay' in result.output


def test_cli_version(runner):
    """Test CLI version command."""
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert '0.1.0' in result.output


def test_demo_help(runner):
    """Test demo command help."""
    result = runner.invoke(cli, ['demo', '--help'])
    assert result.exit_code == 0
    assert 'Simulate' in result.output


def test_styles(runner):
    """Test styles command lists both templates."""
    result = runner.invoke(cli, ['styles'])
    assert result.exit_code == 0
    assert '{pos}/{len}' in result.output
    assert '{bytes}/{total_bytes}' in result.output


def test_demo_quiet(runner):
    """Test demo runs every step without drawing a bar."""
    result = runner.invoke(cli, ['demo', '--quiet', '--steps', '4', '--workers', '2', '--delay', '0'])
    assert result.exit_code == 0
    assert 'Running 4 step(s) on 2 worker(s)' in result.output
    for step in range(1, 5):
        assert f'Step {step} done' in result.output


def test_demo_with_bar(runner):
    """Test demo with the rich renderer."""
    result = runner.invoke(cli, ['demo', '--steps', '3', '--delay', '0', '--style', 'bytes', '--total', '3000'])
    assert result.exit_code == 0
    assert 'Step 3 done' in result.output


def test_demo_invalid_template(runner, monkeypatch):
    """Test an invalid bar template aborts the demo."""
    monkeypatch.setenv('PROGRESS_RELAY_BAR_TEMPLATE', '{bogus}')
    result = runner.invoke(cli, ['demo', '--steps', '2', '--delay', '0'])
    assert result.exit_code == 1


def test_invalid_env_style(runner, monkeypatch):
    """Test an invalid style variable is a usage error."""
    monkeypatch.setenv('PROGRESS_RELAY_STYLE', 'percent')
    result = runner.invoke(cli, ['styles'])
    assert result.exit_code == 2


def test_invalid_env_log_level(runner, monkeypatch):
    """Test an unknown log level variable is a usage error."""
    monkeypatch.setenv('PROGRESS_RELAY_LOG_LEVEL', 'chatty')
    result = runner.invoke(cli, ['styles'])
    assert result.exit_code == 2
