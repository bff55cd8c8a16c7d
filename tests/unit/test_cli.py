"""Tests for the command line interface."""
import logging

import pytest
from click.testing import CliRunner

from hand_odds import cli as cli_module
from hand_odds import config as config_module
from hand_odds.cli import cli
from hand_odds.evaluation.categories import Category
from hand_odds.logging_setup import setup_logging
from hand_odds.simulation.aggregator import WorkerError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging():
    """The run command reconfigures the root logger; put it back afterwards."""
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


RUN_ARGS = ['run', '--config', 'testing', '--log-level', 'ERROR', '--no-progress']


def test_run_prints_every_category(runner):
    result = runner.invoke(cli, RUN_ARGS + ['--trials', '300'])

    assert result.exit_code == 0, result.output
    assert "Finished simulation of 300 hands" in result.output
    for category in Category:
        assert category.display_name in result.output
    assert "Total" in result.output


def test_run_with_samples(runner):
    result = runner.invoke(cli, RUN_ARGS + ['--trials', '200', '--samples', '1'])

    assert result.exit_code == 0, result.output
    assert "Example hands:" in result.output


def test_run_with_progress_bar(runner):
    result = runner.invoke(cli, ['run', '--config', 'testing', '--log-level', 'ERROR',
                                 '--trials', '100', '--progress'])
    assert result.exit_code == 0, result.output


def test_run_is_reproducible_with_seed(runner):
    args = RUN_ARGS + ['--trials', '300', '--seed', '5']
    first = runner.invoke(cli, args).output.splitlines()[2:]
    second = runner.invoke(cli, args).output.splitlines()[2:]
    assert first == second


@pytest.mark.parametrize("args", [
    ['--trials', '0'],
    ['--workers', '0'],
    ['--executor', 'gpu'],
    ['--samples', '-1'],
])
def test_run_rejects_bad_options(runner, args):
    result = runner.invoke(cli, RUN_ARGS + args)
    assert result.exit_code == 2


def test_bad_environment_value_is_a_usage_error(runner, monkeypatch):
    monkeypatch.setattr(config_module.TestingConfig, "WORKERS", "abc")
    result = runner.invoke(cli, RUN_ARGS)

    assert result.exit_code == 2
    assert "HAND_ODDS_WORKERS" in result.output


def test_bad_environment_log_level_is_a_usage_error(runner, monkeypatch):
    monkeypatch.setattr(config_module.TestingConfig, "LOG_LEVEL", "VERBOSE")
    result = runner.invoke(cli, ["run", "--config", "testing", "--no-progress"])

    assert result.exit_code == 2
    assert "HAND_ODDS_LOG_LEVEL" in result.output


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="VERBOSE"):
        setup_logging("VERBOSE")


def test_worker_failure_exits_non_zero(runner, monkeypatch):
    def failing_run(settings, progress=None):
        raise WorkerError(3, 1, "RuntimeError: boom")

    monkeypatch.setattr(cli_module, 'run_simulation', failing_run)
    result = runner.invoke(cli, RUN_ARGS)

    assert result.exit_code == 1
    assert "Worker 3 failed on chunk 1" in result.output
    assert "%" not in result.output


@pytest.mark.parametrize("cards,expected", [
    (['As', 'Ks', 'Qs', 'Js', 'Ts', '2h', '3d'], "Royal Flush"),
    (['2s2h5d5c9cJsKh'], "Two Pair"),
])
def test_classify_command(runner, cards, expected):
    result = runner.invoke(cli, ['classify'] + cards)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_classify_all_patterns(runner):
    result = runner.invoke(cli, ['classify', '--all', '2s2h2d5d5c9cJs'])
    assert result.output.splitlines() == [
        "Full House", "Three of a Kind", "Two Pair", "Pair", "High Card",
    ]


def test_classify_rejects_bad_hand(runner):
    result = runner.invoke(cli, ['classify', 'As', 'Ks'])
    assert result.exit_code == 2
