"""Command-line interface for hand category simulations."""

import sys
from typing import Optional

import click

from hand_odds.config import (
    EXECUTORS, LOG_LEVELS, SimulationConfig, config as config_profiles, get_config, log_level as config_log_level,
)
from hand_odds.core.hand import Hand
from hand_odds.evaluation.classifier import classify, matching_categories
from hand_odds.logging_setup import setup_logging
from hand_odds.simulation.aggregator import SimulationError, SimulationResult, run_simulation


def format_report(result: SimulationResult) -> str:
    """Render the merged tally as a table, strongest category first."""
    lines = [
        f"Finished simulation of {result.trials:,} hands in {result.elapsed:.3f}s "
        f"({result.workers} workers)",
        "",
        f"{'Category':<17} {'Count':>13} {'Observed':>10} {'Expected':>10}",
    ]
    for row in result.rows():
        lines.append(
            f"{row.category.display_name:<17} {row.count:>13,} "
            f"{row.percentage:>9.4f}% {row.expected_percentage:>9.4f}%"
        )
    lines.append(f"{'Total':<17} {result.tally.total:>13,} {100:>9.4f}%")
    return "\n".join(lines)


def format_samples(result: SimulationResult) -> str:
    """Render the example hands kept for each category."""
    lines = ["Example hands:"]
    for row in result.rows():
        hands = result.tally.samples.get(row.category, [])
        if not hands:
            continue
        lines.append(f"  {row.category.display_name}:")
        lines.extend(f"    {hand.pretty()}" for hand in hands)
    return "\n".join(lines)


@click.group()
def cli():
    """Estimate how often each poker hand category shows up in seven cards."""
    pass


@cli.command()
@click.option('--trials', '-n', type=click.IntRange(min=1), default=None, help='Hands to deal')
@click.option('--workers', '-w', type=click.IntRange(min=1), default=None,
              help='Parallel workers (default: CPU count)')
@click.option('--chunk-size', type=click.IntRange(min=1), default=None,
              help='Trials handed to a worker at once')
@click.option('--seed', type=int, default=None, help='Seed for a reproducible run')
@click.option('--executor', type=click.Choice(EXECUTORS), default=None, help='Worker pool type')
@click.option('--samples', type=click.IntRange(min=0), default=None,
              help='Example hands to show per category')
@click.option('--progress/--no-progress', default=None, help='Show a progress bar')
@click.option('--config', 'config_name', type=click.Choice(sorted(config_profiles)), default=None,
              help='Configuration to use')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help='Logging verbosity')
def run(trials: Optional[int], workers: Optional[int], chunk_size: Optional[int], seed: Optional[int],
        executor: Optional[str], samples: Optional[int], progress: Optional[bool],
        config_name: Optional[str], log_level: Optional[str]):
    """Deal random hands and report the share of each category."""
    config_cls = get_config(config_name)

    try:
        setup_logging(log_level or config_log_level(config_cls))
        settings = SimulationConfig.from_config(
            config_cls,
            trials=trials,
            workers=workers,
            chunk_size=chunk_size,
            seed=seed,
            executor=executor,
            samples=samples,
            progress=progress,
        )
    except ValueError as e:
        raise click.UsageError(str(e))

    try:
        if settings.progress:
            with click.progressbar(length=settings.trials, label='Dealing hands', file=sys.stderr) as bar:
                result = run_simulation(settings, progress=bar.update)
        else:
            result = run_simulation(settings)
    except SimulationError as e:
        click.echo(f"Simulation failed: {e}", err=True)
        sys.exit(1)

    click.echo(format_report(result))
    if settings.samples:
        click.echo("")
        click.echo(format_samples(result))


@cli.command(name='classify')
@click.argument('cards', nargs=-1, required=True)
@click.option('--all', 'show_all', is_flag=True, help='List every category pattern the hand contains')
def classify_command(cards, show_all):
    """Classify a seven card hand, e.g. 'As Ks Qs Js Ts 2h 3d'."""
    try:
        hand = Hand.from_string(' '.join(cards))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='CARDS')

    if show_all:
        for category in matching_categories(hand):
            click.echo(category.display_name)
    else:
        click.echo(classify(hand).display_name)


def main():
    cli()


if __name__ == '__main__':
    main()
