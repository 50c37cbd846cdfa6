"""
NCAA Football Stats CLI

Command-line interface over the SportsData NCAA football feed.

Usage:
    ncaafb [OPTIONS] COMMAND [ARGS]...

Commands:
    divisions   Team hierarchies per division
    schedule    Season schedules
    boxscores   Boxscores for games of a schedule
"""

import click
import logging
import sys
from dotenv import load_dotenv

from ..config import Config

# Load .env file
load_dotenv()


def setup_logging(verbose: bool):
    """Configure logging to output to stdout."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group()
@click.option('--api-key', default=None, help='Feed API key (default: NCAAFB_API_KEY)')
@click.option('--production', is_flag=True, help='Use the production tier')
@click.option('--trial', is_flag=True, help='Use the trial tier (overrides NCAAFB_PRODUCTION)')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (log endpoints and fetches)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
@click.pass_context
def cli(ctx, api_key, production, trial, verbose, quiet):
    """NCAA Football Stats - Divisions, schedules and boxscores."""
    if quiet:
        logging.basicConfig(level=logging.WARNING, format='%(message)s')
    else:
        setup_logging(verbose)

    if production and trial:
        raise click.UsageError("--production and --trial are mutually exclusive")

    try:
        config = Config.from_env()
    except ValueError as e:
        raise click.UsageError(str(e))
    if api_key:
        config.api.api_key = api_key
    if production or trial:
        config.api.production = production
    config.verbose = config.verbose or verbose

    ctx.ensure_object(dict)
    ctx.obj['config'] = config


from .fetch import divisions, schedule, boxscores

cli.add_command(divisions)
cli.add_command(schedule)
cli.add_command(boxscores)


if __name__ == '__main__':
    cli()
