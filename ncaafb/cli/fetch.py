"""Feed fetching commands."""

import click
import requests

from ..api import NCAAFBError, SportsDataClient
from ..helpers import boxscores_frame, schedule_games_frame
from ..models.types import SCHEDULE_ALL, Division, ScheduleType

SCHEDULE_TYPE_CHOICES = [t.value for t in ScheduleType] + ['all']


def _client(ctx) -> SportsDataClient:
    """Build the feed client from the group's configuration."""
    if 'client' in ctx.obj:
        return ctx.obj['client']

    config = ctx.obj['config']
    if not config.api.api_key:
        raise click.UsageError("No API key: pass --api-key or set NCAAFB_API_KEY")

    client = SportsDataClient(
        config.api.api_key,
        production=config.api.production,
        verbose=config.verbose,
        timeout=config.api.timeout,
    )
    ctx.obj['client'] = client
    return client


def _header(title: str):
    click.echo("=" * 60)
    click.echo(title)
    click.echo("=" * 60)


@click.command()
@click.option('-d', '--division', 'division_ids', multiple=True,
              type=click.Choice([d.value for d in Division]),
              help='Division to fetch (repeatable, default: all)')
@click.pass_context
def divisions(ctx, division_ids):
    """Fetch team hierarchies for divisions."""
    client = _client(ctx)
    _header("Division Hierarchies")

    try:
        if division_ids:
            results = [client.fetch_division(Division(d)) for d in division_ids]
        else:
            results = client.fetch_all_divisions()
    except (NCAAFBError, requests.RequestException) as e:
        raise click.ClickException(str(e))

    for hierarchy in results:
        click.echo(
            f"{hierarchy.division_id:<6} {hierarchy.name:<30} "
            f"{len(hierarchy.conferences):>3} conferences {hierarchy.team_count:>4} teams"
        )


@click.command()
@click.argument('years', nargs=-1, required=True)
@click.option('-t', '--type', 'schedule_type', default='all',
              type=click.Choice(SCHEDULE_TYPE_CHOICES), help='Schedule type (default: all)')
@click.option('--csv', 'csv_path', type=click.Path(dir_okay=False), help='Write games to CSV')
@click.pass_context
def schedule(ctx, years, schedule_type, csv_path):
    """Fetch season schedules for one or more YEARS."""
    client = _client(ctx)
    _header(f"Schedules {', '.join(years)}")

    try:
        if schedule_type == 'all':
            schedules = client.fetch_all_schedules(years)
        else:
            schedules = [client.fetch_schedule(year, ScheduleType(schedule_type)) for year in years]
    except (NCAAFBError, requests.RequestException) as e:
        raise click.ClickException(str(e))

    for sched in schedules:
        click.echo(f"{sched.year} {sched.schedule_type}: {len(sched.weeks)} weeks, {sched.game_count} games")

    if csv_path:
        frame = schedule_games_frame(schedules)
        frame.to_csv(csv_path, index=False)
        click.echo(f"Wrote {len(frame)} games to {csv_path}")


@click.command()
@click.argument('year')
@click.argument('schedule_type', type=click.Choice([t.value for t in SCHEDULE_ALL]))
@click.argument('game_ids', nargs=-1, required=True)
@click.option('--csv', 'csv_path', type=click.Path(dir_okay=False), help='Write boxscores to CSV')
@click.pass_context
def boxscores(ctx, year, schedule_type, game_ids, csv_path):
    """Fetch boxscores for GAME_IDS from the YEAR/SCHEDULE_TYPE schedule."""
    client = _client(ctx)
    _header(f"Boxscores {year} {schedule_type}")

    try:
        sched = client.fetch_schedule(year, ScheduleType(schedule_type))
        results = client.fetch_schedule_boxscores(sched, game_ids)
    except (NCAAFBError, requests.RequestException) as e:
        raise click.ClickException(str(e))

    for box in results:
        away = box.away.points if box.away else '-'
        home = box.home.points if box.home else '-'
        click.echo(f"Week {box.week:>2} {box.away_team_id} {away} @ {box.home_team_id} {home} ({box.status})")

    missing = len(set(game_ids)) - len(results)
    if missing > 0:
        click.echo(click.style(f"{missing} game id(s) not found in schedule", fg='yellow'))

    if csv_path:
        frame = boxscores_frame(results)
        frame.to_csv(csv_path, index=False)
        click.echo(f"Wrote {len(frame)} boxscores to {csv_path}")
