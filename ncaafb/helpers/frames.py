"""Frame builders - Pure functions flattening feed records into DataFrames."""

from typing import Iterable

import pandas as pd

from ..models.boxscore import Boxscore
from ..models.schedule import Schedule

SCHEDULE_COLUMNS = [
    'year', 'schedule_type', 'week', 'game_id', 'away_team_id', 'home_team_id',
    'scheduled', 'status', 'neutral_site', 'venue', 'network',
]

BOXSCORE_COLUMNS = [
    'year', 'schedule_type', 'week', 'game_id', 'status',
    'away_team_id', 'away_points', 'home_team_id', 'home_points',
]


def schedule_games_frame(schedules: Iterable[Schedule]) -> pd.DataFrame:
    """
    One row per game, in schedule order.

    Year and schedule type come from the request context stamped on each
    schedule, not from the season document.
    """
    rows = []
    for schedule in schedules:
        for week, game in schedule.season.iter_games():
            rows.append({
                'year': schedule.year,
                'schedule_type': str(schedule.schedule_type),
                'week': week.week,
                'game_id': game.game_id,
                'away_team_id': game.away_team_id,
                'home_team_id': game.home_team_id,
                'scheduled': game.scheduled,
                'status': game.status,
                'neutral_site': game.neutral_site,
                'venue': game.venue.name if game.venue else '',
                'network': game.network,
            })
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def boxscores_frame(boxscores: Iterable[Boxscore]) -> pd.DataFrame:
    """One row per boxscore; points are None when the feed had no scoring."""
    rows = []
    for box in boxscores:
        rows.append({
            'year': box.year,
            'schedule_type': str(box.schedule_type) if box.schedule_type else '',
            'week': box.week,
            'game_id': box.game_id,
            'status': box.status,
            'away_team_id': box.away_team_id,
            'away_points': box.away.points if box.away else None,
            'home_team_id': box.home_team_id,
            'home_points': box.home.points if box.home else None,
        })
    return pd.DataFrame(rows, columns=BOXSCORE_COLUMNS)
