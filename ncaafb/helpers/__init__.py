"""Helpers - Pure utility functions with no side effects."""

from .frames import schedule_games_frame, boxscores_frame, SCHEDULE_COLUMNS, BOXSCORE_COLUMNS

__all__ = [
    'schedule_games_frame',
    'boxscores_frame',
    'SCHEDULE_COLUMNS',
    'BOXSCORE_COLUMNS',
]
