"""Data models - Dataclass definitions for feed documents and enumerations."""

from .types import AccessLevel, Division, ScheduleType, DIVISION_ALL, SCHEDULE_ALL
from .hierarchy import DivisionHierarchy, Conference, Subdivision, Team
from .schedule import Season, Week, Game, Venue, Schedule
from .boxscore import Boxscore, BoxscoreTeam, QuarterScore

__all__ = [
    'AccessLevel',
    'Division',
    'ScheduleType',
    'DIVISION_ALL',
    'SCHEDULE_ALL',
    'DivisionHierarchy',
    'Conference',
    'Subdivision',
    'Team',
    'Season',
    'Week',
    'Game',
    'Venue',
    'Schedule',
    'Boxscore',
    'BoxscoreTeam',
    'QuarterScore',
]
