"""NCAA Football Stats - Client for the SportsData NCAA football XML feed.

Modules:
    models - Data models (dataclasses and enumerations)
    api - Feed client, endpoint builders, XML parsers
    helpers - Pure utility functions
    config - Configuration
    cli - Command-line interface
"""

from .config import Config, APIConfig
from .api import SportsDataClient, MockNCAAFootballApi, APIStatusError, SchemaError
from .models import Division, ScheduleType, DIVISION_ALL, SCHEDULE_ALL

__all__ = [
    'Config',
    'APIConfig',
    'SportsDataClient',
    'MockNCAAFootballApi',
    'APIStatusError',
    'SchemaError',
    'Division',
    'ScheduleType',
    'DIVISION_ALL',
    'SCHEDULE_ALL',
]

__version__ = '1.0.0'
