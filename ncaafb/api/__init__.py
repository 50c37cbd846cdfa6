"""API layer - SportsData NCAA football feed communication."""

from .client import NCAAFootballApi, SportsDataClient, MockNCAAFootballApi, REQUEST_DELAY
from .errors import NCAAFBError, APIStatusError, SchemaError

__all__ = [
    'NCAAFootballApi',
    'SportsDataClient',
    'MockNCAAFootballApi',
    'REQUEST_DELAY',
    'NCAAFBError',
    'APIStatusError',
    'SchemaError',
]
