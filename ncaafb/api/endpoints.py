"""Endpoint URL builders for the SportsData NCAA football feed.

Path segments are formatted in as given; only the query string is encoded.
"""

import requests

from ..models.types import AccessLevel, Division, ScheduleType

API_HOST = "api.sportsdatallc.org"
API_VERSION = 1


def base_endpoint(production: bool) -> str:
    """Return the feed root for the given access tier."""
    access_level = AccessLevel.PRODUCTION if production else AccessLevel.TRIAL
    return f"https://{API_HOST}/ncaafb-{access_level.value}{API_VERSION}"


def with_api_key(endpoint: str, api_key: str) -> str:
    """
    Append the api_key query parameter to an endpoint.

    Raises:
        requests.exceptions.MissingSchema, requests.exceptions.InvalidURL:
            if the endpoint cannot be prepared as a URL
    """
    request = requests.Request('GET', endpoint, params={'api_key': api_key})
    return request.prepare().url


def division_endpoint(base: str, division: Division, api_key: str) -> str:
    return with_api_key(f"{base}/teams/{division}/hierarchy.xml", api_key)


def schedule_endpoint(base: str, year: str, schedule_type: ScheduleType, api_key: str) -> str:
    return with_api_key(f"{base}/{year}/{schedule_type}/schedule.xml", api_key)


def boxscore_endpoint(
    base: str,
    year: str,
    schedule_type: ScheduleType,
    week: str,
    away_team_id: str,
    home_team_id: str,
    api_key: str,
) -> str:
    endpoint = f"{base}/{year}/{schedule_type}/{week}/{away_team_id}/{home_team_id}/boxscore.xml"
    return with_api_key(endpoint, api_key)
