"""NCAA Football API Client - Interface and implementations for feed calls."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

import requests

from ..models.boxscore import Boxscore
from ..models.hierarchy import DivisionHierarchy
from ..models.schedule import Schedule, Season
from ..models.types import DIVISION_ALL, SCHEDULE_ALL, Division, ScheduleType
from . import endpoints
from .errors import APIStatusError
from .parsers import parse_boxscore, parse_division, parse_season

logger = logging.getLogger(__name__)

# Fixed pause before every request. Not a rate limiter.
REQUEST_DELAY = 1.0


class NCAAFootballApi(ABC):
    """Abstract interface for NCAA football feed calls.

    Batch helpers are built on the three single-item fetches and are
    strictly sequential and fail-fast: the first exception propagates and
    nothing collected so far is returned.
    """

    def __init__(self, verbose: bool = False, log: Optional[logging.Logger] = None):
        self._verbose = verbose
        self._log = log or logger

    @property
    def verbose(self) -> bool:
        return self._verbose

    def _log_verbose(self, msg: str, *args) -> None:
        if self._verbose:
            self._log.info(msg, *args)

    @abstractmethod
    def fetch_division(self, division: Division) -> DivisionHierarchy:
        """Get the team hierarchy for one division."""
        pass

    @abstractmethod
    def fetch_schedule(self, year: str, schedule_type: ScheduleType) -> Schedule:
        """Get a season schedule stamped with year and schedule type."""
        pass

    @abstractmethod
    def fetch_boxscore(self, year: str, schedule_type: ScheduleType, week: str,
                       away_team_id: str, home_team_id: str) -> Boxscore:
        """Get a game boxscore stamped with year, schedule type and week."""
        pass

    def fetch_all_divisions(self) -> List[DivisionHierarchy]:
        """Get hierarchies for every division, in declared division order."""
        divisions = []
        for division in DIVISION_ALL:
            divisions.append(self.fetch_division(division))
        return divisions

    def fetch_all_schedules(self, years: Iterable[str]) -> List[Schedule]:
        """Get regular and post-season schedules for each year, in order."""
        schedules = []
        for year in years:
            for schedule_type in SCHEDULE_ALL:
                schedules.append(self.fetch_schedule(year, schedule_type))
        return schedules

    def fetch_schedule_boxscores(self, schedule: Schedule, game_ids: Iterable[str]) -> List[Boxscore]:
        """
        Get boxscores for the games of a schedule whose id is in game_ids.

        Args:
            schedule: Schedule to scan, weeks in order then games within a week
            game_ids: Collection of game ids to fetch; order does not matter

        Returns:
            Boxscores in schedule order, one per matching game
        """
        wanted = {game_ids} if isinstance(game_ids, str) else set(game_ids)
        boxscores = []
        for week, game in schedule.season.iter_games():
            if game.game_id not in wanted:
                continue
            self._log_verbose(
                "Getting boxscore for %s: %s, %s, %s, %s, %s",
                game.game_id, schedule.year, schedule.schedule_type,
                week.week, game.away_team_id, game.home_team_id,
            )
            boxscores.append(self.fetch_boxscore(
                schedule.year, schedule.schedule_type, week.week,
                game.away_team_id, game.home_team_id,
            ))
        return boxscores


class SportsDataClient(NCAAFootballApi):
    """Real client for the SportsData NCAA football XML feed."""

    def __init__(
        self,
        api_key: str,
        production: bool = False,
        verbose: bool = False,
        log: Optional[logging.Logger] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize API client.

        Args:
            api_key: Feed API key, sent as the api_key query parameter
            production: Use the production tier instead of trial
            verbose: Log endpoints and boxscore fetch decisions
            log: Logger for verbose output (defaults to this module's logger)
            session: requests session to issue calls on
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        super().__init__(verbose=verbose, log=log)
        self._api_key = api_key
        self._production = production
        self._session = session or requests.Session()
        self._timeout = timeout

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def production(self) -> bool:
        return self._production

    def base_endpoint(self) -> str:
        endpoint = endpoints.base_endpoint(self._production)
        self._log_verbose("base endpoint: %s", endpoint)
        return endpoint

    def division_endpoint(self, division: Division) -> str:
        url = endpoints.division_endpoint(self.base_endpoint(), division, self._api_key)
        self._log_verbose("division endpoint: %s", url)
        return url

    def schedule_endpoint(self, year: str, schedule_type: ScheduleType) -> str:
        url = endpoints.schedule_endpoint(self.base_endpoint(), year, schedule_type, self._api_key)
        self._log_verbose("schedule endpoint: %s", url)
        return url

    def boxscore_endpoint(self, year: str, schedule_type: ScheduleType, week: str,
                          away_team_id: str, home_team_id: str) -> str:
        url = endpoints.boxscore_endpoint(
            self.base_endpoint(), year, schedule_type, week,
            away_team_id, home_team_id, self._api_key,
        )
        self._log_verbose("boxscore endpoint: %s", url)
        return url

    def _get(self, url: str) -> bytes:
        """
        Pause, GET the url and return the full body.

        Raises:
            requests.RequestException: on transport or body-read failure
            APIStatusError: if the status code is not 200
        """
        time.sleep(REQUEST_DELAY)
        with self._session.get(url, stream=True, timeout=self._timeout) as response:
            if response.status_code != 200:
                raise APIStatusError(response.status_code, response.request, response)
            return response.content

    def fetch_division(self, division: Division) -> DivisionHierarchy:
        url = self.division_endpoint(division)
        return parse_division(self._get(url))

    def fetch_schedule(self, year: str, schedule_type: ScheduleType) -> Schedule:
        url = self.schedule_endpoint(year, schedule_type)
        season = parse_season(self._get(url))
        return Schedule.from_season(season, year, schedule_type)

    def fetch_boxscore(self, year: str, schedule_type: ScheduleType, week: str,
                       away_team_id: str, home_team_id: str) -> Boxscore:
        url = self.boxscore_endpoint(year, schedule_type, week, away_team_id, home_team_id)
        boxscore = parse_boxscore(self._get(url))
        return boxscore.with_context(year, schedule_type, week)


class MockNCAAFootballApi(NCAAFootballApi):
    """Mock client for testing."""

    def __init__(self, verbose: bool = False, log: Optional[logging.Logger] = None):
        super().__init__(verbose=verbose, log=log)
        self.responses: Dict[str, object] = {}
        self.errors: Dict[str, Exception] = {}
        self.calls: List[str] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def _get_response(self, key: str, default: object) -> object:
        self.calls.append(key)
        if key in self.errors:
            raise self.errors[key]
        return self.responses.get(key, default)

    def fetch_division(self, division: Division) -> DivisionHierarchy:
        return self._get_response(
            f"division_{division}", DivisionHierarchy(division_id=str(division)))

    def fetch_schedule(self, year: str, schedule_type: ScheduleType) -> Schedule:
        season = self._get_response(f"schedule_{year}_{schedule_type}", Season())
        return Schedule.from_season(season, year, schedule_type)

    def fetch_boxscore(self, year: str, schedule_type: ScheduleType, week: str,
                       away_team_id: str, home_team_id: str) -> Boxscore:
        key = f"boxscore_{year}_{schedule_type}_{week}_{away_team_id}_{home_team_id}"
        boxscore = self._get_response(key, Boxscore(
            game_id="", home_team_id=home_team_id, away_team_id=away_team_id))
        return boxscore.with_context(year, schedule_type, week)

    def set_response(self, key: str, data: object) -> None:
        """Test helper to set mock responses."""
        self.responses[key] = data

    def set_error(self, key: str, error: Exception) -> None:
        """Test helper to make a call raise."""
        self.errors[key] = error

    def reset(self) -> None:
        """Reset recorded calls, responses and errors."""
        self.calls = []
        self.responses = {}
        self.errors = {}
