from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .types import ScheduleType


@dataclass
class Venue:
    """Where a game is played."""
    venue_id: str
    name: str = ""
    city: str = ""
    state: str = ""
    capacity: Optional[int] = None
    surface: str = ""


@dataclass
class Game:
    """A scheduled or completed game within a week."""
    game_id: str
    away_team_id: str
    home_team_id: str
    scheduled: str = ""
    status: str = ""
    neutral_site: bool = False
    venue: Optional[Venue] = None
    network: str = ""

    @property
    def matchup(self) -> str:
        return f"{self.away_team_id} @ {self.home_team_id}"

    @property
    def is_closed(self) -> bool:
        return self.status in ("closed", "complete")


@dataclass
class Week:
    """One week of a season, games in feed order."""
    week: str
    games: List[Game] = field(default_factory=list)


@dataclass
class Season:
    """Parsed season schedule document.

    ``year`` and ``season_type`` are whatever the feed sent and are not
    trusted as request context; see :class:`Schedule`.
    """
    year: str = ""
    season_type: str = ""
    weeks: List[Week] = field(default_factory=list)

    def iter_games(self) -> Iterator[Tuple[Week, Game]]:
        """Yield (week, game) pairs, weeks in order then games within each week."""
        for week in self.weeks:
            for game in week.games:
                yield week, game


@dataclass
class Schedule:
    """A season schedule stamped with the year and type it was requested for."""
    year: str
    schedule_type: ScheduleType
    season: Season

    @classmethod
    def from_season(cls, season: Season, year: str, schedule_type: ScheduleType) -> 'Schedule':
        """Attach request context to a parsed season."""
        return cls(year=year, schedule_type=schedule_type, season=season)

    @property
    def weeks(self) -> List[Week]:
        return self.season.weeks

    @property
    def game_count(self) -> int:
        return sum(len(week.games) for week in self.season.weeks)
