from dataclasses import dataclass, field, replace
from typing import List, Optional

from .types import ScheduleType


@dataclass
class QuarterScore:
    number: int
    points: int


@dataclass
class BoxscoreTeam:
    """One side of a boxscore with its scoring line."""
    team_id: str
    name: str = ""
    market: str = ""
    points: Optional[int] = None
    quarters: List[QuarterScore] = field(default_factory=list)


@dataclass
class Boxscore:
    """Parsed boxscore document.

    ``teams`` holds every team in document order; ``home`` and ``away`` are
    looked up in it by the game's home and away team ids.

    ``year``, ``schedule_type`` and ``week`` are not part of the feed; they
    stay empty until :meth:`with_context` is applied.
    """
    game_id: str
    status: str = ""
    scheduled: str = ""
    home_team_id: str = ""
    away_team_id: str = ""
    teams: List[BoxscoreTeam] = field(default_factory=list)
    year: str = ""
    schedule_type: Optional[ScheduleType] = None
    week: str = ""

    def with_context(self, year: str, schedule_type: ScheduleType, week: str) -> 'Boxscore':
        """Return a copy stamped with the request's year, schedule type and week."""
        return replace(self, year=year, schedule_type=schedule_type, week=week)

    def team(self, team_id: str) -> Optional[BoxscoreTeam]:
        """Return the team with the given id, or None."""
        if not team_id:
            return None
        return next((t for t in self.teams if t.team_id == team_id), None)

    @property
    def home(self) -> Optional[BoxscoreTeam]:
        return self.team(self.home_team_id)

    @property
    def away(self) -> Optional[BoxscoreTeam]:
        return self.team(self.away_team_id)

    @property
    def winner(self) -> Optional[str]:
        if self.home is None or self.away is None:
            return None
        if self.home.points is None or self.away.points is None:
            return None
        if self.home.points == self.away.points:
            return None
        return self.home.team_id if self.home.points > self.away.points else self.away.team_id
