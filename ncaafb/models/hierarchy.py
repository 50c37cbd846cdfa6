from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class Team:
    """A team entry in a division hierarchy."""
    team_id: str
    name: str = ""
    market: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.market} {self.name}".strip()


@dataclass
class Subdivision:
    """A conference subdivision (e.g. a conference's East/West split)."""
    subdivision_id: str
    name: str = ""
    teams: List[Team] = field(default_factory=list)


@dataclass
class Conference:
    """A conference, with its teams either directly or under subdivisions."""
    conference_id: str
    name: str = ""
    subdivisions: List[Subdivision] = field(default_factory=list)
    teams: List[Team] = field(default_factory=list)

    def all_teams(self) -> Iterator[Team]:
        """Yield conference-level teams, then subdivision teams in document order."""
        yield from self.teams
        for subdivision in self.subdivisions:
            yield from subdivision.teams


@dataclass
class DivisionHierarchy:
    """Parsed team hierarchy for one division."""
    division_id: str
    name: str = ""
    conferences: List[Conference] = field(default_factory=list)

    def all_teams(self) -> List[Team]:
        return [team for conference in self.conferences for team in conference.all_teams()]

    @property
    def team_count(self) -> int:
        return len(self.all_teams())
