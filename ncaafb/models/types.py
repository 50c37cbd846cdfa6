"""Fixed enumerations used to address the NCAA football feed."""

from enum import Enum
from typing import Tuple


class AccessLevel(Enum):
    """API access tier, encoded as a one-letter suffix in the endpoint path."""
    TRIAL = "t"
    PRODUCTION = "p"


class Division(str, Enum):
    """Classification level used to query team hierarchies."""
    FBS = "FBS"
    FCS = "FCS"
    D2 = "D2"
    D3 = "D3"
    NAIA = "NAIA"
    USCAA = "USCAA"

    def __str__(self) -> str:
        return self.value


class ScheduleType(str, Enum):
    """Season phase selector for schedule and boxscore queries."""
    REGULAR = "reg"
    POST_SEASON = "pst"

    def __str__(self) -> str:
        return self.value


DIVISION_ALL: Tuple[Division, ...] = (
    Division.FBS,
    Division.FCS,
    Division.D2,
    Division.D3,
    Division.NAIA,
    Division.USCAA,
)

SCHEDULE_ALL: Tuple[ScheduleType, ...] = (
    ScheduleType.REGULAR,
    ScheduleType.POST_SEASON,
)
