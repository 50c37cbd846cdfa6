"""XML parsers for feed documents.

The feed declares a schema namespace on every document, so elements are
matched by local name. Missing attributes become empty strings or None.
A malformed body raises ParseError; a document of the wrong kind or a
non-integer numeric attribute raises SchemaError.
"""

from typing import Iterator, Optional
from xml.etree import ElementTree as ET

from ..models.boxscore import Boxscore, BoxscoreTeam, QuarterScore
from ..models.hierarchy import Conference, DivisionHierarchy, Subdivision, Team
from ..models.schedule import Game, Season, Venue, Week
from .errors import SchemaError


def _local_name(tag: str) -> str:
    return tag.rsplit('}', 1)[-1]


def _children(elem: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in elem:
        if _local_name(child.tag) == name:
            yield child


def _child(elem: ET.Element, name: str) -> Optional[ET.Element]:
    return next(_children(elem, name), None)


def _int_attr(elem: ET.Element, attr: str, default: Optional[int] = None) -> Optional[int]:
    """
    Read an integer attribute; a missing or blank attribute gives ``default``.

    Raises:
        SchemaError: if the attribute is present but not an integer
    """
    value = elem.get(attr)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise SchemaError(
            f"integer {attr}", repr(value),
            f"Invalid <{_local_name(elem.tag)}> {attr} value {value!r}: expected an integer",
        ) from None


def _parse_root(body: bytes, expected: str) -> ET.Element:
    """
    Parse an XML body and check its root element.

    Raises:
        xml.etree.ElementTree.ParseError: if the body is not well-formed XML
        SchemaError: if the root element is not ``expected``
    """
    root = ET.fromstring(body)
    actual = _local_name(root.tag)
    if actual != expected:
        raise SchemaError(expected, actual)
    return root


def _parse_team(elem: ET.Element) -> Team:
    return Team(
        team_id=elem.get('id', ''),
        name=elem.get('name', ''),
        market=elem.get('market', ''),
    )


def parse_division(body: bytes) -> DivisionHierarchy:
    """Parse a ``hierarchy.xml`` body."""
    root = _parse_root(body, 'division')

    conferences = []
    for conf_elem in _children(root, 'conference'):
        subdivisions = [
            Subdivision(
                subdivision_id=sub_elem.get('id', ''),
                name=sub_elem.get('name', ''),
                teams=[_parse_team(t) for t in _children(sub_elem, 'team')],
            )
            for sub_elem in _children(conf_elem, 'subdivision')
        ]
        conferences.append(Conference(
            conference_id=conf_elem.get('id', ''),
            name=conf_elem.get('name', ''),
            subdivisions=subdivisions,
            teams=[_parse_team(t) for t in _children(conf_elem, 'team')],
        ))

    return DivisionHierarchy(
        division_id=root.get('id', ''),
        name=root.get('name', ''),
        conferences=conferences,
    )


def _parse_venue(elem: Optional[ET.Element]) -> Optional[Venue]:
    if elem is None:
        return None
    return Venue(
        venue_id=elem.get('id', ''),
        name=elem.get('name', ''),
        city=elem.get('city', ''),
        state=elem.get('state', ''),
        capacity=_int_attr(elem, 'capacity'),
        surface=elem.get('surface', ''),
    )


def _parse_game(elem: ET.Element) -> Game:
    broadcast = _child(elem, 'broadcast')
    return Game(
        game_id=elem.get('id', ''),
        away_team_id=elem.get('away', ''),
        home_team_id=elem.get('home', ''),
        scheduled=elem.get('scheduled', ''),
        status=elem.get('status', ''),
        neutral_site=elem.get('neutral_site', '').lower() == 'true',
        venue=_parse_venue(_child(elem, 'venue')),
        network=broadcast.get('network', '') if broadcast is not None else '',
    )


def parse_season(body: bytes) -> Season:
    """Parse a ``schedule.xml`` body into weeks and games, preserving feed order."""
    root = _parse_root(body, 'season')

    weeks = [
        Week(
            week=week_elem.get('week', ''),
            games=[_parse_game(g) for g in _children(week_elem, 'game')],
        )
        for week_elem in _children(root, 'week')
    ]

    return Season(
        year=root.get('season', ''),
        season_type=root.get('type', ''),
        weeks=weeks,
    )


def _parse_boxscore_team(elem: ET.Element) -> BoxscoreTeam:
    scoring = _child(elem, 'scoring')
    points = _int_attr(elem, 'points')
    quarters = []
    if scoring is not None:
        if points is None:
            points = _int_attr(scoring, 'points')
        quarters = [
            QuarterScore(
                number=_int_attr(quarter, 'number', 0),
                points=_int_attr(quarter, 'points', 0),
            )
            for quarter in _children(scoring, 'quarter')
        ]

    return BoxscoreTeam(
        team_id=elem.get('id', ''),
        name=elem.get('name', ''),
        market=elem.get('market', ''),
        points=points,
        quarters=quarters,
    )


def parse_boxscore(body: bytes) -> Boxscore:
    """
    Parse a ``boxscore.xml`` body.

    Year, schedule type and week are not in the document; the result is
    unstamped until :meth:`Boxscore.with_context` is applied.
    """
    root = _parse_root(body, 'game')

    home_team_id = root.get('home') or root.get('home_team', '')
    away_team_id = root.get('away') or root.get('away_team', '')

    teams = [_parse_boxscore_team(t) for t in _children(root, 'team')]

    return Boxscore(
        game_id=root.get('id', ''),
        status=root.get('status', ''),
        scheduled=root.get('scheduled', ''),
        home_team_id=home_team_id,
        away_team_id=away_team_id,
        teams=teams,
    )
