"""Shared pytest fixtures for NCAA football client tests."""

import pytest
import requests
from unittest.mock import MagicMock


HIERARCHY_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<division xmlns="http://feed.elasticstats.com/schema/ncaafb/hierarchy-v1.0.xsd" id="FBS" name="NCAA Division I FBS">
  <conference id="PAC12" name="Pac-12 Conference">
    <subdivision id="PAC12-SOUTH" name="South">
      <team id="USC" name="Trojans" market="Southern California"/>
      <team id="UCLA" name="Bruins" market="UCLA"/>
    </subdivision>
    <subdivision id="PAC12-NORTH" name="North">
      <team id="ORE" name="Ducks" market="Oregon"/>
    </subdivision>
  </conference>
  <conference id="IND" name="FBS Independents">
    <team id="ND" name="Fighting Irish" market="Notre Dame"/>
  </conference>
</division>
"""

SEASON_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<season xmlns="http://feed.elasticstats.com/schema/ncaafb/schedule-v1.0.xsd" season="1999" type="PST">
  <week week="1">
    <game id="g1" scheduled="2014-08-30T02:30:00+00:00" home="USC" away="FRES" status="closed" neutral_site="false">
      <venue id="v1" name="Los Angeles Memorial Coliseum" city="Los Angeles" state="CA" capacity="93607" surface="turf"/>
      <broadcast network="Pac-12"/>
    </game>
    <game id="g2" scheduled="2014-08-30T19:00:00+00:00" home="UCLA" away="UVA" status="closed" neutral_site="true"/>
  </week>
  <week week="2">
    <game id="g3" scheduled="2014-09-06T19:00:00+00:00" home="ORE" away="MSU" status="scheduled"/>
  </week>
</season>
"""

BOXSCORE_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<game xmlns="http://feed.elasticstats.com/schema/ncaafb/boxscore-v1.0.xsd" id="g1" status="closed" scheduled="2014-08-30T02:30:00+00:00" home="USC" away="FRES">
  <team id="FRES" name="Bulldogs" market="Fresno State" points="6">
    <scoring>
      <quarter number="1" points="0"/>
      <quarter number="2" points="6"/>
      <quarter number="3" points="0"/>
      <quarter number="4" points="0"/>
    </scoring>
  </team>
  <team id="USC" name="Trojans" market="Southern California" points="52">
    <scoring>
      <quarter number="1" points="14"/>
      <quarter number="2" points="17"/>
      <quarter number="3" points="14"/>
      <quarter number="4" points="7"/>
    </scoring>
  </team>
</game>
"""


def make_response(status_code: int = 200, body: bytes = b"", url: str = "https://example.test/"):
    """Build a fully-read requests.Response."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code == 200 else "Error"
    response.url = url
    response._content = body
    response._content_consumed = True
    response.request = requests.Request('GET', url).prepare()
    return response


@pytest.fixture
def hierarchy_xml():
    return HIERARCHY_XML


@pytest.fixture
def season_xml():
    return SEASON_XML


@pytest.fixture
def boxscore_xml():
    return BOXSCORE_XML


@pytest.fixture
def mock_session():
    """A requests session double; set .get.return_value or .get.side_effect."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip the pacing delay and record requested sleeps."""
    sleeps = []
    monkeypatch.setattr("ncaafb.api.client.time.sleep", sleeps.append)
    return sleeps


@pytest.fixture
def mock_api():
    """Create a mock NCAA football API client."""
    from ncaafb.api.client import MockNCAAFootballApi
    return MockNCAAFootballApi()


@pytest.fixture
def sample_schedule():
    """Schedule with weeks [[g1, g2], [g3], [g4, g5]]."""
    from ncaafb.models import Game, Schedule, ScheduleType, Season, Week
    season = Season(weeks=[
        Week(week="1", games=[Game("g1", "A1", "H1"), Game("g2", "A2", "H2")]),
        Week(week="2", games=[Game("g3", "A3", "H3")]),
        Week(week="3", games=[Game("g4", "A4", "H4"), Game("g5", "A5", "H5")]),
    ])
    return Schedule.from_season(season, "2014", ScheduleType.REGULAR)


@pytest.fixture
def response_factory():
    """Factory for fully-read requests.Response objects."""
    return make_response
