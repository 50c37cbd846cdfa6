"""Tests for feed data models."""

from ncaafb.models import (
    DIVISION_ALL,
    SCHEDULE_ALL,
    AccessLevel,
    Boxscore,
    BoxscoreTeam,
    Conference,
    Division,
    DivisionHierarchy,
    Game,
    Schedule,
    ScheduleType,
    Season,
    Subdivision,
    Team,
    Week,
)


class TestEnumerations:
    def test_division_order(self):
        assert [d.value for d in DIVISION_ALL] == ["FBS", "FCS", "D2", "D3", "NAIA", "USCAA"]

    def test_schedule_order(self):
        assert SCHEDULE_ALL == (ScheduleType.REGULAR, ScheduleType.POST_SEASON)

    def test_string_values(self):
        assert str(Division.NAIA) == "NAIA"
        assert f"{ScheduleType.POST_SEASON}" == "pst"
        assert ScheduleType("reg") is ScheduleType.REGULAR

    def test_access_level_codes(self):
        assert (AccessLevel.TRIAL.value, AccessLevel.PRODUCTION.value) == ("t", "p")


class TestSchedule:
    def test_from_season_uses_given_context(self):
        season = Season(year="1999", season_type="PST")
        schedule = Schedule.from_season(season, "2014", ScheduleType.REGULAR)
        assert schedule.year == "2014"
        assert schedule.schedule_type is ScheduleType.REGULAR
        assert schedule.season is season

    def test_game_count(self):
        season = Season(weeks=[
            Week("1", [Game("a", "x", "y"), Game("b", "x", "y")]),
            Week("2", []),
        ])
        assert Schedule.from_season(season, "2014", ScheduleType.REGULAR).game_count == 2

    def test_iter_games_order(self):
        season = Season(weeks=[Week("1", [Game("a", "", "")]), Week("2", [Game("b", "", "")])])
        assert [(w.week, g.game_id) for w, g in season.iter_games()] == [("1", "a"), ("2", "b")]


class TestBoxscore:
    def test_with_context_returns_copy(self):
        original = Boxscore(game_id="g1")
        stamped = original.with_context("2014", ScheduleType.POST_SEASON, "15")

        assert (stamped.year, stamped.schedule_type, stamped.week) == ("2014", ScheduleType.POST_SEASON, "15")
        assert stamped.game_id == "g1"
        assert original.year == ""
        assert original.schedule_type is None

    def test_winner_tie(self):
        box = Boxscore(game_id="g", home_team_id="H", away_team_id="A",
                       teams=[BoxscoreTeam("H", points=7), BoxscoreTeam("A", points=7)])
        assert box.winner is None

    def test_winner_without_points(self):
        box = Boxscore(game_id="g", home_team_id="H", away_team_id="A",
                       teams=[BoxscoreTeam("H"), BoxscoreTeam("A", points=3)])
        assert box.winner is None

    def test_home_and_away_looked_up_by_id(self):
        box = Boxscore(game_id="g", home_team_id="USC", away_team_id="FRES",
                       teams=[BoxscoreTeam("FRES", points=6), BoxscoreTeam("USC", points=52)])
        assert (box.home.points, box.away.points) == (52, 6)
        assert box.team("FRES") is box.teams[0]
        assert box.winner == "USC"

    def test_home_and_away_unknown_without_ids(self):
        box = Boxscore(game_id="g", teams=[BoxscoreTeam("X"), BoxscoreTeam("Y")])
        assert box.home is None and box.away is None
        assert box.team("") is None


class TestHierarchy:
    def test_team_count(self):
        hierarchy = DivisionHierarchy("FCS", conferences=[
            Conference("C1", subdivisions=[Subdivision("S1", teams=[Team("a"), Team("b")])]),
            Conference("C2", teams=[Team("c")]),
        ])
        assert hierarchy.team_count == 3

    def test_full_name_without_market(self):
        assert Team("X", name="Eagles").full_name == "Eagles"
