from datetime import date
from types import SimpleNamespace

from roster.validation.common import add_years
from roster.validation.player_statistic_validator import validate_player_statistic
from roster.validation.player_validator import validate_player
from roster.validation.team_player_validator import validate_team_player

TODAY = date(2025, 1, 1)


def _player(**overrides):
    values = dict(
        user_id="owner-1",
        name="Marco Rossi",
        date_of_birth=date(1995, 6, 1),
        gender="Female",
        photo_url="https://example.com/p.png",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def _assignment(**overrides):
    values = dict(
        team_name="Lions",
        championship_name="Spring League",
        joined_date=date(2024, 1, 10),
        left_date=None,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def _statistic(**overrides):
    values = dict(
        team_player_id=1,
        game_date=date(2024, 3, 1),
        minutes_played=90,
        is_starter=True,
        jersey_number=10,
        goals=1,
        assists=0,
        created_by="coach-1",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class TestPlayerRules:
    def test_valid_player(self):
        assert validate_player(_player(), today=TODAY) == {}

    def test_optional_fields_may_be_missing(self):
        assert validate_player(_player(gender=None, photo_url=""), today=TODAY) == {}

    def test_collects_all_errors(self):
        errors = validate_player(
            _player(user_id=" ", name="", date_of_birth=None), today=TODAY,
        )
        assert set(errors) == {"user_id", "name", "date_of_birth"}

    def test_name_too_long(self):
        assert "name" in validate_player(_player(name="x" * 201), today=TODAY)
        assert validate_player(_player(name="x" * 200), today=TODAY) == {}

    def test_date_of_birth_must_be_past(self):
        assert "date_of_birth" in validate_player(_player(date_of_birth=TODAY), today=TODAY)

    def test_date_of_birth_at_most_100_years_ago(self):
        assert "date_of_birth" in validate_player(_player(date_of_birth=date(1924, 12, 31)), today=TODAY)
        assert validate_player(_player(date_of_birth=date(1925, 1, 1)), today=TODAY) == {}

    def test_gender_case_insensitive(self):
        assert validate_player(_player(gender="non-binary"), today=TODAY) == {}
        assert "gender" in validate_player(_player(gender="Robot"), today=TODAY)

    def test_photo_url_must_be_http(self):
        assert "photo_url" in validate_player(_player(photo_url="ftp://example.com/p.png"), today=TODAY)
        assert "photo_url" in validate_player(_player(photo_url="not a url"), today=TODAY)

    def test_photo_url_length(self):
        url = "https://example.com/" + "a" * 500
        assert "photo_url" in validate_player(_player(photo_url=url), today=TODAY)


class TestTeamAssignmentRules:
    def test_valid_assignment(self):
        assert validate_team_player(_assignment(), today=TODAY) == {}

    def test_names_required(self):
        errors = validate_team_player(_assignment(team_name="", championship_name="  "), today=TODAY)
        assert set(errors) == {"team_name", "championship_name"}

    def test_joined_date_at_most_one_year_ahead(self):
        assert validate_team_player(_assignment(joined_date=date(2026, 1, 1)), today=TODAY) == {}
        assert "joined_date" in validate_team_player(_assignment(joined_date=date(2026, 1, 2)), today=TODAY)

    def test_left_date_not_before_joined(self):
        errors = validate_team_player(_assignment(left_date=date(2024, 1, 9)), today=TODAY)
        assert "left_date" in errors
        assert validate_team_player(_assignment(left_date=date(2024, 1, 10)), today=TODAY) == {}

    def test_left_date_not_in_future(self):
        assert "left_date" in validate_team_player(_assignment(left_date=date(2025, 2, 1)), today=TODAY)


class TestStatisticRules:
    def test_valid_statistic(self):
        assert validate_player_statistic(_statistic(), today=TODAY) == {}

    def test_negative_minutes(self):
        errors = validate_player_statistic(_statistic(minutes_played=-1), today=TODAY)
        assert list(errors) == ["minutes_played"]

    def test_upper_bounds(self):
        errors = validate_player_statistic(_statistic(minutes_played=121, jersey_number=100), today=TODAY)
        assert set(errors) == {"minutes_played", "jersey_number"}

    def test_jersey_and_counts(self):
        errors = validate_player_statistic(_statistic(jersey_number=0, goals=-1, assists=-2), today=TODAY)
        assert set(errors) == {"jersey_number", "goals", "assists"}

    def test_game_date_and_creator(self):
        errors = validate_player_statistic(
            _statistic(game_date=date(2025, 1, 2), created_by="", team_player_id=0), today=TODAY,
        )
        assert set(errors) == {"game_date", "created_by", "team_player_id"}


def test_add_years_leap_day():
    assert add_years(date(2024, 2, 29), -1) == date(2023, 2, 28)
    assert add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)
