"""
Tagged errors for the league simulator.
Every failure carries a LeagueErrorCode so callers can match exhaustively
instead of parsing messages.
"""
from __future__ import annotations

from enum import Enum


class LeagueErrorCode(str, Enum):
    INSUFFICIENT_TEAMS = "insufficient_teams"
    UNEVEN_TEAM_COUNT = "uneven_team_count"
    INVALID_SCORE = "invalid_score"
    INVALID_STRENGTH = "invalid_strength"
    INVALID_TEAM_NAME = "invalid_team_name"
    INVALID_REMAINING_WEEKS = "invalid_remaining_weeks"
    UNKNOWN_TEAM = "unknown_team"
    DUPLICATE_TEAM = "duplicate_team"
    TEAM_NOT_FOUND = "team_not_found"
    MATCH_NOT_FOUND = "match_not_found"
    FIXTURES_NOT_GENERATED = "fixtures_not_generated"
    SEASON_COMPLETED = "season_completed"
    NO_MATCHES_FOR_WEEK = "no_matches_for_week"
    TEAM_CHANGE_NOT_ALLOWED = "team_change_not_allowed"


class LeagueError(ValueError):
    """Base class; subclasses pin `code`."""

    code: LeagueErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}


class InsufficientTeamsError(LeagueError):
    """Fewer than 2 teams at fixture generation."""
    code = LeagueErrorCode.INSUFFICIENT_TEAMS


class UnevenTeamCountError(LeagueError):
    """Circle-method schedule needs an even number of teams."""
    code = LeagueErrorCode.UNEVEN_TEAM_COUNT


class InvalidScoreError(LeagueError):
    """Negative score supplied to a manual result override."""
    code = LeagueErrorCode.INVALID_SCORE


class InvalidStrengthError(LeagueError):
    code = LeagueErrorCode.INVALID_STRENGTH


class InvalidTeamNameError(LeagueError):
    code = LeagueErrorCode.INVALID_TEAM_NAME


class InvalidRemainingWeeksError(LeagueError):
    code = LeagueErrorCode.INVALID_REMAINING_WEEKS


class UnknownTeamError(LeagueError):
    """A match references a team that is not in the registry."""
    code = LeagueErrorCode.UNKNOWN_TEAM


class DuplicateTeamError(LeagueError):
    code = LeagueErrorCode.DUPLICATE_TEAM


class TeamNotFoundError(LeagueError):
    code = LeagueErrorCode.TEAM_NOT_FOUND


class MatchNotFoundError(LeagueError):
    code = LeagueErrorCode.MATCH_NOT_FOUND


class FixturesNotGeneratedError(LeagueError):
    code = LeagueErrorCode.FIXTURES_NOT_GENERATED


class SeasonCompletedError(LeagueError):
    code = LeagueErrorCode.SEASON_COMPLETED


class NoMatchesForWeekError(LeagueError):
    code = LeagueErrorCode.NO_MATCHES_FOR_WEEK


class TeamChangeNotAllowedError(LeagueError):
    """Cannot add or remove teams once fixtures exist."""
    code = LeagueErrorCode.TEAM_CHANGE_NOT_ALLOWED
