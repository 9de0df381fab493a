"""
Boundary validation for caller-supplied input.
pydantic models check shape and ranges; failures are re-raised as tagged
league errors so callers only ever see LeagueError.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from league_sim.config import MAX_STRENGTH, MIN_STRENGTH
from league_sim.errors import InvalidScoreError, InvalidStrengthError, InvalidTeamNameError


class CreateTeamRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    strength: int = Field(..., ge=MIN_STRENGTH, le=MAX_STRENGTH, description="Team rating 1-100")


class UpdateMatchResultRequest(BaseModel):
    # Scores must already be ints; 1.0 and True are rejected rather than coerced
    model_config = ConfigDict(strict=True)

    home_score: int = Field(..., ge=0, description="Goals scored by the home team")
    away_score: int = Field(..., ge=0, description="Goals scored by the away team")


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg', 'invalid value')}" if loc else err.get("msg", "invalid value")


def parse_create_team(payload: dict[str, Any]) -> CreateTeamRequest:
    """Raises InvalidTeamNameError or InvalidStrengthError, by offending field."""
    try:
        return CreateTeamRequest.model_validate(payload)
    except ValidationError as exc:
        fields = {err["loc"][0] for err in exc.errors() if err.get("loc")}
        if "name" in fields:
            raise InvalidTeamNameError(f"invalid team: {_first_error(exc)}") from exc
        raise InvalidStrengthError(f"invalid team: {_first_error(exc)}") from exc


def parse_match_result(payload: dict[str, Any]) -> UpdateMatchResultRequest:
    """Raises InvalidScoreError for negative or non-integer scores."""
    try:
        return UpdateMatchResultRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidScoreError(f"invalid result: {_first_error(exc)}") from exc
