"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class GameStateResponse(BaseModel):
    """Response containing current game state."""

    gameId: str  # noqa: N815
    screen: str
    state: dict


class CreateGameResponse(BaseModel):
    """Response after creating a new game."""

    gameId: str  # noqa: N815
    difficulty: str
    seed: int
    state: dict


class TurnResponse(BaseModel):
    """Response after computing a day, before it is applied."""

    gameId: str  # noqa: N815
    turn: dict


class LeaderboardEntryResponse(BaseModel):
    name: str
    score: int
    survived: bool
    partySurvivors: int  # noqa: N815
    distanceTraveled: int  # noqa: N815
    date: str


class SubmitScoreResponse(BaseModel):
    """Response after recording a score."""

    score: int
    rank: int | None = None
    entries: list[LeaderboardEntryResponse] = Field(default_factory=list)


class LeaderboardResponse(BaseModel):
    entries: list[LeaderboardEntryResponse] = Field(default_factory=list)
