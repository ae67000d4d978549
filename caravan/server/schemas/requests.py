"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field

from ...engine.river import CrossingMethod
from ...engine.store import StoreItem
from ...models.game import Difficulty, PaceType, RationsType


class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    difficulty: Difficulty = Field(default=Difficulty.NORMAL, description="easy, normal or hard")
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")


class NamePartyRequest(BaseModel):
    """Request to name the party and open the store."""

    names: list[str] = Field(min_length=1, max_length=5, description="Party member names")
    startMonth: int | None = Field(  # noqa: N815
        default=None, ge=1, le=12, description="Optional departure month"
    )


class StoreRequest(BaseModel):
    """Request to buy or sell at the current store."""

    item: StoreItem
    quantity: int = Field(gt=0, description="Store units (boxes for ammunition)")


class EventChoiceRequest(BaseModel):
    """Request to resolve the pending event."""

    choiceId: int = Field(ge=0, description="Selected choice id")  # noqa: N815


class RiverRequest(BaseModel):
    """Request to attempt the river crossing."""

    method: CrossingMethod


class HuntRequest(BaseModel):
    """Request to go hunting."""

    ammo: int = Field(gt=0, description="Rounds to use")


class MedicineRequest(BaseModel):
    """Request to treat a party member."""

    memberId: int = Field(ge=0)  # noqa: N815


class PaceRequest(BaseModel):
    pace: PaceType


class RationsRequest(BaseModel):
    rations: RationsType


class SubmitScoreRequest(BaseModel):
    """Request to record a finished game on the leaderboard."""

    name: str = Field(min_length=1, max_length=40)
