"""FastAPI server for Caravan.

Exposes the journey as a small HTTP API: every action takes the session's
current snapshot through one engine transition and returns the new state.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..engine.actions import (
    buy_item,
    handle_event,
    handle_hunting,
    handle_river,
    repair_wagon_action,
    rest,
    sell_item,
    set_pace,
    set_rations,
    use_medicine_on_member,
)
from ..engine.game_setup import begin_travel, start_game
from ..models.game import GameData, GameScreen
from ..utils.leaderboard import LeaderboardEntry
from .schemas.requests import (
    CreateGameRequest,
    EventChoiceRequest,
    HuntRequest,
    MedicineRequest,
    NamePartyRequest,
    PaceRequest,
    RationsRequest,
    RiverRequest,
    StoreRequest,
    SubmitScoreRequest,
)
from .schemas.responses import (
    CreateGameResponse,
    GameStateResponse,
    LeaderboardEntryResponse,
    LeaderboardResponse,
    SubmitScoreResponse,
    TurnResponse,
)
from .session import GameSession, GameSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = GameSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Caravan server starting...")
    yield
    logger.info("Caravan server shutting down...")
    sessions.cleanup_all()


app = FastAPI(
    title="Caravan API",
    description="Web API for the Caravan trail simulation",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

TRAIL_SCREENS = (GameScreen.TRAVELING, GameScreen.LANDMARK)
STORE_SCREENS = (GameScreen.STORE, GameScreen.LANDMARK)


# ============================================
# HELPERS
# ============================================


def _get_session(game_id: str) -> GameSession:
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


def _get_active_session(game_id: str, *screens: GameScreen) -> GameSession:
    """Look up a running session, optionally requiring one of the given screens."""
    session = _get_session(game_id)

    if session.is_finished:
        raise HTTPException(
            status_code=400,
            detail=f"Game already ended on the {session.game.screen.value} screen",
        )

    if screens and session.game.screen not in screens:
        logger.warning(
            f"Game {game_id}: rejected action on the {session.game.screen.value} screen"
        )
        raise HTTPException(
            status_code=409,
            detail=f"Action not available on the {session.game.screen.value} screen",
        )

    return session


def _commit(session: GameSession, game: GameData) -> None:
    """Store the result of an action. A day computed earlier is now stale."""
    session.game = game
    session.pending_turn = None


def _state_response(session: GameSession) -> GameStateResponse:
    return GameStateResponse(
        gameId=session.id,
        screen=session.game.screen.value,
        state=session.get_state(),
    )


def _entry_response(entry: LeaderboardEntry) -> LeaderboardEntryResponse:
    return LeaderboardEntryResponse(
        name=entry.name,
        score=entry.score,
        survived=entry.survived,
        partySurvivors=entry.party_survivors,
        distanceTraveled=entry.distance_traveled,
        date=entry.date,
    )


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Caravan",
        "status": "operational",
        "activeGames": len(sessions.sessions),
    }


@app.post("/api/games", response_model=CreateGameResponse)
async def create_game(request: CreateGameRequest):
    """Create a new game on the title screen.

    Example:
        POST /api/games
        {"difficulty": "hard", "seed": 42}
    """
    try:
        session = sessions.create_session(difficulty=request.difficulty, seed=request.seed)
    except Exception as e:
        logger.error(f"Failed to create game: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create game: {str(e)}")

    return CreateGameResponse(
        gameId=session.id,
        difficulty=session.game.difficulty.value,
        seed=session.game.seed,
        state=session.get_state(),
    )


@app.get("/api/games/{game_id}/state", response_model=GameStateResponse)
async def get_game_state(game_id: str):
    """Get current game state."""
    return _state_response(_get_session(game_id))


@app.post("/api/games/{game_id}/party", response_model=GameStateResponse)
async def name_party(game_id: str, request: NamePartyRequest):
    """Name the party and open the store.

    Example:
        POST /api/games/game-abc123/party
        {"names": ["Ada", "Ben", "Cal"], "startMonth": 5}
    """
    session = _get_active_session(game_id, GameScreen.TITLE, GameScreen.NAME_PARTY)
    _commit(session, start_game(session.game, request.names, request.startMonth))
    return _state_response(session)


@app.post("/api/games/{game_id}/depart", response_model=GameStateResponse)
async def depart(game_id: str):
    """Leave the store or landmark and head out on the trail."""
    session = _get_active_session(game_id, *STORE_SCREENS)
    _commit(session, begin_travel(session.game))
    return _state_response(session)


@app.post("/api/games/{game_id}/store/buy", response_model=GameStateResponse)
async def buy(game_id: str, request: StoreRequest):
    """Buy from the store at the current location."""
    session = _get_active_session(game_id, *STORE_SCREENS)
    _commit(session, buy_item(session.game, request.item, request.quantity))
    return _state_response(session)


@app.post("/api/games/{game_id}/store/sell", response_model=GameStateResponse)
async def sell(game_id: str, request: StoreRequest):
    """Sell to the store at the current location."""
    session = _get_active_session(game_id, *STORE_SCREENS)
    _commit(session, sell_item(session.game, request.item, request.quantity))
    return _state_response(session)


@app.post("/api/games/{game_id}/turn", response_model=TurnResponse)
async def compute_turn(game_id: str):
    """Compute the next day without committing it.

    The result stays pending on the session until applied with
    POST /api/games/{game_id}/turn/apply. Computing again replaces it.
    """
    session = _get_active_session(game_id, *TRAIL_SCREENS)

    try:
        result = session.compute_turn()
    except Exception as e:
        logger.error(f"Game {game_id}: turn computation failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to compute turn: {str(e)}")

    return TurnResponse(gameId=session.id, turn=session.serialize_turn(result))


@app.post("/api/games/{game_id}/turn/apply", response_model=GameStateResponse)
async def apply_turn(game_id: str):
    """Commit the pending day."""
    session = _get_active_session(game_id, *TRAIL_SCREENS)
    if session.pending_turn is None:
        raise HTTPException(status_code=409, detail="No turn has been computed")

    session.apply_pending_turn()
    logger.info(
        f"Game {game_id}: day {session.game.days_elapsed}, "
        f"{session.game.distance_traveled} miles, screen={session.game.screen.value}"
    )
    return _state_response(session)


@app.post("/api/games/{game_id}/event", response_model=GameStateResponse)
async def resolve_event(game_id: str, request: EventChoiceRequest):
    """Resolve the pending event with the chosen option."""
    session = _get_active_session(game_id, GameScreen.EVENT)
    event = session.game.current_event
    if event is None or request.choiceId not in {c.id for c in event.choices}:
        raise HTTPException(status_code=400, detail=f"Invalid choice: {request.choiceId}")

    _commit(session, handle_event(session.game, request.choiceId))
    return _state_response(session)


@app.post("/api/games/{game_id}/river", response_model=GameStateResponse)
async def cross_river(game_id: str, request: RiverRequest):
    """Attempt the river crossing, or wait for better conditions."""
    session = _get_active_session(game_id, GameScreen.RIVER)
    _commit(session, handle_river(session.game, request.method))
    return _state_response(session)


@app.post("/api/games/{game_id}/hunt", response_model=GameStateResponse)
async def hunt(game_id: str, request: HuntRequest):
    """Spend a day hunting."""
    session = _get_active_session(game_id, *TRAIL_SCREENS)
    _commit(session, handle_hunting(session.game, request.ammo))
    return _state_response(session)


@app.post("/api/games/{game_id}/rest", response_model=GameStateResponse)
async def rest_party(game_id: str):
    """Rest for a day."""
    session = _get_active_session(game_id, *TRAIL_SCREENS, GameScreen.RIVER)
    _commit(session, rest(session.game))
    return _state_response(session)


@app.post("/api/games/{game_id}/medicine", response_model=GameStateResponse)
async def give_medicine(game_id: str, request: MedicineRequest):
    """Treat a sick party member with one dose of medicine."""
    session = _get_active_session(game_id)
    _commit(session, use_medicine_on_member(session.game, request.memberId))
    return _state_response(session)


@app.post("/api/games/{game_id}/repair", response_model=GameStateResponse)
async def repair_wagon(game_id: str):
    """Repair the wagon with one set of spare parts."""
    session = _get_active_session(game_id)
    _commit(session, repair_wagon_action(session.game))
    return _state_response(session)


@app.post("/api/games/{game_id}/pace", response_model=GameStateResponse)
async def change_pace(game_id: str, request: PaceRequest):
    session = _get_active_session(game_id)
    _commit(session, set_pace(session.game, request.pace))
    return _state_response(session)


@app.post("/api/games/{game_id}/rations", response_model=GameStateResponse)
async def change_rations(game_id: str, request: RationsRequest):
    session = _get_active_session(game_id)
    _commit(session, set_rations(session.game, request.rations))
    return _state_response(session)


@app.post("/api/games/{game_id}/score", response_model=SubmitScoreResponse)
async def submit_score(game_id: str, request: SubmitScoreRequest):
    """Record a finished game on the leaderboard."""
    session = _get_session(game_id)

    try:
        score, rank = sessions.submit_score(session, request.name)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return SubmitScoreResponse(
        score=score,
        rank=rank,
        entries=[_entry_response(e) for e in sessions.leaderboard.get_entries()],
    )


@app.get("/api/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(limit: int = 10):
    """Get the top leaderboard entries."""
    return LeaderboardResponse(
        entries=[_entry_response(e) for e in sessions.leaderboard.get_top(limit)]
    )


@app.delete("/api/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session."""
    if sessions.delete(game_id):
        return {"message": f"Game {game_id} deleted"}
    else:
        raise HTTPException(status_code=404, detail="Game not found")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
