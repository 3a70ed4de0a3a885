"""HTTP API entrypoint for driving one board session from a web UI."""

import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from board import BoardConfig, BoardEngine, BoardError, Pair, Player
from infra.logger import configure_logging, get_logger

load_dotenv()
configure_logging(logfile=os.getenv("BOARD_LOG_FILE") or None)

log = get_logger(__name__)

app = FastAPI()
engine: BoardEngine | None = None


# Allow the browser-based board (served from file:// or other origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class StartRequest(BaseModel):
    players: list[str] = Field(min_length=1)
    seed: int | None = None
    config: dict | None = None


class MoveRequest(BaseModel):
    player: str
    position: int


class SwapRequest(BaseModel):
    player: str
    weapon_position: int


class AttackRequest(BaseModel):
    from_position: int
    to_position: int


class ShieldRequest(BaseModel):
    position: int


def load_config(overrides: dict | None = None) -> BoardConfig:
    """Config from the request, else from the $BOARD_CONFIG JSON file, else the default board."""
    if overrides is not None:
        return BoardConfig.from_dict(overrides)
    path = os.getenv("BOARD_CONFIG")
    if path:
        return BoardConfig.from_json(filepath=path)
    return BoardConfig.default()


def _require_engine() -> BoardEngine:
    if engine is None:
        raise HTTPException(400, "No active game")
    return engine


def _require_player(name: str) -> Player:
    player = _require_engine().get_player(name)
    if player is None:
        raise HTTPException(404, f"Unknown player {name!r}")
    return player


@app.post("/start")
def start(request: StartRequest):
    global engine
    if len(set(request.players)) != len(request.players):
        raise HTTPException(400, "Player names must be unique")
    try:
        config = load_config(request.config)
        new_engine = BoardEngine(config, seed=request.seed)
        new_engine.initialize_empty_board()
        new_engine.place_all([config.make_player(name) for name in request.players])
    except BoardError as exc:
        raise HTTPException(400, str(exc)) from exc
    engine = new_engine
    log.info("Game started with players %s", request.players)
    return {"success": True, "board": engine.to_dict()}


@app.post("/move")
def move(request: MoveRequest):
    current = _require_engine()
    player = _require_player(request.player)
    try:
        encounters = current.move_player(player, request.position)
    except BoardError as exc:
        raise HTTPException(400, str(exc)) from exc
    return {"encounters": [e.to_dict() for e in encounters], "board": current.to_dict()}


@app.post("/swap")
def swap(request: SwapRequest):
    current = _require_engine()
    player = _require_player(request.player)
    occupant = current.occupant_at(request.weapon_position)
    if isinstance(occupant, Pair):
        weapon = occupant.weapon
    elif occupant.is_weapon_only:
        weapon = occupant.entity
    else:
        raise HTTPException(400, f"No weapon at position {request.weapon_position}")
    try:
        dropped = current.swap_weapon(player, weapon)
    except BoardError as exc:
        raise HTTPException(400, str(exc)) from exc
    return {"dropped": dropped.to_dict(), "weapon": player.weapon.to_dict()}


@app.get("/highlights/{position}")
def highlights(position: int):
    current = _require_engine()
    if not current.grid.in_bounds(position):
        raise HTTPException(400, f"Position {position} is out of bounds")
    return {"highlights": sorted(current.compute_highlights(position))}


@app.delete("/highlights")
def clear_highlights():
    _require_engine().clear_highlights()
    return {"success": True}


@app.post("/attack")
def attack(request: AttackRequest):
    direction = _require_engine().attack(request.from_position, request.to_position)
    return {"direction": str(direction)}


@app.delete("/attack")
def clear_attack():
    _require_engine().clear_attack_marks()
    return {"success": True}


@app.post("/shield")
def add_shield(request: ShieldRequest):
    _require_engine().add_shield(request.position)
    return {"success": True}


@app.delete("/shield")
def remove_shield(position: int | None = None):
    _require_engine().remove_shield(position)
    return {"success": True}


@app.get("/state")
def state():
    if engine is None:
        return {"active": False}
    return {"active": True, "board": engine.to_dict()}


@app.post("/reset")
def reset():
    global engine
    _require_engine().reset_all()
    engine = None
    return {"success": True, "message": "Game reset"}
