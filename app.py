from __future__ import annotations

import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException

from hexnav import config
from hexnav.hexgrid import HexCoordinate, WorldPosition
from hexnav.pathfinding import find_path
from hexnav.render_ascii import render_map_ascii
from hexnav.session import NavigationSession
from scenarios.simple_scenario import build_session

config.setup_logging()

app = FastAPI(title="Hex Navigation")

# In-memory only; sessions do not survive a restart.
SESSIONS: Dict[str, NavigationSession] = {}


def _get_session(map_id: str) -> NavigationSession:
    session = SESSIONS.get(map_id)
    if session is None:
        raise HTTPException(status_code=404, detail="No such map")
    return session


def _hex_from(value: Any, name: str) -> HexCoordinate:
    try:
        q, r = value
        return HexCoordinate(int(q), int(r))
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail=f"{name} must be [q, r]") from None


def _hex_list(path: List[HexCoordinate]) -> List[List[int]]:
    return [[h.q, h.r] for h in path]


def _state(map_id: str, session: NavigationSession) -> dict[str, Any]:
    boat = session.boat.current_hex
    return {
        "map_id": map_id,
        "hex_size": session.grid.get_hex_size(),
        "tile_count": session.grid.tile_count(),
        "boat": [boat.q, boat.r],
        "map_text": render_map_ascii(session.grid, session.last_path, session.boat),
    }


@app.get("/maps")
def list_maps():
    return {"maps": list(SESSIONS)}


@app.post("/maps")
def create_map(payload: Optional[Dict[str, Any]] = None):
    payload = payload or {}
    map_text = payload.get("map_text")
    hex_size = payload.get("hex_size")
    seed = payload.get("seed")
    try:
        session = build_session(
            map_text=None if map_text is None else str(map_text),
            hex_size=None if hex_size is None else float(hex_size),
            seed=None if seed is None else int(seed),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None

    map_id = str(uuid.uuid4())
    SESSIONS[map_id] = session
    return {"map_id": map_id}


@app.get("/maps/{map_id}/state")
def get_state(map_id: str):
    return _state(map_id, _get_session(map_id))


@app.post("/maps/{map_id}/path")
def post_path(map_id: str, payload: Dict[str, Any]):
    session = _get_session(map_id)
    start = _hex_from(payload.get("start"), "start")
    goal = _hex_from(payload.get("goal"), "goal")

    path = find_path(session.grid, start, goal)
    return {
        "found": bool(path),
        "path": _hex_list(path),
        "waypoints": [list(p) for p in session.boat.waypoints(path)],
    }


@app.post("/maps/{map_id}/click")
def post_click(map_id: str, payload: Dict[str, Any]):
    session = _get_session(map_id)
    try:
        x, y = int(payload["x"]), int(payload["y"])
    except (KeyError, TypeError, ValueError):
        raise HTTPException(status_code=400, detail="x and y must be integers") from None

    path = session.click_offset(x, y)
    session.finish()
    boat = session.boat.current_hex
    return {"path": _hex_list(path), "boat": [boat.q, boat.r]}


@app.post("/maps/{map_id}/obstacles")
def post_obstacle(map_id: str, payload: Dict[str, Any]):
    session = _get_session(map_id)
    h = _hex_from([payload.get("q"), payload.get("r")], "q/r")
    obstacle = payload.get("obstacle", True)
    if not isinstance(obstacle, bool):
        raise HTTPException(status_code=400, detail="obstacle must be true or false")
    ok = session.grid.set_obstacle(h, obstacle)
    return {"ok": ok}


@app.get("/maps/{map_id}/hex")
def get_hex(map_id: str, x: float, z: float):
    session = _get_session(map_id)
    h = session.grid.world_to_hex(WorldPosition(x, 0.0, z))
    ox, oy = h.to_offset()
    return {"q": h.q, "r": h.r, "offset": [ox, oy], "valid": session.grid.is_valid_hex(h)}
