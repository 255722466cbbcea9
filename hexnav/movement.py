# hexnav/movement.py
from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Sequence

from hexnav.hexgrid import HexCoordinate, WorldPosition
from hexnav.map import HexGridMap


class Boat:
    """Follows a path one hex per step.

    Stepping is driven by the caller (one `step()` per frame or tick); there
    is no animation or interpolation here.
    """

    def __init__(self, grid: HexGridMap, start: HexCoordinate = HexCoordinate(0, 0)):
        self.grid = grid
        self.current_hex = start
        self.position = grid.hex_to_world(start)
        self._queue: Deque[HexCoordinate] = deque()

    @property
    def is_moving(self) -> bool:
        return bool(self._queue)

    def set_position(self, hex_: HexCoordinate) -> None:
        self.cancel()
        self.current_hex = hex_
        self.position = self.grid.hex_to_world(hex_)

    def waypoints(self, path: Sequence[HexCoordinate]) -> List[WorldPosition]:
        return [self.grid.hex_to_world(h) for h in path]

    def begin(self, path: Sequence[HexCoordinate]) -> None:
        if not path:
            return
        # path[0] is the hex we are standing on
        self._queue = deque(path[1:])

    def step(self) -> Optional[WorldPosition]:
        if not self._queue:
            return None
        target = self._queue.popleft()
        self.current_hex = target
        self.position = self.grid.hex_to_world(target)
        return self.position

    def move_to(self, path: Sequence[HexCoordinate]) -> List[WorldPosition]:
        self.begin(path)
        visited = []
        while self.is_moving:
            visited.append(self.step())
        return visited

    def cancel(self) -> None:
        self._queue.clear()

    def has_valid_position(self) -> bool:
        return self.grid.is_walkable(self.current_hex)

    def __repr__(self):
        state = "moving" if self.is_moving else "idle"
        return f"Boat at {self.current_hex} ({state})"
