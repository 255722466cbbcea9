# hexnav/hexgrid.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

SQRT3 = math.sqrt(3.0)

# Neighbor enumeration order. Ring walks and tie-breaks downstream depend on it,
# so it never changes.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (1, -1), (0, -1),
    (-1, 0), (-1, 1), (0, 1),
)


class WorldPosition(NamedTuple):
    """World-space point. Hexes lie on the ground plane (y == 0)."""
    x: float
    y: float
    z: float


@dataclass(frozen=True, order=True, slots=True)
class HexCoordinate:
    """Axial hex coordinate. `s` is derived, so q + r + s == 0 always holds."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __repr__(self) -> str:
        return f"({self.q},{self.r})"

    # --- offset coordinates (odd rows shifted right) ---

    @classmethod
    def from_offset(cls, x: int, y: int) -> HexCoordinate:
        q = x - (y - (y & 1)) // 2
        return cls(q, y)

    def to_offset(self) -> Tuple[int, int]:
        x = self.q + (self.r - (self.r & 1)) // 2
        return x, self.r

    # --- world space (pointy-top layout) ---

    def to_world(self, hex_size: float = 1.0) -> WorldPosition:
        x = hex_size * (SQRT3 * self.q + SQRT3 / 2.0 * self.r)
        z = hex_size * (1.5 * self.r)
        return WorldPosition(x, 0.0, z)

    @classmethod
    def from_world(cls, pos: WorldPosition, hex_size: float = 1.0) -> HexCoordinate:
        q = (2.0 / 3.0 * pos.x) / hex_size
        r = (-1.0 / 3.0 * pos.x + SQRT3 / 3.0 * pos.z) / hex_size
        return hex_round(q, r)

    # --- metrics ---

    def distance_to(self, other: HexCoordinate) -> int:
        return hex_distance(self, other)

    def neighbors(self) -> List[HexCoordinate]:
        return [HexCoordinate(self.q + dq, self.r + dr) for dq, dr in DIRECTIONS]


def hex_round(q: float, r: float) -> HexCoordinate:
    """Snap fractional axial coordinates to the nearest hex.

    Each cube axis is rounded on its own, then the axis with the largest
    rounding error is recomputed from the other two. Precedence on ties:
    q only when its error is strictly the largest, else r when its error
    strictly exceeds s's, else s.
    """
    s = -q - r

    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    # else: s is recomputed implicitly, it is never stored

    return HexCoordinate(int(rq), int(rr))


def hex_distance(a: HexCoordinate, b: HexCoordinate) -> int:
    # axial distance via cube coords
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


def are_adjacent(a: HexCoordinate, b: HexCoordinate) -> bool:
    return hex_distance(a, b) == 1
