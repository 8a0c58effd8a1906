"""Ray casting against the map grid: wall distances, faces and doors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from raymaze.worldmap import Player

RAD = 0.0174533
FIELD_OF_VIEW = 60.0
GAME_WIDTH = 1920
RAY_STEP = 0.01
FACE_PROBE = 0.01
DOOR_STEP = 0.1
DOOR_REACH = 2.0

WALL = "1"
DOOR = "D"
OPEN_DOOR = "A"


class Face(IntEnum):
    """Side of a block a ray hit, named for where the block lies from the hit."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3
    DOOR_NORTH = 4
    DOOR_SOUTH = 5
    DOOR_WEST = 6
    DOOR_EAST = 7

    @property
    def is_door(self) -> bool:
        return self >= Face.DOOR_NORTH

    @property
    def texture_index(self) -> int:
        """Index of the texture drawn for this face: one per wall side, one for doors."""
        return min(int(self), 4)


@dataclass(frozen=True)
class RayHit:
    """Where a single ray stopped."""

    angle: float
    distance: float
    face: Face
    x: float
    y: float


def _cell(grid: list[str], row: int, col: int) -> str | None:
    if row < 0 or row >= len(grid):
        return None
    text = grid[row]
    if col < 0 or col >= len(text):
        return None
    return text[col]


def _point(player: Player, angle: float, distance: float) -> tuple[float, float]:
    return (
        player.x + math.cos(angle * RAD) * distance,
        player.y + math.sin(angle * RAD) * distance,
    )


def _face(grid: list[str], player: Player, angle: float, distance: float,
          block: str, faces: tuple[Face, Face, Face, Face]) -> Face:
    p_x, p_y = _point(player, angle, distance - FACE_PROBE)
    if _cell(grid, int(p_y - FACE_PROBE), int(p_x)) == block:
        return faces[0]
    if _cell(grid, int(p_y + FACE_PROBE), int(p_x)) == block:
        return faces[1]
    if _cell(grid, int(p_y), int(p_x - FACE_PROBE)) == block:
        return faces[2]
    return faces[3]


def wall_face(grid: list[str], player: Player, angle: float, distance: float) -> Face:
    """Return which side of a wall a ray of ``distance`` along ``angle`` hit."""
    return _face(grid, player, angle, distance, WALL,
                 (Face.NORTH, Face.SOUTH, Face.WEST, Face.EAST))


def door_face(grid: list[str], player: Player, angle: float, distance: float) -> Face:
    """Return which side of a closed door a ray of ``distance`` along ``angle`` hit."""
    return _face(grid, player, angle, distance, DOOR,
                 (Face.DOOR_NORTH, Face.DOOR_SOUTH, Face.DOOR_WEST, Face.DOOR_EAST))


def cast_ray(grid: list[str], player: Player, angle: float) -> RayHit:
    """March a ray from the player until it meets a wall or a closed door.

    Raises ValueError if the ray leaves the grid without hitting anything.
    """
    distance = RAY_STEP
    while True:
        p_x, p_y = _point(player, angle, distance)
        cell = _cell(grid, int(p_y), int(p_x))
        if cell is None:
            raise ValueError(f"ray at {angle} degrees left the map")
        if cell in (WALL, DOOR):
            break
        distance += RAY_STEP
    if cell == WALL:
        face = wall_face(grid, player, angle, distance)
    else:
        face = door_face(grid, player, angle, distance)
    return RayHit(angle=angle, distance=distance, face=face, x=p_x, y=p_y)


def cast_fan(grid: list[str], player: Player, width: int = GAME_WIDTH) -> list[RayHit]:
    """Cast ``width`` rays evenly across the field of view, left to right."""
    if width <= 0:
        raise ValueError("width must be positive")
    step = FIELD_OF_VIEW / width
    start = player.pov - FIELD_OF_VIEW / 2
    return [cast_ray(grid, player, start + column * step) for column in range(width)]


def toggle_door(grid: list[str], player: Player) -> tuple[int, int] | None:
    """Open or close the nearest door straight ahead within reach.

    The grid is updated in place. Returns the (row, col) of the door that
    changed, or None when no door is within reach.
    """
    steps = int(round(DOOR_REACH / DOOR_STEP))
    for k in range(1, steps):
        p_x, p_y = _point(player, player.pov, k * DOOR_STEP)
        row, col = int(p_y), int(p_x)
        cell = _cell(grid, row, col)
        if cell in (DOOR, OPEN_DOOR):
            replacement = OPEN_DOOR if cell == DOOR else DOOR
            text = grid[row]
            grid[row] = text[:col] + replacement + text[col + 1:]
            return row, col
    return None