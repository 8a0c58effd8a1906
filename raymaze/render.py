"""Framebuffer drawing: screen clearing, the minimap and the player marker."""

from __future__ import annotations

from array import array

from raymaze.worldmap import Player

UNIT_SIZE = 16
SCR_WIDTH = 3840
SCR_HEIGHT = 2160
PLAYER_HALF_SIZE = 5

BLACK = 0x000000
RED = 0xFF0000
GREEN = 0x5D9560
WHITE = 0xFDFBFB
PURPLE = 0x9B329F

_TILE_COLORS = {"1": RED, "D": GREEN, "A": PURPLE}


class Framebuffer:
    """A width x height grid of 32-bit colour values."""

    def __init__(self, width: int = SCR_WIDTH, height: int = SCR_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = array("I", bytes(4 * width * height))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        self.pixels[self._index(x, y)] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        return self.pixels[self._index(x, y)]

    def fill(self, color: int = BLACK) -> None:
        """Set every pixel to ``color``."""
        self.pixels = array("I", [color & 0xFFFFFFFF]) * (self.width * self.height)


def tile_color(cell: str) -> int:
    """Return the minimap colour of a wall, closed door or open door cell."""
    try:
        return _TILE_COLORS[cell]
    except KeyError:
        raise ValueError(f"cell {cell!r} is not drawn on the minimap") from None


def draw_tile(framebuffer: Framebuffer, grid: list[str], x: int, y: int) -> None:
    """Paint the minimap square for grid cell (x, y)."""
    color = tile_color(grid[y][x])
    for row in range(y * UNIT_SIZE, (y + 1) * UNIT_SIZE):
        for col in range(x * UNIT_SIZE, (x + 1) * UNIT_SIZE):
            framebuffer.put_pixel(col, row, color)


def draw_minimap(framebuffer: Framebuffer, grid: list[str]) -> None:
    """Paint every wall and door of the grid onto the framebuffer."""
    for y, line in enumerate(grid):
        for x, cell in enumerate(line):
            if cell in _TILE_COLORS:
                draw_tile(framebuffer, grid, x, y)


def draw_player(framebuffer: Framebuffer, player: Player) -> None:
    """Paint a small square centred on the player's minimap position."""
    centre_x = player.x * UNIT_SIZE
    centre_y = player.y * UNIT_SIZE
    y = int(centre_y - PLAYER_HALF_SIZE)
    while y < centre_y + PLAYER_HALF_SIZE:
        x = int(centre_x - PLAYER_HALF_SIZE)
        while x < centre_x + PLAYER_HALF_SIZE:
            framebuffer.put_pixel(x, y, WHITE)
            x += 1
        y += 1