"""Map grid validation and player placement."""

from __future__ import annotations

from dataclasses import dataclass

HEADINGS = {"N": 270, "S": 90, "E": 0, "W": 180}
WALKABLE = frozenset("0NSEWD")
SOLID = frozenset("1 ")
_VOID = frozenset(" ")

_NEIGHBOURS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (1, 1), (-1, 1), (1, -1),
)


class MapError(ValueError):
    """Raised when a map grid is not a closed, valid level."""

    def __init__(self, message: str = "Invalid map") -> None:
        super().__init__(message)


@dataclass
class Player:
    """Player position in map units and heading in degrees."""

    x: float
    y: float
    pov: int


def heading_for(char: str) -> int:
    """Return the heading in degrees for a start marker N, S, E or W."""
    try:
        return HEADINGS[char]
    except KeyError:
        raise ValueError(f"not a player marker: {char!r}") from None


def _row(grid: list[str], row: int) -> str:
    text = grid[row]
    return text[:-1] if text.endswith("\n") else text


def _cell(grid: list[str], row: int, col: int) -> str:
    """Return the cell, or '' for anything outside the grid."""
    if row < 0 or row >= len(grid) or col < 0:
        return ""
    text = _row(grid, row)
    return text[col] if col < len(text) else ""


def check_surroundings(grid: list[str], row: int, col: int) -> None:
    """Raise MapError unless the walkable cell at (row, col) is enclosed."""
    if row - 1 < 0 or col - 1 < 0 or row + 1 >= len(grid) \
            or col + 1 >= len(_row(grid, row)):
        raise MapError()
    for d_row, d_col in _NEIGHBOURS:
        neighbour = _cell(grid, row + d_row, col + d_col)
        if neighbour == "" or neighbour in _VOID:
            raise MapError()


def scan_row(grid: list[str], row: int) -> list[Player]:
    """Check every cell of one row and return the players started in it."""
    players = []
    for col, char in enumerate(_row(grid, row)):
        if char in HEADINGS:
            players.append(Player(x=col + 0.5, y=row + 0.5, pov=heading_for(char)))
        if char in WALKABLE:
            check_surroundings(grid, row, col)
        elif char not in SOLID:
            raise MapError()
    return players


def validate_map(grid: list[str]) -> Player:
    """Validate the whole grid and return its single player."""
    players = [player for row in range(len(grid)) for player in scan_row(grid, row)]
    if len(players) != 1:
        raise MapError()
    return players[0]


def has_xpm_extension(path: str | None) -> bool:
    """Return True when ``path`` ends in '.xpm'."""
    if not path or len(path) < 4:
        return False
    return path[-4:] == ".xpm"