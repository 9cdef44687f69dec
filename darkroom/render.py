"""Drawing the explored part of the world map."""

from __future__ import annotations

from typing import Any

from .world import TileType, WorldConfig, WorldState

Color = tuple[float, float, float]

TILE_SIZE = 32.0
BACKGROUND: Color = (0.1, 0.1, 0.1)
PLAYER_COLOR: Color = (1.0, 0.0, 0.0)
PLAYER_SYMBOL = "@"
UNSEEN_SYMBOL = " "

_COLORS: dict[TileType, Color] = {
    TileType.VILLAGE: (0.2, 0.6, 0.2),
    TileType.IRON_MINE: (0.5, 0.5, 0.5),
    TileType.COAL_MINE: (0.1, 0.1, 0.1),
    TileType.SULPHUR_MINE: (0.8, 0.8, 0.2),
    TileType.FOREST: (0.1, 0.5, 0.1),
    TileType.FIELD: (0.4, 0.8, 0.4),
    TileType.BARRENS: (0.8, 0.6, 0.2),
    TileType.ROAD: (0.3, 0.3, 0.3),
    TileType.HOUSE: (0.6, 0.4, 0.2),
    TileType.CAVE: (0.3, 0.3, 0.5),
    TileType.TOWN: (0.5, 0.5, 0.5),
    TileType.CITY: (0.4, 0.4, 0.4),
    TileType.OUTPOST: (0.6, 0.3, 0.3),
    TileType.SHIP: (0.2, 0.2, 0.8),
    TileType.BOREHOLE: (0.8, 0.2, 0.8),
    TileType.BATTLEFIELD: (0.8, 0.2, 0.2),
    TileType.SWAMP: (0.1, 0.5, 0.4),
    TileType.CACHE: (0.6, 0.6, 0.2),
}

_SYMBOLS: dict[TileType, str] = {
    TileType.VILLAGE: "A",
    TileType.IRON_MINE: "I",
    TileType.COAL_MINE: "C",
    TileType.SULPHUR_MINE: "S",
    TileType.FOREST: ";",
    TileType.FIELD: ",",
    TileType.BARRENS: ".",
    TileType.ROAD: "#",
    TileType.HOUSE: "H",
    TileType.CAVE: "V",
    TileType.TOWN: "O",
    TileType.CITY: "Y",
    TileType.OUTPOST: "P",
    TileType.SHIP: "W",
    TileType.BOREHOLE: "B",
    TileType.BATTLEFIELD: "F",
    TileType.SWAMP: "M",
    TileType.CACHE: "U",
}


def tile_color(tile: TileType) -> Color:
    """RGB colour of a tile, each channel in 0..1."""
    return _COLORS[tile]


def tile_symbol(tile: TileType) -> str:
    """Single character used for a tile in the text map."""
    return _SYMBOLS[tile]


def _square(x: int, y: int, color: Color) -> dict[str, Any]:
    return {
        "x": x,
        "y": y,
        "left": TILE_SIZE * x,
        "top": TILE_SIZE * y,
        "size": TILE_SIZE,
        "color": color,
    }


def render_world(config: WorldConfig, state: WorldState) -> dict[str, Any]:
    """Lay out the revealed tiles and the player marker as pixel squares."""
    size = config.size()
    tiles = []
    for y in range(size):
        for x in range(size):
            if state.mask[x][y]:
                tile = state.map[x][y]
                square = _square(x, y, tile_color(tile))
                square["tile"] = tile
                tiles.append(square)

    px, py = state.cur_pos
    player = _square(px, py, PLAYER_COLOR) if state.mask[px][py] else None
    return {
        "width": TILE_SIZE * size,
        "height": TILE_SIZE * size,
        "background": BACKGROUND,
        "tiles": tiles,
        "player": player,
    }


def render_text(config: WorldConfig, state: WorldState) -> str:
    """The map as text, one row per line; unexplored cells are blank."""
    size = config.size()
    rows = []
    for y in range(size):
        cells = []
        for x in range(size):
            if not state.mask[x][y]:
                cells.append(UNSEEN_SYMBOL)
            elif (x, y) == state.cur_pos:
                cells.append(PLAYER_SYMBOL)
            else:
                cells.append(tile_symbol(state.map[x][y]))
        rows.append("".join(cells))
    return "\n".join(rows)