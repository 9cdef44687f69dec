"""Top-level states the game moves between."""

from enum import Enum, auto


class AppState(Enum):
    """A scene the game can be in; the first member is the starting state."""

    MAIN_MENU = auto()
    IN_GAME = auto()
    PAUSED = auto()
    GAME_OVER = auto()
    ROOM = auto()
    VILLAGE = auto()
    PATH = auto()
    WORLD = auto()