"""Data for the outside world, the player and the persistent game state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

Position = tuple[int, int]


class TileType(Enum):
    """Kinds of tile found on the world map."""

    VILLAGE = auto()
    IRON_MINE = auto()
    COAL_MINE = auto()
    SULPHUR_MINE = auto()
    FOREST = auto()
    FIELD = auto()
    BARRENS = auto()
    ROAD = auto()
    HOUSE = auto()
    CAVE = auto()
    TOWN = auto()
    CITY = auto()
    OUTPOST = auto()
    SHIP = auto()
    BOREHOLE = auto()
    BATTLEFIELD = auto()
    SWAMP = auto()
    CACHE = auto()


class ItemType(Enum):
    """Broad categories of carried items."""

    RESOURCE = auto()
    TOOL = auto()
    WEAPON = auto()
    CONSUMABLE = auto()


@dataclass
class Item:
    """An item stack in an inventory."""

    name: str
    item_type: ItemType
    description: str = ""
    quantity: int = 1


@dataclass
class Weapon:
    """A weapon; damage is a fixed amount or the name of a status effect."""

    verb: str
    weapon_type: str
    damage: Union[int, str]
    cooldown: int
    cost: dict[str, int] | None = None


@dataclass
class Landmark:
    """How many of a landmark to place and at what distance from the village."""

    num: int
    min_radius: int
    max_radius: int
    scene: str
    label: str


@dataclass
class WorldConfig:
    """Tunable parameters of the outside world."""

    radius: int = 0
    village_pos: Position = (0, 0)
    tile_probs: dict[TileType, float] = field(default_factory=dict)
    landmarks: dict[TileType, Landmark] = field(default_factory=dict)
    stickiness: float = 0.0
    light_radius: int = 0
    base_water: int = 0
    moves_per_food: int = 0
    moves_per_water: int = 0
    death_cooldown: int = 0
    fight_chance: float = 0.0
    base_health: int = 0
    base_hit_chance: float = 0.0
    meat_heal: int = 0
    meds_heal: int = 0
    fight_delay: int = 0
    weapons: dict[str, Weapon] = field(default_factory=dict)

    def size(self) -> int:
        """Side length of the square map."""
        return self.radius * 2


@dataclass
class WorldState:
    """The state of one expedition into the world."""

    map: list[list[TileType]] = field(default_factory=list)
    mask: list[list[bool]] = field(default_factory=list)
    cur_pos: Position = (0, 0)
    water: int = 0
    health: int = 0
    outfit: dict[str, int] = field(default_factory=dict)
    used_outposts: set[Position] = field(default_factory=set)
    food_move: int = 0
    water_move: int = 0
    fight_move: int = 0
    dead: bool = False
    starvation: bool = False
    thirst: bool = False
    danger: bool = False
    iron_mine: bool = False
    coal_mine: bool = False
    sulphur_mine: bool = False
    ship: bool = False


@dataclass
class Player:
    """The wanderer's capabilities and belongings."""

    max_health: int = 0
    hit_chance: float = 0.0
    max_water: int = 0
    health: int = 0
    stamina: int = 0
    inventory: list[Item] = field(default_factory=list)


@dataclass
class GameState:
    """Persistent state shared between scenes: stores, buildings and perks."""

    resources: dict[str, int] = field(default_factory=dict)
    buildings: dict[str, int] = field(default_factory=dict)
    unlocked_items: list[str] = field(default_factory=list)
    player_health: int = 0
    days_passed: int = 0
    perks: set[str] = field(default_factory=set)
    features: set[str] = field(default_factory=set)

    def has_perk(self, perk: str) -> bool:
        return perk in self.perks

    def store(self, name: str) -> int:
        """Amount of a stored resource, zero when absent."""
        return self.resources.get(name, 0)

    def add_store(self, name: str, amount: int) -> int:
        """Change a stored resource; raises ValueError if it would go negative."""
        return _adjust(self.resources, name, amount)

    def building(self, name: str) -> int:
        """Number of a building, zero when absent."""
        return self.buildings.get(name, 0)

    def add_building(self, name: str, amount: int) -> int:
        """Change a building count; raises ValueError if it would go negative."""
        return _adjust(self.buildings, name, amount)


def _adjust(counts: dict[str, int], name: str, amount: int) -> int:
    total = counts.get(name, 0) + amount
    if total < 0:
        raise ValueError(f"{name!r} cannot drop below zero")
    counts[name] = total
    return total


def new_world_state(config: WorldConfig) -> WorldState:
    """A fresh expedition: barren unexplored map, standing in the village."""
    size = config.size()
    return WorldState(
        map=[[TileType.BARRENS] * size for _ in range(size)],
        mask=[[False] * size for _ in range(size)],
        cur_pos=config.village_pos,
        water=config.base_water,
        health=config.base_health,
    )