"""Moving across the world map and the upkeep every step costs."""

from __future__ import annotations

import random
from collections.abc import Mapping
from enum import Enum

from .app_state import AppState
from .world import GameState, Position, TileType, Weapon, WorldConfig, WorldState
from .world_gen import light_map

_KEEP_IN_OUTFIT = frozenset({"cured meat", "bullets", "energy cell", "charm", "medicine"})

_DANGER_NEAR = 8
_DANGER_FAR = 18


class Direction(Enum):
    """A step on the map as an (dx, dy) offset; north is up."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    WEST = (-1, 0)
    EAST = (1, 0)


class MoveOutcome(Enum):
    """What came of an attempted move."""

    DEAD = "dead"
    BLOCKED = "blocked"
    MOVED = "moved"
    FIGHT = "fight"
    HOME = "home"
    DIED = "died"


def get_distance(a: Position, b: Position) -> int:
    """Manhattan distance between two map positions."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def leave_it_at_home(item: str, weapons: Mapping[str, Weapon]) -> bool:
    """Whether an item is dropped from the outfit on returning to the village."""
    return item not in _KEEP_IN_OUTFIT and item not in weapons


def init_world_state(state: WorldState, config: WorldConfig) -> None:
    """Reset an expedition to its starting values."""
    state.water = config.base_water
    state.health = config.base_health
    state.food_move = 0
    state.water_move = 0
    state.used_outposts.clear()
    state.cur_pos = config.village_pos
    state.dead = False


class Expedition:
    """A trip into the world: moves the wanderer and applies the rules of each step."""

    def __init__(
        self,
        config: WorldConfig,
        state: WorldState,
        game: GameState,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config
        self.state = state
        self.game = game
        self.rng = rng if rng is not None else random.Random()
        self.messages: list[str] = []
        self.next_state: AppState | None = None

    def _say(self, message: str) -> None:
        self.messages.append(message)

    def move(self, direction: Direction) -> MoveOutcome:
        """Take one step and resolve its consequences."""
        if self.state.dead:
            return MoveOutcome.DEAD
        size = self.config.size()
        x, y = self.state.cur_pos
        dx, dy = direction.value
        nx, ny = x + dx, y + dy
        if not (0 <= nx < size and 0 <= ny < size):
            return MoveOutcome.BLOCKED

        old_tile = self.state.map[x][y]
        new_tile = self.state.map[nx][ny]
        self._say(f"Moved from {_tile_name(old_tile)} to {_tile_name(new_tile)}")
        light_map(nx, ny, self.config, self.state.mask, self.game.has_perk("scout"))
        self.state.cur_pos = (nx, ny)

        if new_tile is TileType.VILLAGE:
            self.go_home()
            return MoveOutcome.HOME
        if not self.use_supplies():
            self.die()
            return MoveOutcome.DIED
        fought = self.check_fight()
        self.check_danger()
        return MoveOutcome.FIGHT if fought else MoveOutcome.MOVED

    def use_supplies(self) -> bool:
        """Eat and drink as the step counters demand; False when the wanderer perishes."""
        state = self.state
        state.food_move += 1
        state.water_move += 1

        per_food = self.config.moves_per_food * (
            2 if self.game.has_perk("slow metabolism") else 1
        )
        if state.food_move >= per_food:
            state.food_move = 0
            meat = state.outfit.get("cured meat", 0) - 1
            if meat == 0:
                self._say("The meat has run out")
            elif meat < 0:
                meat = 0
                if state.starvation:
                    state.outfit["cured meat"] = meat
                    return False
                self._say("Starvation sets in")
                state.starvation = True
            else:
                state.starvation = False
                heal = self.config.meat_heal * (2 if self.game.has_perk("gastronome") else 1)
                state.health = min(state.health + heal, self.max_health())
            state.outfit["cured meat"] = meat

        per_water = self.config.moves_per_water * (
            2 if self.game.has_perk("desert rat") else 1
        )
        if state.water_move >= per_water:
            state.water_move = 0
            water = state.water - 1
            if water == 0:
                self._say("There is no more water")
            elif water < 0:
                water = 0
                if state.thirst:
                    state.water = water
                    return False
                self._say("The thirst becomes unbearable")
                state.thirst = True
            else:
                state.thirst = False
            state.water = water
        return True

    def check_fight(self) -> bool:
        """Count the step towards an encounter and roll for one; True if it happens."""
        self.state.fight_move += 1
        if self.state.fight_move <= self.config.fight_delay:
            return False
        chance = self.config.fight_chance * (0.5 if self.game.has_perk("stealthy") else 1.0)
        if self.rng.random() < chance:
            self.state.fight_move = 0
            self._say("Encountered an enemy!")
            return True
        return False

    def check_danger(self) -> bool:
        """Update whether the wanderer is too far out for their armour."""
        state = self.state
        distance = get_distance(state.cur_pos, self.config.village_pos)
        if not state.danger:
            if self.game.store("i armour") == 0 and distance >= _DANGER_NEAR:
                state.danger = True
            elif self.game.store("s armour") == 0 and distance >= _DANGER_FAR:
                state.danger = True
        elif distance < _DANGER_NEAR:
            state.danger = False
        elif distance < _DANGER_FAR and self.game.store("i armour") > 0:
            state.danger = False
        return state.danger

    def go_home(self) -> None:
        """Return to the village: claim cleared mines, unpack the outfit, take the path."""
        state, game = self.state, self.game
        for found, building in (
            (state.sulphur_mine, "sulphur mine"),
            (state.iron_mine, "iron mine"),
            (state.coal_mine, "coal mine"),
        ):
            if found and game.building(building) == 0:
                game.add_building(building, 1)
        if state.ship:
            game.features.add("location.spaceShip")

        for item, count in list(state.outfit.items()):
            game.add_store(item, count)
            if leave_it_at_home(item, self.config.weapons):
                state.outfit[item] = 0
        self.next_state = AppState.PATH

    def die(self) -> None:
        """End the expedition: everything carried is lost and the wanderer wakes in the room."""
        if self.state.dead:
            return
        self.state.dead = True
        self._say("Player died!")
        self.state.outfit.clear()
        self.next_state = AppState.ROOM

    def max_health(self) -> int:
        """Health ceiling given the best armour in the stores."""
        base = self.config.base_health
        if self.game.store("s armour") > 0:
            return base + 35
        if self.game.store("i armour") > 0:
            return base + 15
        if self.game.store("l armour") > 0:
            return base + 5
        return base


def _tile_name(tile: TileType) -> str:
    return tile.name.lower().replace("_", " ")