"""World configuration, map generation and fog of war."""

from __future__ import annotations

import random

from .world import (
    Landmark,
    Player,
    Position,
    TileType,
    Weapon,
    WorldConfig,
    WorldState,
    new_world_state,
)

_TERRAIN = frozenset({TileType.FOREST, TileType.FIELD, TileType.BARRENS})
_MAX_PLACEMENT_ATTEMPTS = 10_000


def default_config() -> WorldConfig:
    """The standard world: radius 30 with its landmarks and weapons."""
    config = WorldConfig(
        radius=30,
        village_pos=(30, 30),
        stickiness=0.5,
        light_radius=2,
        fight_chance=0.20,
        base_health=10,
        base_hit_chance=0.8,
        meat_heal=8,
        meds_heal=20,
        fight_delay=3,
    )
    config.tile_probs = {
        TileType.FOREST: 0.15,
        TileType.FIELD: 0.35,
        TileType.BARRENS: 0.5,
    }
    far = int(config.radius * 1.5)
    config.landmarks = {
        TileType.OUTPOST: Landmark(0, 0, 0, "outpost", "An Outpost"),
        TileType.IRON_MINE: Landmark(1, 5, 5, "ironmine", "Iron Mine"),
        TileType.COAL_MINE: Landmark(1, 10, 10, "coalmine", "Coal Mine"),
        TileType.SULPHUR_MINE: Landmark(1, 20, 20, "sulphurmine", "Sulphur Mine"),
        TileType.HOUSE: Landmark(10, 0, far, "house", "An Old House"),
        TileType.CAVE: Landmark(5, 3, 10, "cave", "A Damp Cave"),
        TileType.TOWN: Landmark(10, 10, 20, "town", "An Abandoned Town"),
        TileType.CITY: Landmark(20, 20, far, "city", "A Ruined City"),
        TileType.SHIP: Landmark(1, 28, 28, "ship", "A Crashed Starship"),
        TileType.BOREHOLE: Landmark(10, 15, far, "borehole", "A Borehole"),
        TileType.BATTLEFIELD: Landmark(5, 18, far, "battlefield", "A Battlefield"),
        TileType.SWAMP: Landmark(1, 15, far, "swamp", "A Murky Swamp"),
    }
    config.weapons = {
        "fists": Weapon("punch", "unarmed", 1, 2),
        "bone spear": Weapon("stab", "melee", 2, 2),
        "iron sword": Weapon("swing", "melee", 4, 2),
        "steel sword": Weapon("slash", "melee", 6, 2),
        "bayonet": Weapon("thrust", "melee", 8, 2),
        "rifle": Weapon("shoot", "ranged", 5, 1, {"bullets": 1}),
        "laser rifle": Weapon("blast", "ranged", 8, 1, {"energy cell": 1}),
        "grenade": Weapon("lob", "ranged", 15, 5, {"grenade": 1}),
        "bolas": Weapon("tangle", "ranged", "stun", 15, {"bolas": 1}),
    }
    return config


def _clamp(value: int, size: int) -> int:
    return max(0, min(value, size - 1))


def generate_map(
    config: WorldConfig, rng: random.Random | None = None
) -> list[list[TileType]]:
    """Grow terrain in rings outward from the village, then place landmarks."""
    if rng is None:
        rng = random.Random()
    size = config.size()
    world_map = [[TileType.BARRENS] * size for _ in range(size)]
    vx, vy = config.village_pos
    world_map[vx][vy] = TileType.VILLAGE

    for r in range(1, config.radius + 1):
        for t in range(r * 8):
            if t < 2 * r:
                x, y = vx - r + t, vy - r
            elif t < 4 * r:
                x, y = vx + r, vy - 3 * r + t
            elif t < 6 * r:
                x, y = vx + 5 * r - t, vy + r
            else:
                x, y = vx - r, vy + 7 * r - t
            x, y = _clamp(x, size), _clamp(y, size)
            world_map[x][y] = choose_tile(x, y, world_map, config, rng)

    place_landmarks(world_map, config, rng)
    return world_map


def choose_tile(
    x: int,
    y: int,
    world_map: list[list[TileType]],
    config: WorldConfig,
    rng: random.Random,
) -> TileType:
    """Pick a tile, favouring neighbouring kinds; tiles beside the village are forest."""
    size = len(world_map)
    neighbours = []
    if y > 0:
        neighbours.append(world_map[x][y - 1])
    if y < size - 1:
        neighbours.append(world_map[x][y + 1])
    if x < size - 1:
        neighbours.append(world_map[x + 1][y])
    if x > 0:
        neighbours.append(world_map[x - 1][y])

    chances: dict[TileType, float] = {}
    non_sticky = 1.0
    for tile in neighbours:
        if tile is TileType.VILLAGE:
            return TileType.FOREST
        chances[tile] = chances.get(tile, 0.0) + config.stickiness
        non_sticky -= config.stickiness

    for tile, prob in config.tile_probs.items():
        if is_terrain(tile):
            chances[tile] = chances.get(tile, 0.0) + prob * non_sticky

    roll = rng.random()
    cumulative = 0.0
    for tile, prob in sorted(chances.items(), key=lambda item: item[1], reverse=True):
        cumulative += prob
        if roll < cumulative:
            return tile
    return TileType.BARRENS


def place_landmarks(
    world_map: list[list[TileType]], config: WorldConfig, rng: random.Random
) -> None:
    """Place every configured landmark on the map, as many times as asked."""
    for tile, landmark in config.landmarks.items():
        for _ in range(landmark.num):
            place_landmark(world_map, tile, landmark, config.village_pos, rng)


def place_landmark(
    world_map: list[list[TileType]],
    tile: TileType,
    landmark: Landmark,
    village_pos: Position,
    rng: random.Random,
) -> Position:
    """Put one landmark on a terrain tile within its radius band; return where."""
    size = len(world_map)
    vx, vy = village_pos
    x, y = vx, vy
    attempts = 0
    while not is_terrain(world_map[x][y]):
        if attempts >= _MAX_PLACEMENT_ATTEMPTS:
            raise ValueError(f"no terrain tile found for {landmark.label!r}")
        attempts += 1
        r = rng.randint(landmark.min_radius, landmark.max_radius)
        x_dist = rng.randint(0, r)
        y_dist = r - x_dist
        if rng.random() < 0.5:
            x_dist = -x_dist
        if rng.random() < 0.5:
            y_dist = -y_dist
        x = _clamp(vx + x_dist, size)
        y = _clamp(vy + y_dist, size)
    world_map[x][y] = tile
    return x, y


def is_terrain(tile: TileType) -> bool:
    """Whether the tile is plain terrain rather than a landmark."""
    return tile in _TERRAIN


def new_mask(config: WorldConfig, scout: bool = False) -> list[list[bool]]:
    """A fog-of-war mask with only the area around the village revealed."""
    size = config.size()
    mask = [[False] * size for _ in range(size)]
    vx, vy = config.village_pos
    light_map(vx, vy, config, mask, scout)
    return mask


def light_map(
    x: int, y: int, config: WorldConfig, mask: list[list[bool]], scout: bool = False
) -> None:
    """Reveal the area around a point; scouts see twice as far."""
    radius = round(config.light_radius * (2.0 if scout else 1.0))
    uncover_map(x, y, radius, mask)


def uncover_map(x: int, y: int, radius: int, mask: list[list[bool]]) -> None:
    """Mark every cell within Manhattan distance ``radius`` of (x, y) as seen."""
    size = len(mask)
    if not (0 <= x < size and 0 <= y < size):
        raise IndexError(f"position ({x}, {y}) is outside the map")
    mask[x][y] = True
    for i in range(-radius, radius + 1):
        span = radius - abs(i)
        for j in range(-span, span + 1):
            nx, ny = x + i, y + j
            if 0 <= nx < size and 0 <= ny < size:
                mask[nx][ny] = True


def setup_world(
    rng: random.Random | None = None,
) -> tuple[WorldConfig, WorldState, Player]:
    """Build the default configuration, a generated world and a fresh player."""
    if rng is None:
        rng = random.Random()
    config = default_config()
    state = new_world_state(config)
    state.map = generate_map(config, rng)
    state.mask = new_mask(config)
    player = Player(
        max_health=config.base_health,
        hit_chance=config.base_hit_chance,
        max_water=config.base_water,
    )
    return config, state, player