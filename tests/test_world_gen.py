import random
from collections import Counter

import pytest

from darkroom.world import Landmark, TileType, WorldConfig
from darkroom.world_gen import (
    choose_tile,
    default_config,
    generate_map,
    is_terrain,
    light_map,
    new_mask,
    place_landmark,
    place_landmarks,
    setup_world,
    uncover_map,
)


@pytest.fixture(scope="module")
def generated():
    config = default_config()
    return config, generate_map(config, random.Random(7))


def _distance(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _positions(world_map, tile):
    return [
        (x, y)
        for x, column in enumerate(world_map)
        for y, cell in enumerate(column)
        if cell is tile
    ]


def test_default_config_values():
    config = default_config()
    assert config.radius == 30
    assert config.village_pos == (30, 30)
    assert config.stickiness == 0.5
    assert config.light_radius == 2
    assert config.base_health == 10
    assert config.fight_delay == 3


def test_default_weapons():
    weapons = default_config().weapons
    assert weapons["rifle"].cost == {"bullets": 1}
    assert weapons["bolas"].damage == "stun"
    assert weapons["fists"].cost is None
    assert weapons["grenade"].verb == "lob"


def test_default_landmark_labels():
    landmarks = default_config().landmarks
    assert landmarks[TileType.SHIP].label == "A Crashed Starship"
    assert landmarks[TileType.OUTPOST].num == 0


def test_map_is_square(generated):
    config, world_map = generated
    assert len(world_map) == config.size()
    assert all(len(column) == config.size() for column in world_map)


def test_single_village_at_configured_position(generated):
    config, world_map = generated
    assert _positions(world_map, TileType.VILLAGE) == [config.village_pos]


def test_landmark_counts_match_config(generated):
    config, world_map = generated
    counts = Counter(tile for column in world_map for tile in column)
    for tile, landmark in config.landmarks.items():
        assert counts[tile] == landmark.num


def test_fixed_radius_landmarks_at_exact_distance(generated):
    config, world_map = generated
    for tile in (TileType.IRON_MINE, TileType.COAL_MINE, TileType.SULPHUR_MINE, TileType.SHIP):
        expected = config.landmarks[tile].min_radius
        for pos in _positions(world_map, tile):
            assert _distance(pos, config.village_pos) == expected


def test_caves_within_radius_band(generated):
    config, world_map = generated
    band = config.landmarks[TileType.CAVE]
    for pos in _positions(world_map, TileType.CAVE):
        assert band.min_radius <= _distance(pos, config.village_pos) <= band.max_radius


def test_generation_is_deterministic_for_seed():
    config = default_config()
    first = generate_map(config, random.Random(3))
    second = generate_map(config, random.Random(3))
    assert first == second
    assert _positions(first, TileType.VILLAGE) == [config.village_pos]
    assert generate_map(config, random.Random(4)) != first


def test_is_terrain():
    assert is_terrain(TileType.FOREST)
    assert is_terrain(TileType.FIELD)
    assert is_terrain(TileType.BARRENS)
    assert not is_terrain(TileType.VILLAGE)
    assert not is_terrain(TileType.CAVE)


def test_choose_tile_next_to_village_is_forest():
    config = default_config()
    world_map = [[TileType.BARRENS] * 3 for _ in range(3)]
    world_map[1][1] = TileType.VILLAGE
    assert choose_tile(1, 0, world_map, config, random.Random(0)) is TileType.FOREST


def test_choose_tile_without_stickiness_follows_probabilities():
    config = WorldConfig(radius=2, stickiness=0.0, tile_probs={TileType.FIELD: 1.0})
    world_map = [[TileType.BARRENS] * 4 for _ in range(4)]
    rng = random.Random(1)
    assert all(choose_tile(2, 2, world_map, config, rng) is TileType.FIELD for _ in range(20))


def test_choose_tile_falls_back_to_barrens():
    config = WorldConfig(radius=2, stickiness=0.0, tile_probs={TileType.FIELD: 0.0})
    world_map = [[TileType.FOREST] * 4 for _ in range(4)]
    assert choose_tile(2, 2, world_map, config, random.Random(1)) is TileType.BARRENS


def test_place_landmark_returns_position_on_map():
    world_map = [[TileType.FIELD] * 11 for _ in range(11)]
    world_map[5][5] = TileType.VILLAGE
    landmark = Landmark(1, 3, 3, "cave", "A Damp Cave")
    pos = place_landmark(world_map, TileType.CAVE, landmark, (5, 5), random.Random(2))
    assert world_map[pos[0]][pos[1]] is TileType.CAVE
    assert _distance(pos, (5, 5)) == 3


def test_place_landmark_without_terrain_raises():
    world_map = [[TileType.VILLAGE] * 3 for _ in range(3)]
    landmark = Landmark(1, 1, 1, "cave", "A Damp Cave")
    with pytest.raises(ValueError):
        place_landmark(world_map, TileType.CAVE, landmark, (1, 1), random.Random(0))


def test_place_landmarks_places_each_count():
    config = WorldConfig(
        radius=5,
        village_pos=(5, 5),
        landmarks={TileType.HOUSE: Landmark(4, 1, 4, "house", "An Old House")},
    )
    world_map = [[TileType.BARRENS] * 10 for _ in range(10)]
    world_map[5][5] = TileType.VILLAGE
    place_landmarks(world_map, config, random.Random(5))
    assert len(_positions(world_map, TileType.HOUSE)) == 4


def test_uncover_map_reveals_diamond():
    mask = [[False] * 9 for _ in range(9)]
    uncover_map(4, 4, 2, mask)
    for x in range(9):
        for y in range(9):
            assert mask[x][y] == (_distance((x, y), (4, 4)) <= 2)


def test_uncover_map_at_corner_stays_in_bounds():
    mask = [[False] * 4 for _ in range(4)]
    uncover_map(0, 0, 3, mask)
    for x in range(4):
        for y in range(4):
            assert mask[x][y] == (x + y <= 3)


def test_uncover_map_outside_raises():
    mask = [[False] * 4 for _ in range(4)]
    with pytest.raises(IndexError):
        uncover_map(4, 0, 1, mask)


def test_new_mask_scout_sees_further():
    config = default_config()
    plain = new_mask(config)
    scouted = new_mask(config, scout=True)
    assert plain[30][32] is True
    assert plain[30][34] is False
    assert scouted[30][34] is True


def test_light_map_marks_new_position():
    config = default_config()
    mask = new_mask(config)
    assert mask[10][10] is False
    light_map(10, 10, config, mask)
    assert mask[10][10] is True
    assert mask[10][12] is True


def test_setup_world():
    config, state, player = setup_world(random.Random(11))
    assert state.cur_pos == config.village_pos
    assert state.map[30][30] is TileType.VILLAGE
    assert state.mask[30][30] is True
    assert player.max_health == config.base_health
    assert player.hit_chance == config.base_hit_chance