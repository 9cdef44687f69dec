# darkroom

A small exploration game for the terminal. A square wasteland of forests,
fields and barrens is grown outward from a village, landmarks such as mines,
caves, towns, cities and a crashed starship are scattered at set distances,
and you walk the map one step at a time while the fog of war lifts around you.

## Installing

```
pip install .
```

## Playing

```
darkroom
```

The command builds the standard world, prints the revealed part of the map
and then reads keys from standard input, line by line:

- `w`, `a`, `s`, `d` step north, west, south and east; after each step the
  messages for that step and the map are printed again;
- space and `m` print notices that the background music is paused or muted;
- `q` stops.

Play ends when you step back onto the village tile or when the wanderer dies.

Options:

- `--seed N` seeds world generation, so the same seed gives the same map;
- `--moves KEYS` plays the given keys instead of reading standard input, for
  example `darkroom --seed 1 --moves ddds`.

In the text map `@` is you, `A` the village, `;` forest, `,` field, `.`
barrens, and capital letters mark landmarks (`I` iron mine, `C` coal mine,
`S` sulphur mine, `H` house, `V` cave, `O` town, `Y` city, `W` starship,
`B` borehole, `F` battlefield, `M` swamp, `P` outpost). Unexplored cells are
blank.

Each step outside uses up supplies: cured meat from the outfit and water.
Running out once brings starvation or thirst; running out again while already
starving or thirsty is fatal. The standard settings give no water, set no
interval between meals and drinks, and the command sets out with an empty
outfit, so an expedition started from the command line does not last long.

## Using it as a library

- `darkroom.world_gen.default_config()` returns the standard `WorldConfig`
  (radius 30, village at (30, 30), the landmark table and the weapon list).
- `darkroom.world_gen.generate_map(config, rng)` lays out a map with the
  `random.Random` you pass; `new_mask`, `light_map` and `uncover_map` handle
  the fog of war (a scout sees twice as far).
- `darkroom.world_gen.setup_world(rng)` returns a config, a `WorldState` with
  a generated map and mask, and a `Player`.
- `darkroom.movement.Expedition(config, state, game, rng)` drives a trip.
  `move(Direction.NORTH)` and friends return a `MoveOutcome` (`MOVED`,
  `FIGHT`, `HOME`, `DIED`, `BLOCKED` at the map edge, `DEAD` once dead).
  Messages collect in `expedition.messages`, and `expedition.next_state` is
  set to `AppState.PATH` on reaching home or `AppState.ROOM` on death.
  Perks held in `GameState.perks` ("slow metabolism", "desert rat",
  "gastronome", "stealthy", "scout") change supply use, healing, encounter
  chance and sight; armour in `GameState.resources` raises maximum health and
  pushes back how far out danger begins.
- On reaching home, `Expedition.go_home()` adds a mine building for each of
  the state's `iron_mine`, `coal_mine` and `sulphur_mine` flags that is set,
  puts the outfit into the stores and clears everything from it except food,
  ammunition, charms, medicine and weapons.
- `darkroom.render.render_text(config, state)` draws the revealed map as
  text; `render_world(config, state)` returns the same view as a layout of
  32-pixel coloured squares. `tile_symbol` and `tile_color` give each tile's
  look.

## What it does not do

- There is no sound: the music commands only print a notice.
- Encounters are only announced; there is no combat.
- Nothing sets the mine or starship flags while walking, so landmarks are not
  explored and returning home claims no mines unless the flags are set by
  the caller.
- Only the world map is playable: the village, room and path scenes that
  `AppState` names have no screens, and nothing is saved between runs.

## Running the tests

```
pip install .[test]
pytest
```