"""Command-line entry point: set up the world and wander it from the keyboard."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator

from .movement import Direction, Expedition, MoveOutcome
from .render import render_text
from .world import GameState
from .world_gen import setup_world

TITLE = "A Dark Room"
MUSIC_TRACK = "sounds/tiny-village.flac"

_KEYS = {
    "w": Direction.NORTH,
    "s": Direction.SOUTH,
    "a": Direction.WEST,
    "d": Direction.EAST,
}


def play_background_music() -> str:
    """Announce the background track and return the announcement."""
    message = f"Playing background music: {MUSIC_TRACK}"
    print(message)
    return message


def pause_background_music() -> str:
    """Announce that the background music is paused."""
    message = "Background music paused (space)"
    print(message)
    return message


def mute_background_music() -> str:
    """Announce that the background music is muted without pausing it."""
    message = "Background music muted (M)"
    print(message)
    return message


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="darkroom", description="Wander the dark world.")
    parser.add_argument("--seed", type=int, default=None, help="seed for world generation")
    parser.add_argument(
        "--moves",
        default=None,
        help="keys to play instead of reading standard input (w/a/s/d, space, m, q)",
    )
    return parser


def _stdin_keys() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.rstrip("\n")


def _play(expedition: Expedition, keys: Iterable[str]) -> None:
    config, state = expedition.config, expedition.state
    for key in keys:
        key = key.lower()
        if key == "q":
            return
        if key == " ":
            pause_background_music()
            continue
        if key == "m":
            mute_background_music()
            continue
        direction = _KEYS.get(key)
        if direction is None:
            continue
        outcome = expedition.move(direction)
        for message in expedition.messages:
            print(message)
        expedition.messages.clear()
        print(render_text(config, state))
        if outcome in (MoveOutcome.HOME, MoveOutcome.DIED):
            return


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    rng = random.Random(args.seed)
    config, state, _player = setup_world(rng)
    expedition = Expedition(config, state, GameState(), rng)

    print(TITLE)
    play_background_music()
    print(render_text(config, state))
    _play(expedition, args.moves if args.moves is not None else _stdin_keys())
    return 0


if __name__ == "__main__":
    sys.exit(main())