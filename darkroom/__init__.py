"""A terminal exploration game: world generation, movement and a text map."""

__version__ = "0.1.0"