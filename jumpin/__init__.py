"""A small jumping game: scenes, CSV stages, colliders and a pygame front end."""

__version__ = "0.1.0"