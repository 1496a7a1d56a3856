"""A first-person raycasting exploration game: maps, physics, software rendering and sound."""

__version__ = "0.1.0"