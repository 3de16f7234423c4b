"""A tile-map side-scrolling platformer with sprite animation and box collisions."""

__version__ = "0.1.0"