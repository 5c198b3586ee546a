"""Terminal arcade game: collect scrap and dodge asteroids on an 18x18 map."""

__version__ = "1.0.0"