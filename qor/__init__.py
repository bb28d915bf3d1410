"""Game engine pieces: input switches and controllers, prefab geometry, path helpers, headless flags and audio error strings."""

__version__ = "0.1.0"