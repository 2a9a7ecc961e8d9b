"""Core pieces of a small 2D game engine: geometry, sprites, body data, viewports and save games."""

__version__ = "0.1.0"