"""Gravity Dash game logic: characters, world, objects, components and presets, stepped in milliseconds."""

__version__ = "0.1.0"