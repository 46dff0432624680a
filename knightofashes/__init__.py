"""A side-scrolling action RPG drawn with pygame, with tile maps, bonfires and mobs."""

__version__ = "0.1.0"
__all__ = ["__version__"]