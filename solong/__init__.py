"""A tile-based puzzle game: map loading and checks, game state, and a pygame window."""

__version__ = "0.1.0"
__all__ = ["mapfile", "game", "display"]