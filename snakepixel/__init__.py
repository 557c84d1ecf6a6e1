"""A pixel-grid snake game: grid, snake and menu logic with a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]