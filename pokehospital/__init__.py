"""Pokemon hospital simulator, its data structures and a level-guessing terminal game."""

__version__ = "0.1.0"