"""A two-player Ludo board game, a human against a computer opponent, drawn with pygame."""

__version__ = "0.1.0"