"""Klondike solitaire played in a terminal with ASCII-art cards."""

__version__ = "0.1.0"
__all__ = ["ansi", "cards", "cli", "graphics", "klondike", "set_once", "tableau"]