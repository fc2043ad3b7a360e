"""A simple chess engine with a minimax AI, a terminal game and a Flask JSON API."""

__version__ = "0.2.0"