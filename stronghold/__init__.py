"""Text-mode kingdom management game with single-player and hot-seat multiplayer modes."""

__version__ = "0.1.0"