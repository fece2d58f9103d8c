"""Screen models, input controllers and animation logic for a helicopter rescue arcade game."""

__version__ = "0.1.0"

__all__ = [
    "util",
    "models",
    "floating_messages",
    "controllers",
    "game_over",
    "boss_intro",
]