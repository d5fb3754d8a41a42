"""Game-logic core for a castle-defence strategy game: timers, tweens, animation states, warriors and territory."""

__version__ = "0.1.0"