"""Static Decay: a turn-based survival game in the static."""

__version__ = "0.1.0"
