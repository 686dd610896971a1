"""A brick-breaking arcade game with power-ups, lasers and per-level best scores."""

__version__ = "0.1.0"