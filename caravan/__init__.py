"""Caravan: a turn-based wagon-trail journey simulation."""

__version__ = "1.0.0"
