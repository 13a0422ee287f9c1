"""Game state and rules engine for a Cluedo-style murder-mystery board game."""

__version__ = "0.1.0"