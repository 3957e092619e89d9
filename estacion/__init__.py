"""A space-station grid puzzle game with an A* demonstration bot."""

__version__ = "0.1.0"