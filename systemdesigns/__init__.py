"""Object-oriented models of an elevator system, a parking lot and tic-tac-toe."""

__version__ = "0.1.0"