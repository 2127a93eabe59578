"""Package initializer for the game package.

This module provides a small, lazy convenience export so external code can
do::

	from game import SnakeApp

without importing pygame at package import time. The engine modules stay
importable on machines without a display.
"""

__version__ = "1.0"

__all__ = ["SnakeApp"]

def __getattr__(name: str):
	if name == "SnakeApp":
		from .app import SnakeApp

		return SnakeApp
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__():
	return sorted(__all__)
