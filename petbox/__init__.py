"""A terminal virtual pet to play with, feed and keep healthy."""

__version__ = "0.1.0"