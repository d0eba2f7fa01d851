"""Delve: a data-driven, turn-based text adventure."""

__version__ = "0.1.0"
