"""Kingfall - a rules engine and board for a king-capture chess variant."""

__version__ = "0.1.0"
