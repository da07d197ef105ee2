"""Spades for one human and three bots: rules, scoring, AI and game flow."""

__version__ = "0.1.0"
