"""Doubt-Othello: Othello against an AI that sometimes cheats."""

__version__ = "0.1.0"
