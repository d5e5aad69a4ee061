"""Disaster-supply planning by backtracking, with network parsing, a console demo, and shift, colour, font and styled-text helpers."""

__version__ = "0.1.0"