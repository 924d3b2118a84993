"""Cellular automaton simulation with pluggable rules, boundaries and neighborhoods."""

__version__ = "0.1.0"