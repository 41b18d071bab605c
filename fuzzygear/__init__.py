"""Fuzzy-logic gear selection from velocity, engine RPM and throttle: sets, rules, inference and a command line."""

__version__ = "0.1.0"
__all__ = ["sets", "rules", "shift", "cli"]