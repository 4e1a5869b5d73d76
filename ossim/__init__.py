"""Simulators for classic operating-system and systems-programming exercises."""

__version__ = "0.1.0"