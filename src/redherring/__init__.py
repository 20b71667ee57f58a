"""Deduction and dialogue engine for a three-person murder mystery."""

__version__ = "0.1.0"
