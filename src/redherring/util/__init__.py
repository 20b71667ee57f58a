"""Small shared helpers."""

from redherring.util.rng import Rng

__all__ = ["Rng"]
